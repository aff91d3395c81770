"""
Dict-backed filter session.

Remembered values live in a nested mapping inside the framework session:

    session["filter_by"]["author_id"]["/books"] = 3
    session["filter_by"]["author_id"]["/admin/books"] = 7

Works with anything dict-like: a plain dict, Django's ``request.session``
or Flask's ``session``.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any


class DictSession:
    """FilterSession over a mutable mapping.

    The top-level entry is replaced on every write rather than mutated in
    place, and ``modified`` is set when the store has that attribute, so
    Django and Flask sessions notice nested changes.

    Attributes:
        store: The wrapped session mapping
        key: Top-level key holding all remembered filter values
    """

    def __init__(self, store: MutableMapping[str, Any], key: str = "filter_by"):
        self.store = store
        self.key = key

    def _by_field(self) -> Mapping[str, Any]:
        by_field = self.store.get(self.key)
        return by_field if isinstance(by_field, Mapping) else {}

    def get_value(self, field: str, path: str, default: Any = None) -> Any:
        """Return the value remembered for ``field`` under ``path``."""
        by_path = self._by_field().get(field)
        if not isinstance(by_path, Mapping):
            return default
        return by_path.get(path, default)

    def set_value(self, field: str, path: str, value: Any) -> None:
        """Remember ``value`` for ``field`` under ``path``."""
        by_field = dict(self._by_field())
        by_path = by_field.get(field)
        by_path = dict(by_path) if isinstance(by_path, Mapping) else {}

        by_path[path] = list(value) if isinstance(value, tuple) else value
        by_field[field] = by_path

        self._write(by_field)

    def clear(self, path: str | None = None) -> None:
        """Forget remembered values.

        Args:
            path: Only forget values stored for this path. All values
                are forgotten when not given.
        """
        if path is None:
            self._write({})
            return

        by_field = {}
        for field, by_path in self._by_field().items():
            if not isinstance(by_path, Mapping):
                continue
            remaining = {p: v for p, v in by_path.items() if p != path}
            if remaining:
                by_field[field] = remaining

        self._write(by_field)

    def _write(self, by_field: dict[str, Any]) -> None:
        self.store[self.key] = by_field
        if hasattr(self.store, "modified"):
            self.store.modified = True

    def __repr__(self) -> str:
        return f"DictSession(key={self.key!r})"
