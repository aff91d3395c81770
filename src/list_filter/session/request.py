"""
Request adapters that do not depend on a web framework.

- MappingRequest: parameters already nested as ``{"filter_by": {...}}``
- HttpRequestParams: flat multi-value query parameters using bracket
  notation, ``filter_by[author_id]=3&filter_by[tags][]=a&filter_by[tags][]=b``
- parse_query_string(): HttpRequestParams from a raw query string
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any
from urllib.parse import parse_qsl


def parse_bracket_params(
    pairs: Iterable[tuple[str, Any]],
    group: str,
) -> dict[str, Any] | None:
    """Collect the filter group from flat bracket-notation parameters.

    ``group[field]`` gives a single value (the last one wins) and
    ``group[field][]`` gives a list.

    Args:
        pairs: (key, value) pairs in submission order
        group: Parameter group name, e.g. ``filter_by``

    Returns:
        Mapping of field to value, or None if no parameter of the group
        was submitted

    Example:
        >>> parse_bracket_params([("filter_by[tags][]", "a"), ("page", "2")], "filter_by")
        {'tags': ['a']}
    """
    pattern = re.compile(rf"{re.escape(group)}\[([^\[\]]+)\](\[\])?")
    result: dict[str, Any] = {}
    found = False

    for key, value in pairs:
        match = pattern.fullmatch(key)
        if match is None:
            continue

        found = True
        field, is_list = match.group(1), match.group(2) is not None

        if is_list:
            current = result.get(field)
            if not isinstance(current, list):
                current = []
                result[field] = current
            current.append(value)
        else:
            result[field] = value

    return result if found else None


class MappingRequest:
    """FilterRequest over an already-nested parameter mapping.

    Example:
        >>> request = MappingRequest({"filter_by": {"author_id": "3"}}, path="/books")
        >>> request.filter_params("filter_by")
        {'author_id': '3'}
    """

    def __init__(self, params: Mapping[str, Any] | None = None, path: str = "/"):
        self.params = params or {}
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def filter_params(self, group: str) -> Mapping[str, Any] | None:
        value = self.params.get(group)
        return value if isinstance(value, Mapping) else None

    def __repr__(self) -> str:
        return f"MappingRequest(path={self._path!r})"


def _iter_pairs(query: Any) -> Iterator[tuple[str, Any]]:
    """Yield (key, value) pairs from a multi-value mapping.

    Understands Django ``QueryDict`` and werkzeug ``MultiDict`` (``lists()``),
    Starlette ``QueryParams`` (``multi_items()``), plain mappings whose
    values may be lists, and sequences of pairs.
    """
    if hasattr(query, "lists"):
        for key, values in query.lists():
            for value in values:
                yield key, value
    elif hasattr(query, "multi_items"):
        yield from query.multi_items()
    elif isinstance(query, Mapping):
        for key, value in query.items():
            if isinstance(value, (list, tuple)):
                for item in value:
                    yield key, item
            else:
                yield key, value
    else:
        yield from query


class HttpRequestParams:
    """FilterRequest over flat, bracket-notation query parameters.

    Attributes:
        query: Multi-value parameter mapping
    """

    def __init__(self, query: Any, path: str = "/"):
        self.query = query
        self._path = path
        self._groups: dict[str, Mapping[str, Any] | None] = {}

    @property
    def path(self) -> str:
        return self._path

    def filter_params(self, group: str) -> Mapping[str, Any] | None:
        if group not in self._groups:
            nested = self.query.get(group) if isinstance(self.query, Mapping) else None
            if isinstance(nested, Mapping):
                self._groups[group] = dict(nested)
            else:
                self._groups[group] = parse_bracket_params(_iter_pairs(self.query), group)
        return self._groups[group]

    def __repr__(self) -> str:
        return f"HttpRequestParams(path={self._path!r})"


def parse_query_string(query_string: str, path: str = "/") -> HttpRequestParams:
    """Build a FilterRequest from a raw query string.

    Blank values are kept so that submitting an empty field clears it.

    Example:
        >>> request = parse_query_string("filter_by[author_id]=&filter_by[year]=1999", "/books")
        >>> request.filter_params("filter_by")
        {'author_id': '', 'year': '1999'}
    """
    return HttpRequestParams(parse_qsl(query_string, keep_blank_values=True), path)
