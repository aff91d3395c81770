"""
Request and session protocols for the filter accumulator.

The accumulator never touches framework objects directly. It talks to two
narrow interfaces, which keeps it testable without a running web framework:

- FilterRequest: the current request path and the submitted filter group
- FilterSession: path-scoped get/set of remembered filter values

Adapters for plain dicts and for Django/Flask-style requests live in
`list_filter.session`.

Example - Implementing a custom session backend:
    >>> class RedisFilterSession:
    ...     def __init__(self, client, user_id):
    ...         self.client = client
    ...         self.user_id = user_id
    ...
    ...     def get_value(self, field, path, default=None):
    ...         raw = self.client.hget(f"filters:{self.user_id}:{path}", field)
    ...         return default if raw is None else json.loads(raw)
    ...
    ...     def set_value(self, field, path, value):
    ...         self.client.hset(f"filters:{self.user_id}:{path}", field, json.dumps(value))
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FilterSession(Protocol):
    """Path-scoped storage for remembered filter values.

    Values are keyed by field name and request path, so two list views
    filtering on the same field keep independent state.
    """

    def get_value(self, field: str, path: str, default: Any = None) -> Any:
        """Return the value stored for ``field`` under ``path``.

        Args:
            field: Filter field name
            path: Request path the value was stored under
            default: Returned when nothing is stored

        Returns:
            Stored value (which may itself be None) or ``default``
        """
        ...

    def set_value(self, field: str, path: str, value: Any) -> None:
        """Store ``value`` for ``field`` under ``path``."""
        ...


@runtime_checkable
class FilterRequest(Protocol):
    """Read-only view of the incoming request."""

    @property
    def path(self) -> str:
        """Request path without query string, e.g. ``/books``."""
        ...

    def filter_params(self, group: str) -> Mapping[str, Any] | None:
        """Return the submitted filter group.

        Args:
            group: Parameter group name, e.g. ``filter_by``

        Returns:
            Mapping of field name to raw value (string or list of strings),
            or None if the group was not submitted at all
        """
        ...
