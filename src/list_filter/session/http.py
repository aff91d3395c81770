"""
Glue for framework request objects.

Duck-typed, so no web framework is imported:

- Django: ``request.GET``, ``request.path``, ``request.session``
- Flask: ``request.args``, ``request.path``, ``flask.session`` (pass explicitly)
- Starlette: ``request.query_params``, ``request.url.path``, ``request.session``

Example (Django view):
    >>> def book_list(request):
    ...     filter_by = accumulator_for(request)
    ...     filter_by.register("author_id")
    ...     filter_by.register("title", sql="title LIKE ?")
    ...     books = find_all(connection, "books", filter_by.conditions())
    ...     return render(request, "books/list.html", {"filter_by": filter_by, "books": books})
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any

from ..filter.accumulator import FilterAccumulator
from .request import HttpRequestParams
from .store import DictSession

if TYPE_CHECKING:
    from ..config.settings import FilterSettings


def from_request(request: Any) -> HttpRequestParams:
    """Wrap a framework request as a FilterRequest.

    Args:
        request: Django, Flask or Starlette request

    Returns:
        HttpRequestParams reading the query string of the request
    """
    if hasattr(request, "GET"):
        query = request.GET
    elif hasattr(request, "args"):
        query = request.args
    elif hasattr(request, "query_params"):
        query = request.query_params
    else:
        raise TypeError(f"Cannot read query parameters from {type(request).__name__}")

    path = getattr(request, "path", None)
    if path is None:
        path = request.url.path

    return HttpRequestParams(query, path)


def accumulator_for(
    request: Any,
    session: MutableMapping[str, Any] | None = None,
    *,
    constraints: str = "",
    settings: FilterSettings | None = None,
) -> FilterAccumulator:
    """Create a FilterAccumulator for a framework request.

    Args:
        request: Django, Flask or Starlette request
        session: Session mapping. Defaults to ``request.session``.
        constraints: SQL always applied to the list
        settings: Filter settings (loaded settings if not given)

    Returns:
        FilterAccumulator ready for field registration
    """
    if settings is None:
        from ..config.settings import get_settings

        settings = get_settings().filter

    if session is None:
        session = request.session

    return FilterAccumulator(
        from_request(request),
        DictSession(session, key=settings.session_key),
        constraints=constraints,
        settings=settings,
    )
