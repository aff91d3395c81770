"""
list-filter

Painless list filtering for web list views.

A list view shows many records and lets users narrow them with checkboxes,
selects and text boxes. list-filter gathers the submitted filter form,
remembers the choices in the session per request path, and builds the
parameterized SQL conditions that constrain the list.

Features:
- Request value > remembered value > default precedence per field
- Path-scoped session memory, so each list view keeps its own filters
- Custom SQL fragments with bound (never interpolated) values
- Adapters for Django, Flask and Starlette style requests
- List query helpers returning pandas DataFrames from any DB-API connection

Example:
    >>> from list_filter import FilterAccumulator, DictSession, MappingRequest
    >>>
    >>> request = MappingRequest({"filter_by": {"author_id": "3", "title": "%dune%"}}, "/books")
    >>> filter_by = FilterAccumulator(request, DictSession(session))
    >>> filter_by.register("author_id")
    >>> filter_by.register("title", sql="title LIKE ?")
    >>> filter_by.register("min_year", sql="year >= ?", default=1900)
    >>>
    >>> books = find_all(connection, "books", filter_by.conditions())
"""

__version__ = "1.0.0"

from list_filter.config.settings import FilterSettings, Settings, get_settings
from list_filter.filter.accumulator import Conditions, FieldSpec, FilterAccumulator
from list_filter.filter.protocol import FilterRequest, FilterSession
from list_filter.query.listing import build_select, count, find_all
from list_filter.session.http import accumulator_for, from_request
from list_filter.session.request import HttpRequestParams, MappingRequest, parse_query_string
from list_filter.session.store import DictSession
from list_filter.utils.logging import setup_logging

__all__ = [
    "Conditions",
    "DictSession",
    "FieldSpec",
    "FilterAccumulator",
    "FilterRequest",
    "FilterSession",
    "FilterSettings",
    "HttpRequestParams",
    "MappingRequest",
    "Settings",
    "__version__",
    "accumulator_for",
    "build_select",
    "count",
    "find_all",
    "from_request",
    "get_settings",
    "parse_query_string",
    "setup_logging",
]
