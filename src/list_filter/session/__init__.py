"""
Session and request adapters for the filter accumulator.

Implementations of the FilterSession / FilterRequest protocols:

- DictSession: remembered values inside any dict-like session
- MappingRequest: already-nested parameters (tests, JSON bodies)
- HttpRequestParams: bracket-notation query parameters
- parse_query_string(): HttpRequestParams from a raw query string
- from_request(): HttpRequestParams from a Django/Flask/Starlette request
- accumulator_for(): FilterAccumulator wired to a framework request

Example:
    >>> from list_filter.session import DictSession, parse_query_string
    >>> from list_filter.filter import FilterAccumulator
    >>>
    >>> session = {}
    >>> request = parse_query_string("filter_by[author_id]=3", path="/books")
    >>> filter_by = FilterAccumulator(request, DictSession(session)).register("author_id")
    >>> session
    {'filter_by': {'author_id': {'/books': 3}}}
"""

from list_filter.session.http import accumulator_for, from_request
from list_filter.session.request import (
    HttpRequestParams,
    MappingRequest,
    parse_bracket_params,
    parse_query_string,
)
from list_filter.session.store import DictSession

__all__ = [
    "DictSession",
    "HttpRequestParams",
    "MappingRequest",
    "accumulator_for",
    "from_request",
    "parse_bracket_params",
    "parse_query_string",
]
