"""
Filter accumulation for list views.

Turns the submitted filter form of a list view into a parameterized
WHERE clause, remembering each field's value in the session per path:

- FilterAccumulator: register fields, then ask for the conditions
- FieldSpec: declaration of a single filterable field
- Conditions: SQL fragment plus bound values
- FilterRequest / FilterSession: the interfaces the accumulator needs

Example:
    >>> from list_filter.filter import FilterAccumulator
    >>> from list_filter.session import DictSession, MappingRequest
    >>>
    >>> request = MappingRequest({"filter_by": {"author_id": "3"}}, path="/books")
    >>> filter_by = (
    ...     FilterAccumulator(request, DictSession({}))
    ...     .register("author_id")
    ...     .register("title", sql="title LIKE ?")
    ... )
    >>> filter_by.conditions().to_list()
    ['((author_id = ? AND title LIKE ?))', 3, None]
"""

from list_filter.filter.accumulator import Conditions, FieldSpec, FilterAccumulator
from list_filter.filter.protocol import FilterRequest, FilterSession
from list_filter.filter.values import clean_incoming, is_blank, parse_value

__all__ = [
    "Conditions",
    "FieldSpec",
    "FilterAccumulator",
    "FilterRequest",
    "FilterSession",
    "clean_incoming",
    "is_blank",
    "parse_value",
]
