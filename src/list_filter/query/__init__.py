"""
Query utilities for list-filter.

- build_select(table, conditions): SELECT statement and parameters
- find_all(connection, table, conditions): matching rows as a DataFrame
- count(connection, table, conditions): number of matching rows

The connection is any DB-API connection the application already has.

Example:
    >>> from list_filter.query import count, find_all
    >>>
    >>> conditions = filter_by.conditions()
    >>> books = find_all(connection, "books", conditions, order_by="year", limit=50)
    >>> print(f"Showing {len(books)} of {count(connection, 'books', conditions)} books")
"""

from list_filter.query.listing import build_select, count, find_all

__all__ = [
    "build_select",
    "count",
    "find_all",
]
