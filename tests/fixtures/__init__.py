"""
Test fixtures for list-filter.

This module provides:
- Sample book table: schema, insert statement and rows
"""

from tests.fixtures.books import BOOK_ROWS, CREATE_BOOKS_SQL, INSERT_BOOK_SQL

__all__ = [
    "BOOK_ROWS",
    "CREATE_BOOKS_SQL",
    "INSERT_BOOK_SQL",
]
