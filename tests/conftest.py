"""
Pytest configuration and shared fixtures for list-filter.

This module provides:
- Session stores and request factories for driving the accumulator
- Filter settings with the default placeholder and groups
- A temporary SQLite database holding a small book list

Example usage in tests:
    def test_something(make_filter):
        filter_by = make_filter({"author_id": "3"})
        filter_by.register("author_id")
        assert filter_by.conditions().values == (3,)
"""

from __future__ import annotations

import sqlite3
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from list_filter.config.settings import FilterSettings
from list_filter.filter.accumulator import FilterAccumulator
from list_filter.session import DictSession, MappingRequest
from tests.fixtures.books import BOOK_ROWS, CREATE_BOOKS_SQL, INSERT_BOOK_SQL

# ============================================================================
# FILTER FIXTURES
# ============================================================================


@pytest.fixture
def filter_settings() -> FilterSettings:
    """Provide default filter settings.

    Returns:
        FilterSettings with the ``filter_by`` group and ``?`` placeholder
    """
    return FilterSettings()


@pytest.fixture
def session_store() -> dict[str, Any]:
    """Provide an empty framework-style session mapping."""
    return {}


@pytest.fixture
def make_filter(
    session_store: dict[str, Any],
    filter_settings: FilterSettings,
) -> Callable[..., FilterAccumulator]:
    """Provide a factory for accumulators sharing one session.

    The factory takes the submitted ``filter_by`` group (None for a request
    that did not submit the form) and the request path.

    Returns:
        Factory function
    """

    def _make(
        submitted: dict[str, Any] | None = None,
        path: str = "/books",
        constraints: str = "",
    ) -> FilterAccumulator:
        params = {} if submitted is None else {"filter_by": submitted}
        return FilterAccumulator(
            MappingRequest(params, path=path),
            DictSession(session_store),
            constraints=constraints,
            settings=filter_settings,
        )

    return _make


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def temp_db(tmp_path: Path) -> Iterator[sqlite3.Connection]:
    """Provide a connection to a temporary SQLite database.

    Yields:
        sqlite3 connection in a temp directory, closed after the test
    """
    connection = sqlite3.connect(tmp_path / "test.db")
    yield connection
    connection.close()


@pytest.fixture
def books_db(temp_db: sqlite3.Connection) -> sqlite3.Connection:
    """Provide a database with a populated ``books`` table.

    Contains the rows in tests.fixtures.books.BOOK_ROWS.

    Returns:
        Connection to the populated database
    """
    temp_db.execute(CREATE_BOOKS_SQL)
    temp_db.executemany(INSERT_BOOK_SQL, BOOK_ROWS)
    temp_db.commit()
    return temp_db


# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "unit: mark as unit test")
