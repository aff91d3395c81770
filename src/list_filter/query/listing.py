"""
List queries driven by filter conditions.

The host application owns the database connection. These helpers only turn
a FilterAccumulator's conditions into a SELECT and run it on a DB-API 2.0
connection (``sqlite3``, ``psycopg``, Django's ``connection``, ...), returning
pandas DataFrames ready for rendering.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from ..utils.logging import get_logger

if TYPE_CHECKING:
    import pandas as pd

    from ..filter.accumulator import Conditions

logger = get_logger(__name__)

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?")


def _check_identifier(name: str, what: str) -> str:
    if not _IDENTIFIER_RE.fullmatch(name):
        raise ValueError(f"Invalid {what}: {name!r}")
    return name


def build_select(
    table: str,
    conditions: Conditions,
    *,
    columns: str = "*",
    order_by: str | None = None,
    order_desc: bool = False,
    limit: int | None = None,
    offset: int | None = None,
    placeholder: str = "?",
) -> tuple[str, tuple[Any, ...]]:
    """Generate a SELECT statement for a filtered list.

    Args:
        table: Table or view to query
        conditions: Conditions from FilterAccumulator.conditions()
        columns: Column list for the SELECT
        order_by: Column to sort by
        order_desc: Sort descending
        limit: Maximum rows
        offset: Rows to skip
        placeholder: Placeholder for the bound LIMIT/OFFSET values. Must
            match the one used in the conditions.

    Returns:
        Tuple of (SQL query, parameters)

    Raises:
        ValueError: If table or order_by is not a plain identifier, or
            limit/offset are negative
    """
    _check_identifier(table, "table")

    sql = f"SELECT {columns} FROM {table} WHERE {conditions.sql}"
    params = list(conditions.params)

    if order_by:
        _check_identifier(order_by, "order_by column")
        direction = "DESC" if order_desc else "ASC"
        sql += f" ORDER BY {order_by} {direction}"

    if limit is not None:
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        sql += f" LIMIT {placeholder}"
        params.append(limit)

    if offset is not None:
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        if limit is None:
            sql += " LIMIT -1"
        sql += f" OFFSET {placeholder}"
        params.append(offset)

    return sql, tuple(params)


def _fetch(connection: Any, sql: str, params: tuple[Any, ...]) -> tuple[list[str], list[tuple]]:
    """Run a query, returning column names and rows as tuples."""
    cursor = connection.cursor()
    try:
        cursor.execute(sql, params)
        columns = [description[0] for description in cursor.description]
        rows = [tuple(row) for row in cursor.fetchall()]
    finally:
        cursor.close()
    return columns, rows


def find_all(
    connection: Any,
    table: str,
    conditions: Conditions,
    **kwargs: Any,
) -> pd.DataFrame:
    """Fetch the rows of a table matching the conditions.

    Args:
        connection: DB-API connection owned by the caller
        table: Table or view to query
        conditions: Conditions from FilterAccumulator.conditions()
        **kwargs: Passed to build_select (columns, order_by, limit, ...)

    Returns:
        DataFrame of matching rows. Keeps the selected columns when
        nothing matches.
    """
    import pandas as pd

    sql, params = build_select(table, conditions, **kwargs)
    columns, rows = _fetch(connection, sql, params)

    logger.debug("list_queried", table=table, results=len(rows))

    return pd.DataFrame.from_records(rows, columns=columns)


def count(connection: Any, table: str, conditions: Conditions, *, placeholder: str = "?") -> int:
    """Count the rows of a table matching the conditions."""
    sql, params = build_select(table, conditions, columns="COUNT(*)", placeholder=placeholder)
    _, rows = _fetch(connection, sql, params)
    return rows[0][0] if rows else 0
