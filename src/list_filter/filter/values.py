"""
Parsing of raw request values into filter values.
"""

from __future__ import annotations

import re
from typing import Any

_INTEGER_RE = re.compile(r"[0-9]+")


def is_blank(value: Any) -> bool:
    """Check whether a raw value counts as "nothing submitted".

    None, empty or whitespace-only strings, and empty sequences are blank.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def parse_value(raw: str) -> int | str:
    """Parse a submitted string.

    Strings made only of ASCII digits become ints, anything else is
    returned unchanged.

    Example:
        >>> parse_value("42")
        42
        >>> parse_value("-3")
        '-3'
    """
    if _INTEGER_RE.fullmatch(raw):
        return int(raw)
    return raw


def clean_incoming(raw: Any) -> Any:
    """Turn a submitted filter value into the value used for filtering.

    Args:
        raw: Value from the request filter group

    Returns:
        None for blank input, a list with blank entries removed for
        sequences, a parsed value for strings, or the input unchanged
    """
    if is_blank(raw):
        return None
    if isinstance(raw, (list, tuple)):
        return [v for v in raw if not is_blank(v)]
    if isinstance(raw, str):
        return parse_value(raw)
    return raw
