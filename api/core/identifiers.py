"""
Normalization of user-supplied lookup keys.

The SQL side always compares `lower(column)`; these helpers put the
parameter in the same case so matching is case-insensitive end to end.
"""

from __future__ import annotations

LIKE_ESCAPE = "\\"


def normalize_ref(ref: str) -> str:
    return (ref or "").strip().lower()


def prefix_pattern(fragment: str) -> str:
    """
    Case-folded LIKE pattern matching values that start with `fragment`.

    Whitespace is kept as typed. `%` and `_` typed by the user are matched
    literally.
    """
    text = (fragment or "").lower()
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"{escaped}%"
