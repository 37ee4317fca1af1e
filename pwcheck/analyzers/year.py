"""
Year Detector
==============

Flags four-digit years between 1990 and 2099, a common and predictable
password suffix (``summer2024``).
"""

from __future__ import annotations

from pwcheck.analyzers.charset import is_ascii_digit

YEAR_MIN: int = 1990
YEAR_MAX: int = 2099


def contains_year_suffix(s: str) -> bool:
    """Return True if any 4 consecutive ASCII digits form a year in range.

    Despite the name the year may appear anywhere in *s*. Only digits are
    inspected, so case does not matter.
    """
    for i in range(len(s) - 3):
        chunk = s[i : i + 4]
        if all(is_ascii_digit(c) for c in chunk):
            if YEAR_MIN <= int(chunk) <= YEAR_MAX:
                return True
    return False
