"""
Keyboard-Walk Detector
=======================

Detects strings typed along a single row of a US QWERTY keyboard.

Two checks are applied:

1. The whole input is a contiguous slice of a row, forwards or
   backwards (``qwerty``, ``lkjh``, ``0987``).
2. Four or more consecutive input characters all belong to the same
   row, in any order (``wqre``, ``sadf``). Row members need not be
   adjacent on the keyboard; this looser check is kept as-is.
"""

from __future__ import annotations

from pwcheck.analyzers.charset import ascii_lower

KEYBOARD_ROWS: tuple[str, ...] = (
    "qwertyuiop",
    "asdfghjkl",
    "zxcvbnm",
    "1234567890",
)

# Minimum same-row run length for the second check
MIN_ROW_RUN: int = 4


def looks_like_keyboard_walk(s: str) -> bool:
    """Return True if *s* looks like a walk along one keyboard row.

    Args:
        s: Password (lowercased internally).
    """
    low = ascii_lower(s)

    for row in KEYBOARD_ROWS:
        if low in row or low in row[::-1]:
            return True

    for row in KEYBOARD_ROWS:
        run = 0
        for c in low:
            if c in row:
                run += 1
                if run >= MIN_ROW_RUN:
                    return True
            else:
                run = 0
    return False
