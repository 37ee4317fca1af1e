"""
Repeated-Chunk Detector
========================

Flags strings made entirely of one chunk repeated, e.g. ``aaaaaa`` or
``abcabcabc``.
"""

from __future__ import annotations


def looks_like_repeated_chunk(s: str) -> bool:
    """Return True if some chunk of length <= len(s)/2 tiles *s* exactly.

    Only chunk lengths that evenly divide ``len(s)`` are tried, so
    strings shorter than two characters never match.

    Args:
        s: Lowercased password.
    """
    n = len(s)
    for size in range(1, n // 2 + 1):
        if n % size:
            continue
        if s[:size] * (n // size) == s:
            return True
    return False
