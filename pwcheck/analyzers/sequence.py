"""
Sequence Detector
==================

Flags runs of consecutive code points such as ``abcd`` or ``4321``.
"""

from __future__ import annotations

# Minimum run length that counts as a sequence
MIN_RUN: int = 4


def looks_like_sequence(s: str) -> bool:
    """Return True if *s* holds a run of 4+ characters stepping by +1 or -1.

    Each direction is scanned separately; a run resets whenever an
    adjacent pair breaks the step.

    Args:
        s: Lowercased password.

    Returns:
        True as soon as any run reaches :data:`MIN_RUN` characters.
    """
    if len(s) < MIN_RUN:
        return False

    for step in (1, -1):
        run = 1
        for prev, cur in zip(s, s[1:]):
            if ord(cur) - ord(prev) == step:
                run += 1
                if run >= MIN_RUN:
                    return True
            else:
                run = 1
    return False
