"""
Character Classes
==================

ASCII character classification used by the variety bonus and the
pattern detectors.

Classification uses explicit ASCII code-point ranges instead of
``str.islower``/``str.isdigit`` so results never depend on the locale
or on Unicode category tables:

- lowercase: ``a``-``z``
- uppercase: ``A``-``Z``
- digit: ``0``-``9``
- symbol-or-space: any other printable ASCII character (32-126)

Characters outside printable ASCII belong to no class.
"""

from __future__ import annotations

_ASCII_LOWER_TABLE: dict[int, int] = {
    code: code + 32 for code in range(ord("A"), ord("Z") + 1)
}


def ascii_lower(s: str) -> str:
    """Lowercase ASCII ``A``-``Z`` only; every other character is kept."""
    return s.translate(_ASCII_LOWER_TABLE)


def is_ascii_print(c: str) -> bool:
    """Return True for printable ASCII (space through tilde)."""
    return " " <= c <= "~"


def is_ascii_digit(c: str) -> bool:
    return "0" <= c <= "9"


def char_class_count(s: str) -> int:
    """Count the distinct character classes present in *s*.

    Space and symbols share one class slot, so the result is in [0, 4].

    Args:
        s: Any string.

    Returns:
        Number of classes with at least one occurrence.
    """
    has_lower = False
    has_upper = False
    has_digit = False
    has_symbol = False

    for c in s:
        if "a" <= c <= "z":
            has_lower = True
        elif "A" <= c <= "Z":
            has_upper = True
        elif is_ascii_digit(c):
            has_digit = True
        elif is_ascii_print(c):
            has_symbol = True

    return has_lower + has_upper + has_digit + has_symbol
