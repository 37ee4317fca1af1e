"""
pwcheck Analyzers
==================

Pure, stateless pattern detectors and the character-class counter used
by the scoring engine. Each analyzer is a plain function over a string.
"""

from pwcheck.analyzers.charset import char_class_count
from pwcheck.analyzers.keyboard import looks_like_keyboard_walk
from pwcheck.analyzers.repetition import looks_like_repeated_chunk
from pwcheck.analyzers.sequence import looks_like_sequence
from pwcheck.analyzers.year import contains_year_suffix

__all__ = [
    "char_class_count",
    "contains_year_suffix",
    "looks_like_keyboard_walk",
    "looks_like_repeated_chunk",
    "looks_like_sequence",
]
