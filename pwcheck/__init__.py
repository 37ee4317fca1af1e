"""
pwcheck -- Password Strength Scoring
=====================================

Scores a candidate password on a 0-100 scale, maps the score to one of
four ordered categories (Weak, Fair, Strong, Very Strong) and explains
the result with human-readable reasons.

The scoring function is pure and stateless, suitable for re-scoring on
every keystroke of an interactive form.

Modules:
    - pwcheck.core.scoring: Scoring function and category thresholds
    - pwcheck.core.engine: Engine facade binding config and wordlists
    - pwcheck.core.models: Pydantic data models
    - pwcheck.analyzers: Pattern detectors and character classes
    - pwcheck.parsers: Wordlist loading
    - pwcheck.output: Console output
    - pwcheck.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

from pwcheck.analyzers import (
    char_class_count,
    contains_year_suffix,
    looks_like_keyboard_walk,
    looks_like_repeated_chunk,
    looks_like_sequence,
)
from pwcheck.core.models import Category, ScoreDetail
from pwcheck.core.scoring import bucket_from_score, score_password

__version__ = "1.0.0"

__all__ = [
    "Category",
    "ScoreDetail",
    "bucket_from_score",
    "char_class_count",
    "contains_year_suffix",
    "looks_like_keyboard_walk",
    "looks_like_repeated_chunk",
    "looks_like_sequence",
    "score_password",
]
