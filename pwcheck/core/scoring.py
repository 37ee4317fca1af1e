"""
Password Scoring
=================

The scoring function combines four factors into a 0-100 score:

1. Length: 3 points per character, capped at ``length_cap_points``.
2. Variety: up to ``variety_points`` for using more character classes.
3. Patterns: sequences, keyboard walks, repeated chunks and years each
   deduct a fixed weight; the total deduction is capped at
   ``pattern_points``.
4. Passphrase: ``passphrase_points`` for long multi-word inputs.

Short passwords are capped at the Weak boundary, and blocklisted or
dictionary passwords at :data:`KNOWN_BAD_CAP`, regardless of the other
factors.

Scoring is a pure function: it keeps no state between calls, never
mutates the wordlists it is given, and never raises for string input.
"""

from __future__ import annotations

from typing import AbstractSet, Optional

from shared.config import ScoringConfig

from pwcheck.analyzers.charset import ascii_lower, char_class_count
from pwcheck.analyzers.keyboard import looks_like_keyboard_walk
from pwcheck.analyzers.repetition import looks_like_repeated_chunk
from pwcheck.analyzers.sequence import looks_like_sequence
from pwcheck.analyzers.year import contains_year_suffix
from pwcheck.core.models import Category, ScoreDetail


# ===================================================================== #
#  Tunable weights
# ===================================================================== #

SEQUENCE_PENALTY: int = 5
KEYBOARD_WALK_PENALTY: int = 5
REPEATED_CHUNK_PENALTY: int = 5
YEAR_PENALTY: int = 3

# Dictionary words only count when they plausibly are the whole password
DICTIONARY_MAX_LENGTH: int = 10

# Ceiling for blocklisted or dictionary passwords
KNOWN_BAD_CAP: int = 10

POINTS_PER_CHARACTER: int = 3
PASSPHRASE_MIN_WORDS: int = 3
PASSPHRASE_MIN_LENGTH: int = 16
WORD_SEPARATORS: frozenset[str] = frozenset(" -_")


# ===================================================================== #
#  Reason messages
# ===================================================================== #

REASON_EMPTY = "Password is empty."
REASON_TOO_LONG = "Password exceeds maximum allowed length."
REASON_BLOCKLIST = "Found in common-passwords list."
REASON_DICTIONARY = "Is a common dictionary word."
REASON_SEQUENCE = "Contains an increasing/decreasing sequence."
REASON_KEYBOARD_WALK = "Contains a keyboard pattern."
REASON_REPEATED_CHUNK = "Contains repeated chunks."
REASON_YEAR = "Contains a year (predictable)."
REASON_PASSPHRASE = "Looks like a multi-word passphrase (good)."
REASON_TOO_SHORT = "Shorter than recommended minimum length."
REASON_TIP = (
    "Try 3–4 uncommon words, avoid years/keyboard runs, "
    "and steer clear of known common passwords."
)

_DEFAULT_CONFIG = ScoringConfig()


def bucket_from_score(
    score: int, config: Optional[ScoringConfig] = None
) -> Category:
    """Map a score to its category using inclusive upper bounds.

    Args:
        score: Score, normally already clamped to [0, 100].
        config: Thresholds to compare against. Defaults to
            :class:`ScoringConfig` defaults.

    Returns:
        The :class:`Category` whose range contains *score*.
    """
    cfg = config or _DEFAULT_CONFIG
    if score <= cfg.weak_max:
        return Category.WEAK
    if score <= cfg.fair_max:
        return Category.FAIR
    if score <= cfg.strong_max:
        return Category.STRONG
    return Category.VERY_STRONG


def count_words(password: str) -> int:
    """Count separator-delimited words: one plus each space, hyphen or underscore."""
    return 1 + sum(1 for c in password if c in WORD_SEPARATORS)


def score_password(
    password: str,
    blocklist: AbstractSet[str],
    dictionary: AbstractSet[str],
    config: Optional[ScoringConfig] = None,
) -> ScoreDetail:
    """Score a candidate password.

    Checks run in a fixed order, which is also the order of the returned
    reasons: length limit, blocklist, dictionary, patterns (sequence,
    keyboard walk, repeated chunk, year), passphrase bonus, minimum
    length, then a closing improvement tip for Weak and Fair results.

    Args:
        password: Candidate password; any string is accepted.
        blocklist: Lowercase known-bad passwords, matched exactly.
        dictionary: Lowercase common words, matched exactly when the
            password is at most :data:`DICTIONARY_MAX_LENGTH` long.
        config: Weights and thresholds. Defaults to :class:`ScoringConfig`.

    Returns:
        A new :class:`ScoreDetail`.
    """
    cfg = config or _DEFAULT_CONFIG

    if not password:
        return ScoreDetail(
            score=0,
            category=Category.WEAK,
            reasons=[REASON_EMPTY],
        )

    reasons: list[str] = []
    length = len(password)

    if length > cfg.max_length_allowed:
        reasons.append(REASON_TOO_LONG)

    low = ascii_lower(password)

    blocklist_hit = low in blocklist
    if blocklist_hit:
        reasons.append(REASON_BLOCKLIST)

    dictionary_hit = low in dictionary and length <= DICTIONARY_MAX_LENGTH
    if dictionary_hit:
        reasons.append(REASON_DICTIONARY)

    score = min(cfg.length_cap_points, length * POINTS_PER_CHARACTER)

    classes = char_class_count(password)
    score += cfg.variety_points * max(0, classes - 1) // 3

    # Pattern deductions
    deductions = 0
    if looks_like_sequence(low):
        reasons.append(REASON_SEQUENCE)
        deductions += SEQUENCE_PENALTY
    if looks_like_keyboard_walk(low):
        reasons.append(REASON_KEYBOARD_WALK)
        deductions += KEYBOARD_WALK_PENALTY
    if looks_like_repeated_chunk(low):
        reasons.append(REASON_REPEATED_CHUNK)
        deductions += REPEATED_CHUNK_PENALTY
    if contains_year_suffix(password):
        reasons.append(REASON_YEAR)
        deductions += YEAR_PENALTY
    score -= min(cfg.pattern_points, deductions)

    if (
        count_words(password) >= PASSPHRASE_MIN_WORDS
        and length >= PASSPHRASE_MIN_LENGTH
    ):
        score += cfg.passphrase_points
        reasons.append(REASON_PASSPHRASE)

    if length < cfg.min_length:
        reasons.append(REASON_TOO_SHORT)
        score = min(score, cfg.weak_max)

    if blocklist_hit or dictionary_hit:
        score = min(score, KNOWN_BAD_CAP)

    score = max(0, min(100, score))
    category = bucket_from_score(score, cfg)

    if category in (Category.WEAK, Category.FAIR):
        reasons.append(REASON_TIP)

    return ScoreDetail(
        score=score,
        category=category,
        reasons=reasons,
        blocklist_hit=blocklist_hit,
        dictionary_hit=dictionary_hit,
    )
