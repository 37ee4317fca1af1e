"""
pwcheck Core Data Models
=========================

Pydantic models for the password scoring engine. A :class:`ScoreDetail`
is built fresh by every scoring call and handed to the caller, who owns
it thereafter.

All models are serialisable to JSON for the CLI output layer.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class Category(str, enum.Enum):
    """Coarse strength category, ordered Weak < Fair < Strong < VeryStrong.

    Comparison operators follow :attr:`rank` rather than string order.
    """

    WEAK = "weak"
    FAIR = "fair"
    STRONG = "strong"
    VERY_STRONG = "very_strong"

    @property
    def rank(self) -> int:
        """Position in the ordering, 0 (Weak) to 3 (VeryStrong)."""
        return _CATEGORY_ORDER.index(self)

    @property
    def label(self) -> str:
        """Human-readable display label."""
        return _CATEGORY_LABELS[self.value]

    @property
    def colour(self) -> str:
        """Hex display colour used by strength meters."""
        return _CATEGORY_COLOURS[self.value]

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Category):
            return self.rank < other.rank
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, Category):
            return self.rank <= other.rank
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, Category):
            return self.rank > other.rank
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, Category):
            return self.rank >= other.rank
        return NotImplemented


_CATEGORY_ORDER: tuple[Category, ...] = (
    Category.WEAK,
    Category.FAIR,
    Category.STRONG,
    Category.VERY_STRONG,
)

_CATEGORY_LABELS: dict[str, str] = {
    "weak": "Weak",
    "fair": "Fair",
    "strong": "Strong",
    "very_strong": "Very Strong",
}

_CATEGORY_COLOURS: dict[str, str] = {
    "weak": "#d9534f",
    "fair": "#f0ad4e",
    "strong": "#5bc0de",
    "very_strong": "#5cb85c",
}


# ===================================================================== #
#  Score Models
# ===================================================================== #


class ScoreDetail(BaseModel):
    """Result of scoring one password.

    Attributes:
        score: Integer score clamped to [0, 100].
        category: Category derived from *score* and the configured thresholds.
        reasons: Human-readable messages in detection order.
        blocklist_hit: Whether the password is on the blocklist.
        dictionary_hit: Whether the password is a short dictionary word.
    """

    score: int = Field(default=0, ge=0, le=100)
    category: Category = Category.WEAK
    reasons: list[str] = Field(default_factory=list)
    blocklist_hit: bool = False
    dictionary_hit: bool = False
