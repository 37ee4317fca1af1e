"""
pwcheck Strength Engine
========================

Facade over the scoring function for interactive callers. A
:class:`StrengthEngine` binds one configuration and one pair of
wordlists so that a form or prompt can re-score on every input change
with a single call.

The engine holds no per-password state: each :meth:`StrengthEngine.evaluate`
call is independent, and the wordlist references can be swapped between
calls with :meth:`StrengthEngine.use_wordlists`.
"""

from __future__ import annotations

from typing import AbstractSet, Optional

from shared.config import PwcheckConfig, ScoringConfig
from shared.logger import PwcheckLogger

from pwcheck.core.models import Category, ScoreDetail
from pwcheck.core.scoring import bucket_from_score, score_password
from pwcheck.parsers.wordlist import (
    DEFAULT_BLOCKLIST,
    DEFAULT_DICTIONARY,
    resolve_wordlist,
)


class StrengthEngine:
    """Scores passwords against a fixed configuration and wordlists.

    Usage::

        engine = StrengthEngine()
        detail = engine.evaluate("MyTree-Dog-Love-Jump2044")
        print(detail.score, detail.category.label)

    Attributes:
        config: Full pwcheck configuration.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[PwcheckConfig] = None,
        *,
        blocklist: Optional[AbstractSet[str]] = None,
        dictionary: Optional[AbstractSet[str]] = None,
        logger: Optional[PwcheckLogger] = None,
    ) -> None:
        self.config = config or PwcheckConfig()
        settings = self.config.global_settings
        self.logger = logger or PwcheckLogger(
            "engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
        )

        with self.logger.operation("load_wordlists"):
            if blocklist is None:
                blocklist = resolve_wordlist(
                    self.config.wordlists.blocklist_path, DEFAULT_BLOCKLIST
                )
            if dictionary is None:
                dictionary = resolve_wordlist(
                    self.config.wordlists.dictionary_path, DEFAULT_DICTIONARY
                )
            self.logger.debug(
                "Wordlists ready",
                blocklist_size=len(blocklist),
                dictionary_size=len(dictionary),
            )

        self._blocklist: AbstractSet[str] = blocklist
        self._dictionary: AbstractSet[str] = dictionary

        if not self.scoring.thresholds_ordered:
            self.logger.warning(
                "Scoring thresholds are not strictly increasing below 100; "
                "categories may be inconsistent",
                weak_max=self.scoring.weak_max,
                fair_max=self.scoring.fair_max,
                strong_max=self.scoring.strong_max,
            )

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def scoring(self) -> ScoringConfig:
        """Scoring weights and thresholds in use."""
        return self.config.scoring

    @property
    def blocklist(self) -> AbstractSet[str]:
        return self._blocklist

    @property
    def dictionary(self) -> AbstractSet[str]:
        return self._dictionary

    # ------------------------------------------------------------------ #
    #  Operations
    # ------------------------------------------------------------------ #

    def use_wordlists(
        self,
        blocklist: Optional[AbstractSet[str]] = None,
        dictionary: Optional[AbstractSet[str]] = None,
    ) -> None:
        """Swap the wordlists used by subsequent evaluations.

        Arguments left as ``None`` keep the current list.
        """
        if blocklist is not None:
            self._blocklist = blocklist
        if dictionary is not None:
            self._dictionary = dictionary
        self.logger.debug(
            "Wordlists replaced",
            blocklist_size=len(self._blocklist),
            dictionary_size=len(self._dictionary),
        )

    def evaluate(self, password: str) -> ScoreDetail:
        """Score *password* with the bound configuration and wordlists.

        Only the outcome is logged, never the password itself.
        """
        with self.logger.operation("evaluate"):
            detail = score_password(
                password, self._blocklist, self._dictionary, self.scoring
            )
            self.logger.debug(
                "Scored password",
                length=len(password),
                score=detail.score,
                category=detail.category.value,
                reasons=len(detail.reasons),
                blocklist_hit=detail.blocklist_hit,
                dictionary_hit=detail.dictionary_hit,
            )
        return detail

    def classify(self, score: int) -> Category:
        """Category of *score* under the bound thresholds."""
        return bucket_from_score(score, self.scoring)
