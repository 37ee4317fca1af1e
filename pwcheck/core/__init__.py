"""
pwcheck Core Module
====================

Contains the scoring function, the strength engine facade and the data
models of the pwcheck password scorer.
"""

from pwcheck.core.engine import StrengthEngine
from pwcheck.core.models import Category, ScoreDetail
from pwcheck.core.scoring import bucket_from_score, score_password

__all__ = [
    "Category",
    "ScoreDetail",
    "StrengthEngine",
    "bucket_from_score",
    "score_password",
]
