"""
pwcheck Shared Module
=====================

Common configuration, logging and console utilities used by the
pwcheck tool.
"""

from shared.config import PwcheckConfig, ScoringConfig, get_config

__all__ = ["PwcheckConfig", "ScoringConfig", "get_config"]
