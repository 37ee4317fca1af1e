"""Shared fixtures for the pwcheck test suite."""

from __future__ import annotations

import pytest

from shared.config import PwcheckConfig, ScoringConfig
from shared.logger import PwcheckLogger

from pwcheck.core.engine import StrengthEngine
from pwcheck.parsers.wordlist import DEFAULT_BLOCKLIST, DEFAULT_DICTIONARY


@pytest.fixture
def blocklist() -> set[str]:
    return set(DEFAULT_BLOCKLIST)


@pytest.fixture
def dictionary() -> set[str]:
    return set(DEFAULT_DICTIONARY)


@pytest.fixture
def scoring_config() -> ScoringConfig:
    return ScoringConfig()


@pytest.fixture
def quiet_logger() -> PwcheckLogger:
    return PwcheckLogger("test", console_output=False)


@pytest.fixture
def engine(quiet_logger: PwcheckLogger) -> StrengthEngine:
    return StrengthEngine(PwcheckConfig(), logger=quiet_logger)
