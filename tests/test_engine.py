"""
tests/test_engine.py
=====================
StrengthEngine facade: wordlist binding, swapping and logging.
"""

from __future__ import annotations

import json

from shared.config import PwcheckConfig, ScoringConfig, WordlistConfig
from shared.logger import PwcheckLogger

from pwcheck.core.engine import StrengthEngine
from pwcheck.core.models import Category
from pwcheck.core.scoring import score_password
from pwcheck.parsers.wordlist import DEFAULT_BLOCKLIST, DEFAULT_DICTIONARY


def _json_records(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


class TestStrengthEngine:

    def test_defaults_use_builtin_wordlists(self, engine):
        assert engine.blocklist == DEFAULT_BLOCKLIST
        assert engine.dictionary == DEFAULT_DICTIONARY

    def test_evaluate_matches_pure_function(self, engine):
        for password in ["", "qwerty", "Tr0ub4dor&3", "MyTree-Dog-Love-Jump2044"]:
            expected = score_password(
                password, DEFAULT_BLOCKLIST, DEFAULT_DICTIONARY, ScoringConfig()
            )
            assert engine.evaluate(password) == expected

    def test_explicit_wordlists(self, quiet_logger):
        engine = StrengthEngine(
            blocklist={"hunter2"}, dictionary=set(), logger=quiet_logger
        )
        assert engine.evaluate("Hunter2").blocklist_hit
        assert not engine.evaluate("password").blocklist_hit

    def test_wordlists_from_config(self, tmp_path, quiet_logger):
        block = tmp_path / "block.txt"
        block.write_text("letmein\n", encoding="utf-8")
        cfg = PwcheckConfig(wordlists=WordlistConfig(blocklist_path=str(block)))
        engine = StrengthEngine(cfg, logger=quiet_logger)
        assert engine.blocklist == {"letmein"}
        assert engine.dictionary == DEFAULT_DICTIONARY
        assert engine.evaluate("LetMeIn").score <= 10

    def test_use_wordlists_swaps_between_calls(self, engine):
        assert not engine.evaluate("sunshine").blocklist_hit
        engine.use_wordlists(blocklist={"sunshine"})
        assert engine.evaluate("sunshine").blocklist_hit
        assert engine.dictionary == DEFAULT_DICTIONARY

    def test_classify_uses_bound_thresholds(self, quiet_logger):
        cfg = PwcheckConfig(scoring=ScoringConfig(weak_max=40, fair_max=60, strong_max=80))
        engine = StrengthEngine(cfg, logger=quiet_logger)
        assert engine.classify(40) is Category.WEAK
        assert engine.evaluate("Tr0ub4dor&3").category is Category.FAIR


class TestEngineLogging:

    def test_debug_records_omit_password(self, tmp_path):
        log_path = tmp_path / "pw.log"
        logger = PwcheckLogger(
            "engine-test",
            log_level="DEBUG",
            log_file=log_path,
            json_logs=True,
            console_output=False,
        )
        engine = StrengthEngine(logger=logger)
        engine.evaluate("Secr3t-Horse-Staple")

        text = log_path.read_text(encoding="utf-8")
        assert "Secr3t-Horse-Staple" not in text
        scored = [r for r in _json_records(log_path) if r["message"] == "Scored password"]
        assert len(scored) == 1
        assert scored[0]["operation"] == "evaluate"
        assert scored[0]["fields"]["category"] == engine.evaluate("Secr3t-Horse-Staple").category.value

    def test_warns_on_unordered_thresholds(self, tmp_path):
        log_path = tmp_path / "pw.log"
        logger = PwcheckLogger(
            "engine-warn", log_file=log_path, json_logs=True, console_output=False
        )
        cfg = PwcheckConfig(scoring=ScoringConfig(weak_max=70, fair_max=59))
        StrengthEngine(cfg, logger=logger)

        records = _json_records(log_path)
        assert any(r["level"] == "WARNING" for r in records)
        assert records[-1]["fields"]["weak_max"] == 70
