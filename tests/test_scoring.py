"""
tests/test_scoring.py
======================
Scoring orchestration: point model, caps, overrides and reason order.
"""

from __future__ import annotations

import pytest

from shared.config import ScoringConfig

from pwcheck.core.models import Category
from pwcheck.core.scoring import (
    REASON_BLOCKLIST,
    REASON_DICTIONARY,
    REASON_EMPTY,
    REASON_KEYBOARD_WALK,
    REASON_PASSPHRASE,
    REASON_REPEATED_CHUNK,
    REASON_SEQUENCE,
    REASON_TIP,
    REASON_TOO_LONG,
    REASON_TOO_SHORT,
    REASON_YEAR,
    bucket_from_score,
    count_words,
    score_password,
)


class TestEmptyPassword:

    def test_short_circuits(self, blocklist, dictionary):
        detail = score_password("", blocklist, dictionary)
        assert detail.score == 0
        assert detail.category is Category.WEAK
        assert detail.reasons == [REASON_EMPTY]
        assert not detail.blocklist_hit
        assert not detail.dictionary_hit


class TestKnownBadPasswords:

    def test_numeric_blocklist_entry(self, blocklist, dictionary):
        detail = score_password("123456", blocklist, dictionary)
        assert detail.score == 8
        assert detail.category is Category.WEAK
        assert detail.blocklist_hit
        assert detail.reasons == [
            REASON_BLOCKLIST,
            REASON_SEQUENCE,
            REASON_KEYBOARD_WALK,
            REASON_TOO_SHORT,
            REASON_TIP,
        ]

    def test_qwerty(self, blocklist, dictionary):
        detail = score_password("qwerty", blocklist, dictionary)
        assert detail.score == 10
        assert detail.reasons == [
            REASON_BLOCKLIST,
            REASON_KEYBOARD_WALK,
            REASON_TOO_SHORT,
            REASON_TIP,
        ]

    def test_blocklist_match_ignores_case(self, blocklist, dictionary):
        # 24 length + 3 variety would be 27 without the override
        detail = score_password("PassWord", blocklist, dictionary)
        assert detail.blocklist_hit
        assert detail.score == 10

    def test_short_dictionary_word(self, blocklist, dictionary):
        detail = score_password("Tree", blocklist, dictionary)
        assert detail.dictionary_hit
        assert not detail.blocklist_hit
        assert detail.score == 10
        assert detail.reasons == [
            REASON_DICTIONARY,
            REASON_KEYBOARD_WALK,
            REASON_TOO_SHORT,
            REASON_TIP,
        ]

    def test_long_dictionary_word_not_flagged(self, blocklist):
        detail = score_password("watermelonseed", blocklist, {"watermelonseed"})
        assert not detail.dictionary_hit
        assert REASON_DICTIONARY not in detail.reasons

    @pytest.mark.parametrize(
        "password, flagged",
        [("abcdefghiX", True), ("abcdefghiXy", False)],
    )
    def test_dictionary_length_boundary(self, password, flagged, blocklist):
        words = {"abcdefghix", "abcdefghixy"}
        detail = score_password(password, blocklist, words)
        assert detail.dictionary_hit is flagged
        assert (REASON_DICTIONARY in detail.reasons) is flagged

    def test_dictionary_word_inside_passphrase_not_flagged(self, blocklist, dictionary):
        detail = score_password("tree tops and ponds", blocklist, dictionary)
        assert not detail.dictionary_hit

    def test_override_beats_passphrase_bonus(self):
        phrase = "my-long-but-leaked-phrase"
        detail = score_password(phrase, {phrase}, set())
        assert REASON_PASSPHRASE in detail.reasons
        assert detail.score <= 10


class TestPointModel:

    def test_fair_password_gets_only_tip(self, blocklist, dictionary):
        # 11 chars * 3 = 33, four classes = +10
        detail = score_password("Tr0ub4dor&3", blocklist, dictionary)
        assert detail.score == 43
        assert detail.category is Category.FAIR
        assert detail.reasons == [REASON_TIP]

    def test_short_password_capped_at_weak(self, blocklist, dictionary):
        # 21 length + 10 variety = 31, capped to weak_max
        detail = score_password("Zx9!Qm7", blocklist, dictionary)
        assert detail.score == 24
        assert detail.category is Category.WEAK
        assert detail.reasons == [REASON_TOO_SHORT, REASON_TIP]

    def test_minimum_length_is_not_capped(self, blocklist, dictionary):
        # 24 length + 10 variety
        detail = score_password("Zx9!Qm7k", blocklist, dictionary)
        assert detail.score == 34
        assert detail.category is Category.FAIR
        assert REASON_TOO_SHORT not in detail.reasons

    def test_short_password_cap_follows_config(self, blocklist, dictionary):
        cfg = ScoringConfig(weak_max=20, fair_max=59, strong_max=79)
        detail = score_password("Zx9!Qm7", blocklist, dictionary, cfg)
        assert detail.score == 20

    def test_passphrase_with_year(self, blocklist, dictionary):
        # 60 length + 10 variety - (5 keyboard + 3 year) + 10 passphrase
        detail = score_password("MyTree-Dog-Love-Jump2044", blocklist, dictionary)
        assert detail.score == 72
        assert detail.category is Category.STRONG
        assert detail.reasons == [
            REASON_KEYBOARD_WALK,
            REASON_YEAR,
            REASON_PASSPHRASE,
        ]
        assert detail.reasons.index(REASON_YEAR) < detail.reasons.index(REASON_PASSPHRASE)

    def test_space_separated_passphrase(self, blocklist, dictionary):
        # 60 length + 3 variety - 5 keyboard ("orre") + 10 passphrase
        detail = score_password("correct horse battery staple", blocklist, dictionary)
        assert detail.score == 68
        assert detail.reasons == [REASON_KEYBOARD_WALK, REASON_PASSPHRASE]

    def test_passphrase_needs_sixteen_characters(self, blocklist, dictionary):
        detail = score_password("ab-cd-ef", blocklist, dictionary)
        assert REASON_PASSPHRASE not in detail.reasons

    def test_pattern_deduction_capped(self, blocklist, dictionary):
        # sequence + keyboard + repeated = 15, capped at 10: 36 - 10
        detail = score_password("123412341234", blocklist, dictionary)
        assert detail.score == 26
        assert detail.category is Category.FAIR
        assert detail.reasons == [
            REASON_SEQUENCE,
            REASON_KEYBOARD_WALK,
            REASON_REPEATED_CHUNK,
            REASON_TIP,
        ]

    def test_pattern_cap_follows_config(self, blocklist, dictionary):
        cfg = ScoringConfig(pattern_points=6)
        # sequence + repeated = 10, capped at 6: 24 - 6
        detail = score_password("abcdabcd", blocklist, dictionary, cfg)
        assert detail.score == 18

    def test_length_cap(self, blocklist, dictionary):
        cfg = ScoringConfig(length_cap_points=30)
        detail = score_password("Tr0ub4dor&3", blocklist, dictionary, cfg)
        assert detail.score == 40

    def test_over_maximum_length_still_scored(self, blocklist, dictionary):
        cfg = ScoringConfig(max_length_allowed=10)
        detail = score_password("Tr0ub4dor&3", blocklist, dictionary, cfg)
        assert detail.reasons[0] == REASON_TOO_LONG
        assert detail.score == 43


class TestTotality:

    # Length is counted in code points, not UTF-8 bytes, so non-ASCII
    # input scores by its visible character count.

    @pytest.mark.parametrize(
        "password",
        [
            "a",
            " ",
            "\x00\x01",
            "пароль",
            "日本語のパスワード",
            "a" * 1000,
            "Zz9!" * 200,
            "----------------",
        ],
    )
    def test_any_string_yields_valid_detail(self, password, blocklist, dictionary, scoring_config):
        detail = score_password(password, blocklist, dictionary, scoring_config)
        assert 0 <= detail.score <= 100
        assert detail.category is bucket_from_score(detail.score, scoring_config)

    def test_length_counts_code_points(self, blocklist, dictionary):
        # 6 characters * 3, no ASCII classes; 12 UTF-8 bytes would give 24
        detail = score_password("пароль", blocklist, dictionary)
        assert detail.score == 18
        assert REASON_TOO_SHORT in detail.reasons

    def test_huge_input_flags_length_first(self, blocklist, dictionary):
        detail = score_password("a" * 1000, blocklist, dictionary)
        assert detail.reasons[0] == REASON_TOO_LONG

    @pytest.mark.parametrize("password", ["Ab1", "xY7!", "abcdefg", "Q1w2E3r"])
    def test_below_min_length_never_exceeds_weak(self, password, blocklist, dictionary):
        assert score_password(password, blocklist, dictionary).score <= 24

    def test_idempotent(self, blocklist, dictionary):
        first = score_password("MyTree-Dog-Love-Jump2044", blocklist, dictionary)
        second = score_password("MyTree-Dog-Love-Jump2044", blocklist, dictionary)
        assert first == second
        assert first is not second

    def test_inputs_not_mutated(self, blocklist, dictionary):
        before = (set(blocklist), set(dictionary))
        score_password("password", blocklist, dictionary)
        assert (blocklist, dictionary) == before

    def test_accepts_frozensets(self):
        detail = score_password("qwerty", frozenset({"qwerty"}), frozenset())
        assert detail.blocklist_hit

    def test_tip_only_for_weak_and_fair(self, blocklist, dictionary):
        strong = score_password("MyTree-Dog-Love-Jump2044", blocklist, dictionary)
        assert REASON_TIP not in strong.reasons


class TestCountWords:

    @pytest.mark.parametrize(
        "password, words",
        [("single", 1), ("two words", 2), ("a-b_c d", 4), ("--", 3)],
    )
    def test_separator_count_plus_one(self, password, words):
        assert count_words(password) == words
