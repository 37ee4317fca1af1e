"""
tests/test_wordlist.py
=======================
Blocklist / dictionary file parsing.
"""

from __future__ import annotations

import pytest

from pwcheck.parsers.wordlist import (
    DEFAULT_BLOCKLIST,
    DEFAULT_DICTIONARY,
    load_wordlist,
    parse_wordlist,
    resolve_wordlist,
)


class TestParseWordlist:

    def test_skips_blanks_and_comments(self):
        words = parse_wordlist(["# header\n", "\n", "Hunter2\n", "  letmein  \n"])
        assert words == frozenset({"hunter2", "letmein"})

    def test_duplicates_collapse(self):
        assert parse_wordlist(["Dragon", "dragon", "DRAGON"]) == frozenset({"dragon"})


class TestLoadWordlist:

    def test_reads_file(self, tmp_path):
        path = tmp_path / "block.txt"
        path.write_text("password1\nQwerty123\n", encoding="utf-8")
        assert load_wordlist(path) == frozenset({"password1", "qwerty123"})

    def test_invalid_utf8_replaced(self, tmp_path):
        path = tmp_path / "block.txt"
        path.write_bytes(b"ok\n\xff\xfe\n")
        words = load_wordlist(path)
        assert "ok" in words
        assert len(words) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_wordlist(tmp_path / "nope.txt")


class TestResolveWordlist:

    def test_empty_path_uses_default(self):
        assert resolve_wordlist("", DEFAULT_BLOCKLIST) is DEFAULT_BLOCKLIST
        assert resolve_wordlist(None, DEFAULT_DICTIONARY) is DEFAULT_DICTIONARY

    def test_path_overrides_default(self, tmp_path):
        path = tmp_path / "dict.txt"
        path.write_text("apple\n", encoding="utf-8")
        assert resolve_wordlist(str(path), DEFAULT_DICTIONARY) == frozenset({"apple"})

    def test_defaults(self):
        assert DEFAULT_BLOCKLIST == {"password", "123456", "qwerty"}
        assert DEFAULT_DICTIONARY == {"cat", "dog", "tree", "love"}
