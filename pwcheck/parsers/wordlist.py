"""
Wordlist Parser
================

Loads blocklist and dictionary word files for the scoring engine and
provides the small built-in lists used when no file is configured.

File format: one entry per line. Blank lines and lines starting with
``#`` are skipped; entries are stripped and ASCII-lowercased so they
match the engine's exact, lowercase membership test.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from pwcheck.analyzers.charset import ascii_lower


# ===================================================================== #
#  Built-in Lists
# ===================================================================== #

DEFAULT_BLOCKLIST: frozenset[str] = frozenset({"password", "123456", "qwerty"})

DEFAULT_DICTIONARY: frozenset[str] = frozenset({"cat", "dog", "tree", "love"})


def parse_wordlist(lines: Iterable[str]) -> frozenset[str]:
    """Normalise raw wordlist lines into a lowercase word set.

    Args:
        lines: Raw lines, with or without trailing newlines.

    Returns:
        Frozen set of entries.
    """
    words: set[str] = set()
    for line in lines:
        entry = line.strip()
        if not entry or entry.startswith("#"):
            continue
        words.add(ascii_lower(entry))
    return frozenset(words)


def load_wordlist(filepath: str | Path) -> frozenset[str]:
    """Read a wordlist file.

    Undecodable bytes are replaced rather than raising.

    Args:
        filepath: Path to a UTF-8 text file.

    Returns:
        Frozen set of lowercase entries.

    Raises:
        FileNotFoundError: If the file does not exist.
        PermissionError: If the file cannot be read.
    """
    with open(filepath, "r", encoding="utf-8", errors="replace") as f:
        return parse_wordlist(f)


def resolve_wordlist(
    filepath: str | Path | None, default: frozenset[str]
) -> frozenset[str]:
    """Load *filepath* when given, otherwise return *default*."""
    if not filepath:
        return default
    return load_wordlist(filepath)
