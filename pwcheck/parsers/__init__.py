"""
pwcheck Parsers
================

Input parsing utilities: blocklist and dictionary wordlist loading.
"""

from pwcheck.parsers.wordlist import (
    DEFAULT_BLOCKLIST,
    DEFAULT_DICTIONARY,
    load_wordlist,
    parse_wordlist,
    resolve_wordlist,
)

__all__ = [
    "DEFAULT_BLOCKLIST",
    "DEFAULT_DICTIONARY",
    "load_wordlist",
    "parse_wordlist",
    "resolve_wordlist",
]
