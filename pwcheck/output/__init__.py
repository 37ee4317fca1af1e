"""
pwcheck Output
===============

Console rendering of scoring results.
"""

from pwcheck.output.console import ScoreConsoleOutput

__all__ = ["ScoreConsoleOutput"]
