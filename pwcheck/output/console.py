"""
pwcheck Console Output
=======================

Rich-based rendering of :class:`~pwcheck.core.models.ScoreDetail`: a
score meter coloured by category, flag summary, and the list of reasons.

Uses the shared console infrastructure for consistent styling.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import PwcheckConsole
from pwcheck.core.models import Category, ScoreDetail

NO_WARNINGS = "Looks good—no specific warnings."

_METER_WIDTH = 40


class ScoreConsoleOutput:
    """Console output formatter for scoring results.

    Usage::

        output = ScoreConsoleOutput(PwcheckConsole())
        output.display_score(detail)
    """

    def __init__(self, console: Optional[PwcheckConsole] = None) -> None:
        self.console = console or PwcheckConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Score Display
    # ------------------------------------------------------------------ #

    def display_score(self, detail: ScoreDetail, *, compact: bool = False) -> None:
        """Display a score meter, the category and the reasons.

        Args:
            detail: Result of scoring one password.
            compact: Skip the section header and flag table (used when
                re-scoring interactively).
        """
        if not compact:
            self.console.section("Password Strength")

        self._rich.print(
            Panel(self.meter(detail), title="Strength Meter", border_style="cyan")
        )

        if not compact:
            tbl = Table(
                border_style="bright_cyan",
                header_style="bold bright_magenta",
                show_lines=True,
            )
            tbl.add_column("Property", style="bold")
            tbl.add_column("Value")
            tbl.add_row("Score", f"{detail.score}/100")
            tbl.add_row("Category", detail.category.label)
            tbl.add_row("Blocklist Hit", "Yes" if detail.blocklist_hit else "No")
            tbl.add_row("Dictionary Hit", "Yes" if detail.dictionary_hit else "No")
            self._rich.print(tbl)

        self._rich.print("[bold]Reasons:[/bold]")
        for line in self.reason_lines(detail):
            bullet = Text("  • ", style="bright_cyan")
            bullet.append(line, style="default")
            self._rich.print(bullet)

    def display_category(self, score: int, category: Category) -> None:
        """Display the category a bare score falls into."""
        text = Text()
        text.append(f"{score} -> ")
        text.append(category.label, style=f"bold {category.colour}")
        self._rich.print(text)

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def meter(detail: ScoreDetail) -> Text:
        """Build the coloured 0-100 meter line for *detail*."""
        colour = detail.category.colour
        filled = max(0, min(_METER_WIDTH, int(detail.score / 100 * _METER_WIDTH)))

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{detail.score}/100  ")
        meter.append("[", style="dim")
        meter.append("█" * filled, style=colour)
        meter.append("░" * (_METER_WIDTH - filled), style="dim")
        meter.append("]", style="dim")
        meter.append("  ")
        meter.append(detail.category.label.upper(), style=f"bold {colour}")
        return meter

    @staticmethod
    def reason_lines(detail: ScoreDetail) -> list[str]:
        """Reasons to show, or a single all-clear line when there are none."""
        return list(detail.reasons) or [NO_WARNINGS]
