"""
pwcheck Console Interface
==========================

Rich-powered console abstraction providing a unified presentation layer
for the pwcheck command-line tool.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers and severity-coloured messages, all with
consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all pwcheck output
# ---------------------------------------------------------------------------
_PWCHECK_THEME = Theme(
    {
        "pw.banner": "bold bright_cyan",
        "pw.section": "bold bright_magenta",
        "pw.error": "bold red",
        "pw.info": "bold bright_blue",
        "pw.dim": "dim white",
        "pw.highlight": "bold bright_white",
    }
)

_TAGLINE = "Password Strength Checker"


class PwcheckConsole:
    """Unified console interface for pwcheck.

    Usage::

        con = PwcheckConsole()
        con.banner()
        con.section("Score")
        con.error("Cannot load wordlist: missing.txt")
    """

    # ------------------------------------------------------------------ #
    #  Construction
    # ------------------------------------------------------------------ #

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for text / HTML export.
        """
        self._console = Console(
            theme=_PWCHECK_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the pwcheck banner panel.

        Args:
            version: Version string shown beneath the title.
        """
        body = (
            f"[pw.banner]pwcheck[/pw.banner]\n"
            f"[pw.highlight]{_TAGLINE}[/pw.highlight]\n"
            f"[pw.dim]Version: {version}[/pw.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(body)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    # ------------------------------------------------------------------ #
    #  Section header
    # ------------------------------------------------------------------ #

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="pw.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def error(self, message: str) -> None:
        """Print an error message."""
        self._console.print(
            f"[pw.error][✘] ERROR:[/pw.error] {message}"
        )

    def info(self, message: str) -> None:
        """Print an informational message."""
        self._console.print(
            f"[pw.info][ℹ] INFO:[/pw.info] {message}"
        )
