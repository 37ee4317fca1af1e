"""
pwcheck CLI
============

Click-based command-line interface for the pwcheck password scorer.

Usage::

    python -m pwcheck score "MyTree-Dog-Love-Jump2044"
    python -m pwcheck score --blocklist rockyou.txt
    python -m pwcheck --output json score "hunter2"
    python -m pwcheck interactive
    python -m pwcheck classify 60

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from typing import Optional

import click
from rich.markup import escape

from shared.config import PwcheckConfig, tomllib
from shared.console import PwcheckConsole

from pwcheck import __version__
from pwcheck.core.engine import StrengthEngine
from pwcheck.core.models import ScoreDetail
from pwcheck.output.console import ScoreConsoleOutput
from pwcheck.parsers.wordlist import load_wordlist


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to pwcheck configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.version_option(__version__, prog_name="pwcheck")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """pwcheck -- Password Strength Checker.

    Score passwords from 0 to 100, classify them as Weak, Fair, Strong
    or Very Strong, and explain what affected the score.
    """
    ctx.ensure_object(dict)

    console = PwcheckConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["output_format"] = output

    try:
        pw_config = PwcheckConfig.load(config) if config else PwcheckConfig()
        engine = StrengthEngine(pw_config)
    except tomllib.TOMLDecodeError as exc:
        console.error(f"Invalid configuration file: {escape(str(exc))}")
        ctx.exit(1)
    except OSError as exc:
        console.error(f"Cannot load wordlist: {escape(str(exc))}")
        ctx.exit(1)

    ctx.obj["config"] = pw_config
    ctx.obj["engine"] = engine
    ctx.obj["display"] = ScoreConsoleOutput(console)

    if output == "console" and ctx.invoked_subcommand != "interactive":
        console.banner(version=__version__)


def _emit(ctx: click.Context, detail: ScoreDetail, *, compact: bool = False) -> None:
    """Render *detail* in the selected output format."""
    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(
            detail.model_dump(mode="json"),
            indent=None if compact else 2,
            ensure_ascii=False,
        ))
    else:
        display: ScoreConsoleOutput = ctx.obj["display"]
        display.display_score(detail, compact=compact)


def _load_override(ctx: click.Context, path: Optional[str]) -> Optional[frozenset[str]]:
    """Load a wordlist named on the command line, exiting on failure."""
    if path is None:
        return None
    try:
        return load_wordlist(path)
    except OSError as exc:
        ctx.obj["console"].error(f"Cannot load wordlist: {escape(str(exc))}")
        ctx.exit(1)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password", required=False)
@click.option(
    "--blocklist", "-b",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Wordlist of known-bad passwords (one per line).",
)
@click.option(
    "--dictionary", "-d",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Wordlist of common dictionary words (one per line).",
)
@click.pass_context
def score(
    ctx: click.Context,
    password: Optional[str],
    blocklist: Optional[str],
    dictionary: Optional[str],
) -> None:
    """Score a single password.

    The password is prompted for with hidden input when not given as an
    argument.
    """
    engine: StrengthEngine = ctx.obj["engine"]
    engine.use_wordlists(
        blocklist=_load_override(ctx, blocklist),
        dictionary=_load_override(ctx, dictionary),
    )

    if password is None:
        password = click.prompt(
            "Password", hide_input=True, default="", show_default=False,
            err=True,
        )

    _emit(ctx, engine.evaluate(password))


@cli.command()
@click.pass_context
def interactive(ctx: click.Context) -> None:
    """Re-score each entered password until an empty line or EOF."""
    engine: StrengthEngine = ctx.obj["engine"]
    console: PwcheckConsole = ctx.obj["console"]

    if ctx.obj["output_format"] == "console":
        console.info("Enter passwords to score; submit an empty line to quit.")
    while True:
        try:
            password = click.prompt(
                "Password", hide_input=True, default="", show_default=False,
                err=True,
            )
        except click.Abort:
            break
        if not password:
            break
        _emit(ctx, engine.evaluate(password), compact=True)


@cli.command()
@click.argument("score_value", metavar="SCORE", type=click.IntRange(0, 100))
@click.pass_context
def classify(ctx: click.Context, score_value: int) -> None:
    """Show which category a score from 0 to 100 falls into."""
    engine: StrengthEngine = ctx.obj["engine"]
    category = engine.classify(score_value)

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps({"score": score_value, "category": category.value}))
    else:
        display: ScoreConsoleOutput = ctx.obj["display"]
        display.display_category(score_value, category)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the pwcheck CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
