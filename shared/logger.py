"""
pwcheck Structured Logger
==========================

Provides :class:`PwcheckLogger`, the logging facade used by the scoring
engine. Records go to stderr through Rich and, when a log file is
configured, to a rotating file as plain text or JSON lines.

Structured fields are passed as keyword arguments. A password must never
reach a log record, so fields named like one are replaced with
:data:`REDACTED` before the record is built.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

REDACTED = "<redacted>"

_SECRET_FIELDS = frozenset({"password", "passphrase", "candidate", "secret"})

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
    }
)

_ROTATE_BYTES = 1_048_576
_ROTATE_BACKUPS = 3
_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class _JSONLineFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``timestamp``, ``level``, ``logger``, ``message``,
    ``component``, and ``operation`` and ``fields`` when set.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "component": getattr(record, "component", None),
        }
        operation = getattr(record, "operation", None)
        if operation:
            entry["operation"] = operation
        fields = getattr(record, "fields", None)
        if fields:
            entry["fields"] = fields
        return json.dumps(entry, ensure_ascii=False, default=str)


def _console_handler(level: int) -> RichHandler:
    handler = RichHandler(
        console=Console(theme=_LOG_THEME, stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    return handler


def _file_handler(path: str | Path, level: int, json_lines: bool) -> RotatingFileHandler:
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(file_path),
        maxBytes=_ROTATE_BYTES,
        backupCount=_ROTATE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    if json_lines:
        handler.setFormatter(_JSONLineFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(fmt=_TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
        )
    return handler


def scrub(fields: dict[str, Any]) -> dict[str, Any]:
    """Copy of *fields* with password-like values replaced by :data:`REDACTED`."""
    return {
        key: REDACTED if key.lower() in _SECRET_FIELDS else value
        for key, value in fields.items()
    }


class PwcheckLogger:
    """Logger bound to one pwcheck component.

    Usage::

        log = PwcheckLogger("engine", log_file="pwcheck.log", json_logs=True)
        with log.operation("evaluate"):
            log.debug("Scored password", score=42, category="fair")

    Args:
        component:      Suffix of the stdlib logger name (``pwcheck.<component>``).
        log_level:      Minimum level name; unknown names fall back to INFO.
        log_file:       Rotating log file. ``None`` or ``""`` disables it.
        json_logs:      Write JSON lines instead of plain text to the file.
        console_output: Attach the Rich stderr handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._operation: str | None = None
        level = getattr(logging, log_level.upper(), logging.INFO)

        self._logger = logging.getLogger(f"pwcheck.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = False

        # A second engine for the same component replaces the old handlers
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        if console_output:
            self._logger.addHandler(_console_handler(level))
        if log_file:
            self._logger.addHandler(_file_handler(log_file, level, json_logs))

    @contextmanager
    def operation(self, name: str) -> Iterator[PwcheckLogger]:
        """Tag every record logged inside the block with ``operation=name``."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    def _log(self, level: int, msg: str, fields: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        extra = {
            "component": self._component,
            "operation": self._operation,
            "fields": scrub(fields),
        }
        self._logger.log(level, msg, extra=extra)

    def debug(self, msg: str, **fields: Any) -> None:
        self._log(logging.DEBUG, msg, fields)

    def warning(self, msg: str, **fields: Any) -> None:
        self._log(logging.WARNING, msg, fields)
