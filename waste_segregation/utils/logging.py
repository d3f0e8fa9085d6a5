"""
Logging setup for Waste Segregation.

Call ``configure_logging(config)`` once at CLI entry, before a mode driver
runs.  Library modules only ever use ``logging.getLogger(__name__)``.

Two destinations:

- console (stderr): short ``LEVEL logger: message`` lines with no timestamp,
  so ``--explain`` output reads cleanly next to the interactive prompt.
  Stdout stays reserved for classification lines and prompts.
- file (optional, ``[logging] log_file``): timestamped lines, or JSON lines
  when ``json_format = true``::

    {"ts": "2026-02-24T15:00:00Z", "level": "INFO", "logger": "waste_segregation.classifier",
     "msg": "'Shoe box' -> dry (hint keyword 'box')", "item": "Shoe box", "category": "dry",
     "keyword": "box", "stage": "hint"}

Structured fields come from the ``extra=`` mapping of the logging call; the
classifier attaches ``item``, ``category``, ``keyword`` and ``stage``.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from waste_segregation.config import LoggingConfig

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Attribute names every LogRecord carries; anything else arrived via extra=.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def _utc_timestamp(created: float) -> str:
    return datetime.fromtimestamp(created, tz=timezone.utc).strftime(LOG_DATE_FORMAT)


class _UtcFormatter(logging.Formatter):
    """Plain-text formatter whose ``asctime`` is UTC, matching the ``Z`` suffix."""

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        return _utc_timestamp(record.created)


class _JsonLineFormatter(logging.Formatter):
    """One JSON object per record: ``ts``, ``level``, ``logger``, ``msg`` plus extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": _utc_timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update(
            (key, val)
            for key, val in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _file_handler(log_file: str, json_format: bool) -> logging.Handler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    if json_format:
        handler.setFormatter(_JsonLineFormatter())
    else:
        handler.setFormatter(_UtcFormatter(FILE_FORMAT))
    return handler


def configure_logging(config: "LoggingConfig", level_override: Optional[str] = None) -> None:
    """Configure the root logger from a ``LoggingConfig`` instance.

    Args:
        config:         Logging configuration section from ``AppConfig``.
        level_override: Level name that replaces ``config.level`` when given
                        (``--explain`` passes INFO, ``debug = true`` DEBUG).
    """
    level_name = (level_override or config.level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers: list[logging.Handler] = [console]

    if config.log_file:
        handlers.append(_file_handler(config.log_file, config.json_format))

    for handler in handlers:
        handler.setLevel(level)
    logging.basicConfig(level=level, handlers=handlers, force=True)
