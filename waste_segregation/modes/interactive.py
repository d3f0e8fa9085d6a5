"""
Interactive mode: a line-oriented read/classify loop.

The session is an explicit finite-state machine with one blocking read per
iteration::

    READING ──"save <file>"──▶ SAVING ──(write report)──▶ READING
       │
       └──"exit" / EOF──▶ EXITING ──(optional save prompt)──▶ done

Commands (case-insensitive, input is trimmed first):
  - ``exit``          - leave the loop.
  - ``save <file>``   - write all records so far; ``<file>`` defaults to
                        ``waste_report.csv``.
  - empty line        - ignored.
  - anything else     - classified and appended to the session records.

On exit, if any records were added since the last successful save, the user
is asked once whether to save them to the default report file.
"""

from __future__ import annotations

import functools
import logging
from enum import StrEnum
from pathlib import Path
from typing import Callable, Optional

import typer

from waste_segregation.classifier import match_keyword
from waste_segregation.config import KeywordsConfig
from waste_segregation.models.record import WasteRecord
from waste_segregation.reporting.csv_report import ReportWriteError, write_report
from waste_segregation.reporting.formatters import format_classification

logger = logging.getLogger(__name__)

BANNER = "Waste Segregation - Wet vs Dry (type 'exit' to stop, 'save <filename>' to save)"
ITEM_PROMPT = "Enter waste item: "
SAVE_PROMPT = "Save report? (y/n) "
DEFAULT_REPORT = Path("waste_report.csv")


class SessionState(StrEnum):
    READING = "reading"
    SAVING = "saving"
    EXITING = "exiting"


class InteractiveSession:
    """One interactive classification session.

    I/O is injected so the loop can be driven from tests: ``read_line`` is
    called with a prompt and returns one line (raising ``EOFError`` at end of
    input), ``echo`` / ``echo_err`` print one line to stdout / stderr.
    """

    def __init__(
        self,
        keywords: Optional[KeywordsConfig] = None,
        default_report: Path = DEFAULT_REPORT,
        read_line: Callable[[str], str] = input,
        echo: Callable[[str], None] = typer.echo,
        echo_err: Callable[[str], None] = functools.partial(typer.echo, err=True),
    ) -> None:
        self.keywords = keywords
        self.default_report = Path(default_report)
        self.read_line = read_line
        self.echo = echo
        self.echo_err = echo_err

        self.state = SessionState.READING
        self.records: list[WasteRecord] = []
        self._saved_count = 0
        self._save_target: Optional[Path] = None

    @property
    def has_unsaved(self) -> bool:
        """True when records were added after the last successful save."""
        return len(self.records) > self._saved_count

    def handle_line(self, raw: str) -> SessionState:
        """Apply one input line to the session and return the new state."""
        line = raw.strip()
        if not line:
            return self.state

        lower = line.lower()
        if lower == "exit":
            self.state = SessionState.EXITING
        elif lower.startswith("save "):
            parts = line.split(None, 1)
            filename = parts[1].strip() if len(parts) > 1 else ""
            self._save_target = Path(filename) if filename else self.default_report
            self.state = SessionState.SAVING
        else:
            match = match_keyword(line, self.keywords)
            logger.debug("'%s' -> %s (%s)", line, match.category.value, match.describe())
            record = WasteRecord(item=line, category=match.category)
            self.records.append(record)
            self.echo(format_classification(record))
        return self.state

    def save(self, path: Path) -> bool:
        """Write all session records to ``path``.  Returns False on failure."""
        try:
            write_report(self.records, path)
        except ReportWriteError as exc:
            self.echo_err(f"[ERROR] {exc}")
            return False
        self._saved_count = len(self.records)
        self.echo(f"Saved {len(self.records)} records to {path}")
        return True

    def run(self) -> list[WasteRecord]:
        """Drive the loop until ``exit`` or end of input.

        Returns:
            All records classified during the session, in entry order.
        """
        self.echo(BANNER)
        while self.state is not SessionState.EXITING:
            if self.state is SessionState.SAVING:
                self.save(self._save_target or self.default_report)
                self._save_target = None
                self.state = SessionState.READING
                continue
            try:
                line = self.read_line(ITEM_PROMPT)
            except EOFError:
                self.state = SessionState.EXITING
                break
            self.handle_line(line)

        self._finish()
        return self.records

    def _finish(self) -> None:
        if self.has_unsaved:
            try:
                answer = self.read_line(SAVE_PROMPT)
            except EOFError:
                answer = ""
            if answer.strip().lower() == "y":
                self.save(self.default_report)
        logger.info("Interactive session ended with %d records", len(self.records))
        self.echo("Exiting interactive mode.")


def run_interactive(
    keywords: Optional[KeywordsConfig] = None,
    default_report: Path = DEFAULT_REPORT,
) -> list[WasteRecord]:
    """Run an interactive session on the console."""
    return InteractiveSession(keywords=keywords, default_report=default_report).run()
