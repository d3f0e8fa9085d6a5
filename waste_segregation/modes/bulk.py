"""
Bulk mode: classify every line of a plain-text file and write a CSV report.

Input format - one item per line, UTF-8.  Lines are trimmed; blank lines are
skipped.  Items are classified in file order.

Output defaults to ``<input stem>_classified.csv`` in the current directory
(``items.txt`` → ``items_classified.csv``).

Nothing is written when the input is missing or unreadable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from waste_segregation.classifier import classify_items
from waste_segregation.config import KeywordsConfig
from waste_segregation.models.record import WasteRecord
from waste_segregation.reporting.csv_report import write_report

logger = logging.getLogger(__name__)

DEFAULT_BULK_SUFFIX = "_classified"


class InputNotFoundError(FileNotFoundError):
    """Raised when the bulk input file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Input file not found: {path}")


class InputReadError(OSError):
    """Raised when the bulk input file exists but cannot be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error reading file {path}: {reason}")


@dataclass(frozen=True)
class BulkResult:
    """Outcome of a successful bulk run."""

    records: list[WasteRecord]
    output_path: Path

    @property
    def count(self) -> int:
        return len(self.records)


def default_output_path(input_path: Path, suffix: str = DEFAULT_BULK_SUFFIX) -> Path:
    """``<input stem><suffix>.csv`` in the current directory."""
    return Path(f"{Path(input_path).stem}{suffix}.csv")


def read_items(input_path: Path) -> list[str]:
    """Return the trimmed, non-empty lines of ``input_path`` in order.

    Raises:
        InputNotFoundError: If ``input_path`` does not exist.
        InputReadError: On any OS or decoding error while reading.
    """
    input_path = Path(input_path)
    if not input_path.exists():
        raise InputNotFoundError(input_path)

    try:
        text = input_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InputReadError(input_path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise InputReadError(input_path, exc.strerror or str(exc)) from exc

    # read_text translates \r\n and \r, so "\n" is the only separator left
    items = [line.strip() for line in text.split("\n")]
    return [item for item in items if item]


def run_bulk(
    input_path: Path,
    output_path: Optional[Path] = None,
    keywords: Optional[KeywordsConfig] = None,
    suffix: str = DEFAULT_BULK_SUFFIX,
    explain: bool = False,
) -> BulkResult:
    """Classify every item in ``input_path`` and write the CSV report.

    Args:
        input_path:  Plain-text file, one item per line.
        output_path: Report destination; defaults to ``default_output_path()``.
        keywords:    Keyword tables; defaults to the built-in tables.
        suffix:      Stem suffix used for the default output name.
        explain:     Log the deciding keyword of each item at INFO level.

    Returns:
        ``BulkResult`` with the records and the path written.

    Raises:
        InputNotFoundError: Input file does not exist (nothing written).
        InputReadError: Input file unreadable (nothing written).
        ReportWriteError: Report could not be written.
    """
    input_path = Path(input_path)
    items = read_items(input_path)
    logger.info("Read %d items from %s", len(items), input_path)

    records = classify_items(items, keywords, explain=explain)

    out = Path(output_path) if output_path else default_output_path(input_path, suffix)
    write_report(records, out)
    return BulkResult(records=records, output_path=out)
