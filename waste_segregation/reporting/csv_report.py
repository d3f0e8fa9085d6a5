"""
CSV report writer and reader.

Report format::

    item,category
    Apple peel,wet
    "Tea, used ""bag"" twice",wet

- Header is always ``item,category``.
- One data line per record, in the order given.
- Items containing a comma or a double quote are wrapped in double quotes
  with internal quotes doubled (``csv.QUOTE_MINIMAL``).
- Category is one of ``wet`` / ``dry`` / ``unknown`` and is never quoted.

``write_report()`` raises ``ReportWriteError`` on any filesystem failure; the
mode drivers catch it and report it to the user so a failed save never ends
the session.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from waste_segregation.models.record import WasteRecord

logger = logging.getLogger(__name__)

REPORT_FIELDNAMES = ["item", "category"]

# csv.reader caps fields at 128 KiB by default; reports must read back whatever
# write_report accepted. 2**31 - 1 fits a C long on every platform.
_MAX_FIELD_SIZE = 2**31 - 1


class ReportWriteError(OSError):
    """Raised when a report file cannot be opened or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error saving CSV to {path}: {reason}")


def write_report(records: Iterable[WasteRecord], path: Path) -> Path:
    """Write ``records`` to ``path`` as a two-column CSV report.

    Args:
        records: Records to write, in output order.
        path:    Destination file path (parent dirs created if missing).
                 An existing file is overwritten.

    Returns:
        ``path`` as written.

    Raises:
        ReportWriteError: If the destination cannot be created or written.
    """
    path = Path(path)
    rows = [r.to_row() for r in records]
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(
                f,
                fieldnames=REPORT_FIELDNAMES,
                quoting=csv.QUOTE_MINIMAL,
                lineterminator="\n",
            )
            writer.writeheader()
            writer.writerows(rows)
    except OSError as exc:
        raise ReportWriteError(path, exc.strerror or str(exc)) from exc
    except ValueError as exc:
        # e.g. an embedded NUL byte in the file name
        raise ReportWriteError(path, str(exc)) from exc

    logger.info("Wrote %d records to %s", len(rows), path)
    return path


def read_report(path: Path) -> list[WasteRecord]:
    """Parse a report written by ``write_report()`` back into records.

    Args:
        path: Report CSV path (must exist).

    Returns:
        Records in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the header is not ``item,category``, a row carries
            an unknown category, or the file is not parseable CSV.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Report file not found: {path}")

    if csv.field_size_limit() < _MAX_FIELD_SIZE:
        csv.field_size_limit(_MAX_FIELD_SIZE)

    with path.open(encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        try:
            fieldnames = reader.fieldnames
            if fieldnames != REPORT_FIELDNAMES:
                raise ValueError(
                    f"Unexpected report header in {path.name}: {fieldnames!r} "
                    f"(expected {','.join(REPORT_FIELDNAMES)})"
                )
            rows = list(reader)
        except csv.Error as exc:
            raise ValueError(
                f"Line {reader.line_num} of {path.name}: malformed CSV ({exc})"
            ) from exc

    records: list[WasteRecord] = []
    for i, row in enumerate(rows):
        line_no = i + 2  # 1-based, skip header row
        try:
            records.append(WasteRecord(item=row["item"], category=row["category"]))
        except ValidationError as exc:
            raise ValueError(
                f"Row {line_no} of {path.name}: invalid category {row['category']!r}"
            ) from exc

    logger.debug("Read %d records from %s", len(records), path)
    return records
