"""
Sample mode: classify a fixed demonstration set and save it.

The ten items cover the common cases: primary wet/dry keywords, multi-word
items, and e-waste.  The report is always written, overwriting any previous
sample report.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import typer

from waste_segregation.classifier import classify_items
from waste_segregation.config import KeywordsConfig
from waste_segregation.models.record import WasteRecord
from waste_segregation.reporting.csv_report import write_report
from waste_segregation.reporting.formatters import format_sample_line

SAMPLE_ITEMS: tuple[str, ...] = (
    "Apple peel",
    "Plastic bottle",
    "Used tea bag",
    "Newspaper",
    "Eggshell",
    "Glass jar",
    "Vegetable leftover",
    "Styrofoam cup",
    "Old battery",
    "Grass clippings",
)

DEFAULT_SAMPLE_OUTPUT = Path("sample_waste_report.csv")


def run_sample(
    output_path: Path = DEFAULT_SAMPLE_OUTPUT,
    keywords: Optional[KeywordsConfig] = None,
    echo: Callable[[str], None] = typer.echo,
    explain: bool = False,
) -> list[WasteRecord]:
    """Classify ``SAMPLE_ITEMS``, print one line each, then write the report.

    Args:
        output_path: Report destination.
        keywords:    Keyword tables; defaults to the built-in tables.
        echo:        Line printer (``typer.echo`` by default).
        explain:     Log the deciding keyword of each item at INFO level.

    Returns:
        The ten classified records, in ``SAMPLE_ITEMS`` order.

    Raises:
        ReportWriteError: Report could not be written (lines already printed).
    """
    records = classify_items(SAMPLE_ITEMS, keywords, explain=explain)
    for record in records:
        echo(format_sample_line(record))

    write_report(records, Path(output_path))
    return records
