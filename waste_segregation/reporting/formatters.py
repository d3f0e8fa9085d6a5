"""
ASCII terminal formatters for the mode drivers and CLI commands.

All formatters accept records and return plain strings suitable for
``typer.echo()``.  No third-party dependencies (no ``rich``, no ``colorama``).
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from waste_segregation.models.record import WasteRecord
from waste_segregation.taxonomy.waste_taxonomy import WasteCategory


def format_classification(record: WasteRecord) -> str:
    """Interactive feedback line, e.g. ``-> 'Eggshell' classified as: WET``."""
    return f"-> '{record.item}' classified as: {record.category.value.upper()}"


def format_sample_line(record: WasteRecord) -> str:
    """Sample-mode line with the item padded to 20 columns."""
    return f" - {record.item:<20} -> {record.category.value}"


def format_category_summary(records: Sequence[WasteRecord], title: str = "") -> str:
    """Per-category counts and shares as a small ASCII table.

    Every category is listed, including those with zero items::

        Category   Count   Share
        ------------------------
        wet            6   60.0%
        dry            4   40.0%
        unknown        0    0.0%
        ------------------------
        total         10

    Args:
        records: Classified records.
        title:   Optional heading printed above the table.

    Returns:
        Multi-line string.
    """
    counts = Counter(r.category for r in records)
    total = len(records)

    lines: list[str] = []
    if title:
        lines.append(f"=== {title} ===")
    header = f"  {'Category':<9}  {'Count':>5}  {'Share':>6}"
    rule = "  " + "-" * (len(header) - 2)
    lines.append(header)
    lines.append(rule)
    for category in WasteCategory:
        n = counts.get(category, 0)
        share = f"{100.0 * n / total:.1f}%" if total else "-"
        lines.append(f"  {category.value:<9}  {n:>5}  {share:>6}")
    lines.append(rule)
    lines.append(f"  {'total':<9}  {total:>5}")
    return "\n".join(lines)
