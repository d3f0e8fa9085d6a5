"""
Waste taxonomy: the category enum and the default keyword tables.

Every classified item lands in exactly one ``WasteCategory``:
  - ``wet``     - biodegradable / organic (food scraps, garden waste)
  - ``dry``     - non-biodegradable (plastic, glass, metal, paper)
  - ``unknown`` - no keyword or hint matched

Keyword tables are ordered tuples so that the scan order is fixed and a
classification never depends on hash iteration order.  The primary tables
are scanned first (wet, then dry); the hint tables are a fallback scanned
only when no primary keyword matched.

Tune these tables for your locale via the ``[keywords]`` section of
``config/default.toml`` rather than editing this module.

This module has NO imports from any other ``waste_segregation`` package.
"""

from enum import StrEnum


class WasteCategory(StrEnum):
    """Disposal stream an item belongs to."""

    WET = "wet"
    """Biodegradable: food, peels, garden waste, compostables."""

    DRY = "dry"
    """Non-biodegradable: paper, plastic, glass, metal, e-waste."""

    UNKNOWN = "unknown"
    """No keyword matched; needs a human decision."""


# ── Primary keyword tables ────────────────────────────────────────────────────

WET_KEYWORDS: tuple[str, ...] = (
    "food", "vegetable", "fruit", "peel", "peels", "leftover", "tea", "coffee",
    "egg", "eggshell", "egg shell", "kitchen", "garden", "grass", "leaves",
    "meat", "fish", "bones", "flower", "rice", "pulp", "compost", "food waste",
)

DRY_KEYWORDS: tuple[str, ...] = (
    "paper", "cardboard", "plastic", "glass", "metal", "tin", "can", "cloth",
    "fabric", "rubber", "styrofoam", "packaging", "battery", "e-waste", "electronics",
    "bottle", "wrapper", "newspaper", "magazine",
)


# ── Fallback hint tables (scan order matters) ─────────────────────────────────

WET_HINTS: tuple[str, ...] = (
    "leaf", "peel", "juice", "meat", "food", "cake", "rice", "pulp", "compost", "skin",
)

DRY_HINTS: tuple[str, ...] = (
    "paper", "card", "plastic", "glass", "can", "bottle", "wrapper", "box",
)
