"""
Keyword classifier: free-text item description → ``WasteCategory``.

Decision order
--------------
1. Primary wet keywords   (substring match)  → ``wet``
2. Primary dry keywords   (substring match)  → ``dry``
3. Wet hints, in order    (substring match)  → ``wet``
4. Dry hints, in order    (substring match)  → ``dry``
5. Nothing matched                           → ``unknown``

Matching is case-insensitive and substring-based, so partial words count:
``"newspaperclip"`` matches ``"paper"``.  An item that matches both primary
tables is always ``wet`` because the wet table is scanned first.

Pure functions only - no I/O, no state.  The keyword tables come from a
frozen ``KeywordsConfig``; callers that pass none get the built-in defaults.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from waste_segregation.config import KeywordsConfig
from waste_segregation.models.record import KeywordMatch, WasteRecord
from waste_segregation.taxonomy.waste_taxonomy import WasteCategory

logger = logging.getLogger(__name__)

_DEFAULT_KEYWORDS = KeywordsConfig()


def match_keyword(item: str, keywords: Optional[KeywordsConfig] = None) -> KeywordMatch:
    """Classify ``item`` and report which keyword decided it.

    Args:
        item:     Free-text item description.
        keywords: Keyword tables; defaults to the built-in tables.

    Returns:
        ``KeywordMatch`` with the category, the matched keyword, and the
        stage (``"primary"`` or ``"hint"``) it came from.
    """
    kw = keywords if keywords is not None else _DEFAULT_KEYWORDS
    text = item.lower()

    passes: tuple[tuple[tuple[str, ...], WasteCategory, str], ...] = (
        (kw.wet, WasteCategory.WET, "primary"),
        (kw.dry, WasteCategory.DRY, "primary"),
        (kw.wet_hints, WasteCategory.WET, "hint"),
        (kw.dry_hints, WasteCategory.DRY, "hint"),
    )
    for table, category, stage in passes:
        for word in table:
            if word in text:
                return KeywordMatch(category=category, keyword=word, stage=stage)

    return KeywordMatch(category=WasteCategory.UNKNOWN)


def classify(item: str, keywords: Optional[KeywordsConfig] = None) -> WasteCategory:
    """Return the ``WasteCategory`` for ``item``.  Never raises."""
    return match_keyword(item, keywords).category


def classify_items(
    items: Iterable[str],
    keywords: Optional[KeywordsConfig] = None,
    explain: bool = False,
) -> list[WasteRecord]:
    """Classify each item in order and wrap the results as ``WasteRecord`` objects.

    Args:
        items:    Item descriptions, already trimmed.
        keywords: Keyword tables; defaults to the built-in tables.
        explain:  Log the deciding keyword of every item at INFO level
                  (DEBUG otherwise).

    Returns:
        One ``WasteRecord`` per input item, same order.
    """
    level = logging.INFO if explain else logging.DEBUG
    records: list[WasteRecord] = []
    for item in items:
        match = match_keyword(item, keywords)
        logger.log(
            level,
            "'%s' -> %s (%s)",
            item,
            match.category.value,
            match.describe(),
            extra={
                "item": item,
                "category": match.category.value,
                "keyword": match.keyword,
                "stage": match.stage,
            },
        )
        records.append(WasteRecord(item=item, category=match.category))
    return records
