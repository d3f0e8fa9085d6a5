"""
Classification result models.

``WasteRecord`` pairs an item description with its assigned category.  It is
created by a mode driver right after classification, held in memory, and
written out by the report writer.  Records are frozen and never updated.

``KeywordMatch`` is the classifier's explanation of a single decision: which
keyword fired and whether it came from the primary tables or the fallback
hints.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from waste_segregation.taxonomy.waste_taxonomy import WasteCategory

MatchStage = Literal["primary", "hint"]


class WasteRecord(BaseModel):
    """One classified item.

    Attributes:
        item: The item text as entered (trimmed, original casing).
        category: Assigned ``WasteCategory``.
    """

    model_config = ConfigDict(frozen=True)

    item: str
    category: WasteCategory

    def to_row(self) -> dict[str, str]:
        """Return the record as a flat ``{"item", "category"}`` dict for CSV export."""
        return {"item": self.item, "category": self.category.value}


class KeywordMatch(BaseModel):
    """The keyword that decided a classification.

    ``keyword`` and ``stage`` are both ``None`` when nothing matched and the
    category is ``UNKNOWN``.
    """

    model_config = ConfigDict(frozen=True)

    category: WasteCategory
    keyword: Optional[str] = None
    stage: Optional[MatchStage] = None

    def describe(self) -> str:
        if self.keyword is None:
            return "no keyword matched"
        return f"{self.stage} keyword '{self.keyword}'"
