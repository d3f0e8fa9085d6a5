"""
Tests for waste_segregation.classifier - keyword matching decision order.

Covers:
  - classify(): primary wet/dry, hints, unknown, case-insensitivity,
    substring matching, wet-before-dry priority
  - match_keyword(): matched keyword and stage
  - classify_items(): ordering and custom keyword tables
"""

from __future__ import annotations

import logging

import pytest

from waste_segregation.classifier import classify, classify_items, match_keyword
from waste_segregation.config import KeywordsConfig
from waste_segregation.taxonomy.waste_taxonomy import WasteCategory


class TestClassifyPrimary:
    @pytest.mark.parametrize(
        "item",
        ["Apple peel", "Eggshell", "Used tea bag", "Vegetable leftover", "Grass clippings"],
    )
    def test_wet_items(self, item):
        assert classify(item) == WasteCategory.WET

    @pytest.mark.parametrize(
        "item",
        ["Plastic bottle", "Newspaper", "Glass jar", "Styrofoam cup", "Old battery"],
    )
    def test_dry_items(self, item):
        assert classify(item) == WasteCategory.DRY

    def test_case_insensitive(self):
        assert classify("PLASTIC BAG") == WasteCategory.DRY
        assert classify("fish BONES") == WasteCategory.WET

    def test_partial_word_matches_count(self):
        assert classify("newspaperclip") == WasteCategory.DRY

    def test_multiword_keyword(self):
        match = match_keyword("broken egg shell")
        assert match.category == WasteCategory.WET

    def test_wet_wins_when_both_primary_tables_match(self):
        # "tea" (wet) and "plastic" (dry) both present
        assert classify("tea in a plastic cup") == WasteCategory.WET

    def test_result_is_stable_across_calls(self):
        results = {classify("coffee grounds in a paper filter") for _ in range(20)}
        assert results == {WasteCategory.WET}


class TestClassifyHints:
    def test_wet_hint(self):
        match = match_keyword("Orange juice")
        assert match.category == WasteCategory.WET
        assert match.keyword == "juice"
        assert match.stage == "hint"

    def test_wet_hint_skin(self):
        assert classify("banana skin") == WasteCategory.WET

    def test_dry_hint(self):
        match = match_keyword("Shoe box")
        assert match.category == WasteCategory.DRY
        assert match.keyword == "box"
        assert match.stage == "hint"

    def test_primary_dry_beats_wet_hint(self):
        # "juice" is only a wet hint; "bottle" is a primary dry keyword
        match = match_keyword("juice bottle")
        assert match.category == WasteCategory.DRY
        assert match.stage == "primary"


class TestClassifyUnknown:
    def test_empty_string_is_unknown(self):
        assert classify("") == WasteCategory.UNKNOWN

    def test_no_match_is_unknown(self):
        assert classify("Ceramic mug") == WasteCategory.UNKNOWN

    def test_unknown_match_has_no_keyword(self):
        match = match_keyword("Wooden spoon")
        assert match.category == WasteCategory.UNKNOWN
        assert match.keyword is None
        assert match.stage is None
        assert match.describe() == "no keyword matched"


class TestMatchKeyword:
    def test_reports_first_primary_keyword_in_table_order(self):
        match = match_keyword("Apple peel")
        assert match.keyword == "peel"
        assert match.stage == "primary"
        assert match.describe() == "primary keyword 'peel'"

    def test_food_waste_matches_food_first(self):
        assert match_keyword("food waste bin").keyword == "food"


class TestCustomKeywords:
    def test_custom_tables_replace_defaults(self, minimal_keywords):
        assert classify("Banana", minimal_keywords) == WasteCategory.WET
        assert classify("Plastic spoon", minimal_keywords) == WasteCategory.DRY
        assert classify("Plastic bottle", minimal_keywords) == WasteCategory.UNKNOWN

    def test_keywords_are_lowercased(self):
        kw = KeywordsConfig(wet=("  Mango ",), dry=(), wet_hints=(), dry_hints=())
        assert kw.wet == ("mango",)
        assert classify("MANGO pit", kw) == WasteCategory.WET


class TestClassifyItems:
    def test_preserves_order(self):
        records = classify_items(["Plastic bottle", "Apple peel", "Ceramic mug"])
        assert [r.item for r in records] == ["Plastic bottle", "Apple peel", "Ceramic mug"]
        assert [r.category for r in records] == [
            WasteCategory.DRY, WasteCategory.WET, WasteCategory.UNKNOWN,
        ]

    def test_empty_input(self):
        assert classify_items([]) == []

    def test_explain_logs_at_info(self, caplog):
        with caplog.at_level(logging.INFO, logger="waste_segregation.classifier"):
            classify_items(["Eggshell"], explain=True)
        assert "primary keyword 'egg'" in caplog.text

    def test_without_explain_logs_at_debug_only(self, caplog):
        with caplog.at_level(logging.INFO, logger="waste_segregation.classifier"):
            classify_items(["Eggshell"])
        assert caplog.text == ""
