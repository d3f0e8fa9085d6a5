"""Tests for waste_segregation.modes.sample - fixed demonstration set."""

from __future__ import annotations

from waste_segregation.modes.sample import SAMPLE_ITEMS, run_sample
from waste_segregation.reporting.csv_report import read_report
from waste_segregation.taxonomy.waste_taxonomy import WasteCategory

EXPECTED = {
    "Apple peel": WasteCategory.WET,
    "Plastic bottle": WasteCategory.DRY,
    "Used tea bag": WasteCategory.WET,
    "Newspaper": WasteCategory.DRY,
    "Eggshell": WasteCategory.WET,
    "Glass jar": WasteCategory.DRY,
    "Vegetable leftover": WasteCategory.WET,
    "Styrofoam cup": WasteCategory.DRY,
    "Old battery": WasteCategory.DRY,
    "Grass clippings": WasteCategory.WET,
}


def test_sample_items_fixed_list():
    assert len(SAMPLE_ITEMS) == 10
    assert list(SAMPLE_ITEMS) == list(EXPECTED)


def test_run_sample_classifications(tmp_path):
    lines: list[str] = []
    records = run_sample(tmp_path / "s.csv", echo=lines.append)

    assert len(records) == 10
    assert {r.item: r.category for r in records} == EXPECTED
    assert [r.item for r in records] == list(SAMPLE_ITEMS)


def test_run_sample_prints_one_line_per_item(tmp_path):
    lines: list[str] = []
    run_sample(tmp_path / "s.csv", echo=lines.append)

    assert len(lines) == 10
    assert lines[0] == " - Apple peel           -> wet"
    assert lines[8].endswith("-> dry")


def test_run_sample_writes_report(tmp_path):
    out = tmp_path / "s.csv"
    records = run_sample(out, echo=lambda _line: None)
    assert read_report(out) == records


def test_run_sample_default_path(in_tmp_cwd):
    run_sample(echo=lambda _line: None)
    assert (in_tmp_cwd / "sample_waste_report.csv").exists()


def test_run_sample_overwrites_existing(tmp_path):
    out = tmp_path / "s.csv"
    out.write_text("old\n", encoding="utf-8")
    run_sample(out, echo=lambda _line: None)
    assert out.read_text(encoding="utf-8").startswith("item,category\n")
