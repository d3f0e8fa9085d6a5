"""
Shared pytest fixtures for the Waste Segregation test suite.

Provides:
  - ``in_tmp_cwd``: chdir into ``tmp_path`` so default report names land there.
  - ``restore_root_logging``: autouse; undo ``configure_logging()`` after each test.
  - ``sample_records``: a small mixed list of ``WasteRecord`` objects.
  - ``minimal_keywords``: a tiny ``KeywordsConfig`` for override tests.
  - ``fake_input``: scripted ``read_line`` for driving the interactive loop.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest

from waste_segregation.config import KeywordsConfig
from waste_segregation.models.record import WasteRecord
from waste_segregation.taxonomy.waste_taxonomy import WasteCategory


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with ``tmp_path`` as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Drop root handlers installed by ``configure_logging()`` during a test.

    Only exact ``StreamHandler`` / ``FileHandler`` instances are removed;
    pytest's own capture handlers are subclasses and are left alone.
    """
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def sample_records() -> list[WasteRecord]:
    return [
        WasteRecord(item="Apple peel", category=WasteCategory.WET),
        WasteRecord(item="Plastic bottle", category=WasteCategory.DRY),
        WasteRecord(item='Tea, used "bag"', category=WasteCategory.WET),
        WasteRecord(item="Ceramic mug", category=WasteCategory.UNKNOWN),
    ]


@pytest.fixture
def minimal_keywords() -> KeywordsConfig:
    """Only ``banana`` (wet) and ``spoon`` (dry); no hints."""
    return KeywordsConfig(wet=("banana",), dry=("spoon",), wet_hints=(), dry_hints=())


class ScriptedInput:
    """Callable stand-in for ``input()`` that replays a fixed list of lines.

    Raises ``EOFError`` once the lines run out and records every prompt shown.
    """

    def __init__(self, lines: list[str]) -> None:
        self._lines = iter(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None


@pytest.fixture
def fake_input() -> Callable[[list[str]], ScriptedInput]:
    return ScriptedInput
