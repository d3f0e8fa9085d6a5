"""
Application configuration management.

Load order (each layer overrides the previous):
  1. Built-in defaults           - the pydantic model defaults below
  2. ``config/default.toml``     - committed static defaults
  3. ``config/local.toml``       - optional local overrides (gitignored)

Entry point: ``load_config(config_path=None) -> AppConfig``

Configuration is read once at process start and frozen.  The keyword tables
in particular are never mutated after ``load_config()`` returns, so
classification stays a pure function of the item text and this config.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from waste_segregation.taxonomy.waste_taxonomy import (
    DRY_HINTS,
    DRY_KEYWORDS,
    WET_HINTS,
    WET_KEYWORDS,
)

# ── Sub-config models ─────────────────────────────────────────────────────────


class ReportsConfig(BaseModel):
    """Default output file names for each mode."""

    model_config = ConfigDict(frozen=True)

    interactive_default: str = "waste_report.csv"
    sample_output: str = "sample_waste_report.csv"
    bulk_suffix: str = "_classified"

    @field_validator("interactive_default", "sample_output")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Report file name must not be empty.")
        return v.strip()


class KeywordsConfig(BaseModel):
    """Keyword tables used by the classifier.

    Primary tables (``wet``, ``dry``) are scanned first, wet before dry.
    Hint tables are only consulted when no primary keyword matched.
    All entries are stored lowercase; order is preserved.
    """

    model_config = ConfigDict(frozen=True)

    wet: tuple[str, ...] = WET_KEYWORDS
    dry: tuple[str, ...] = DRY_KEYWORDS
    wet_hints: tuple[str, ...] = WET_HINTS
    dry_hints: tuple[str, ...] = DRY_HINTS

    @field_validator("wet", "dry", "wet_hints", "dry_hints")
    @classmethod
    def normalize_keywords(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        cleaned = tuple(kw.strip().lower() for kw in v)
        if any(not kw for kw in cleaned):
            # An empty keyword would be a substring of every item.
            raise ValueError("Keyword lists must not contain empty strings.")
        return cleaned


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration.

    Every mode driver and CLI command receives an ``AppConfig`` (or one of
    its sections) instead of reading files or constants directly.
    """

    model_config = ConfigDict(frozen=True)

    reports: ReportsConfig = ReportsConfig()
    keywords: KeywordsConfig = KeywordsConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``; when that default file
            is absent the built-in defaults are used.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicit ``config_path`` does not exist.
        tomllib.TOMLDecodeError: If a config file is not valid TOML.
        pydantic.ValidationError: If merged config values fail validation.
    """
    explicit = config_path is not None
    if config_path is None:
        config_path = _find_project_root() / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return AppConfig()

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    # Also merge local.toml if present (gitignored local overrides)
    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        reports=ReportsConfig(**raw.get("reports", {})),
        keywords=KeywordsConfig(**raw.get("keywords", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
