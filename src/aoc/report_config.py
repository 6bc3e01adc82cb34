"""Report configuration loader.

Typed dataclasses for ``configs/report.yaml``: the labels printed in
front of each result and the optional calibration scan limit.

Usage
-----
>>> from aoc.report_config import load_report_config
>>> config = load_report_config("configs/report.yaml")
>>> config.fuel.part_one_label
'Part One Total Consumption'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG = REPO_ROOT / "configs" / "report.yaml"


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FuelLabels:
    """Labels for the mass-to-fuel report."""

    part_one_label: str = "Part One Total Consumption"
    part_two_label: str = "Part Two Total Consumption"


@dataclass(frozen=True)
class CalibrationSettings:
    """Labels and scan limit for the frequency calibration report."""

    frequency_label: str = "Frequency"
    unique_label: str = "Unique Frequency"
    max_passes: Optional[int] = None


@dataclass(frozen=True)
class ReportConfig:
    """Complete report configuration."""

    fuel: FuelLabels = field(default_factory=FuelLabels)
    calibration: CalibrationSettings = field(default_factory=CalibrationSettings)

    @classmethod
    def default(cls) -> "ReportConfig":
        return cls()


# ---------------------------------------------------------------------------
# YAML loader
# ---------------------------------------------------------------------------

_SECTIONS = {"fuel": FuelLabels, "calibration": CalibrationSettings}


def _parse_section(name: str, raw: Any) -> Dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Section '{name}' must be a mapping, got {type(raw).__name__}")

    allowed = {f.name for f in fields(_SECTIONS[name])}
    unknown = set(raw) - allowed
    if unknown:
        raise ValueError(f"Unknown keys in section '{name}': {sorted(unknown)}")

    for key, value in raw.items():
        if key.endswith("_label") and not isinstance(value, str):
            raise ValueError(f"{name}.{key} must be a string, got {value!r}")
    return dict(raw)


def _validate_max_passes(value: Any) -> Optional[int]:
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"calibration.max_passes must be a positive integer or null, got {value!r}")
    return value


def load_report_config(path: Path = DEFAULT_CONFIG) -> ReportConfig:
    """Parse the report YAML and construct typed objects.

    Missing sections and keys fall back to the dataclass defaults.

    Raises
    ------
    ValueError
        If the document is not a mapping, or has unknown sections/keys,
        non-string labels, or an invalid ``max_passes``.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ValueError(f"Malformed report config {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Report config {path} must be a mapping, got {type(data).__name__}")

    unknown = set(data) - set(_SECTIONS)
    if unknown:
        raise ValueError(f"Unknown sections in report config: {sorted(unknown)}")

    fuel = FuelLabels(**_parse_section("fuel", data.get("fuel")))

    cal_raw = _parse_section("calibration", data.get("calibration"))
    if "max_passes" in cal_raw:
        cal_raw["max_passes"] = _validate_max_passes(cal_raw["max_passes"])
    calibration = CalibrationSettings(**cal_raw)

    logger.info("Loaded report config from %s", path)
    return ReportConfig(fuel=fuel, calibration=calibration)
