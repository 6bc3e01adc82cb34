#!/usr/bin/env python3
"""Mass-to-fuel calculator CLI.

Reads module masses (one non-negative integer per line) and prints the
simple and refined fuel totals.

Usage
-----
    python scripts/fuel_calculator.py input/masses.txt
    python scripts/fuel_calculator.py input/masses.txt --json
    python scripts/fuel_calculator.py input/masses.txt --config configs/report.yaml

Exit codes: 0 = success, 1 = unreadable file, bad input or bad config,
2 = usage error.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Ensure src/ is importable.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from aoc.fuel import FuelReport, compute_fuel_report  # noqa: E402
from aoc.input_loader import InputParseError, load_masses  # noqa: E402
from aoc.report_config import (  # noqa: E402
    DEFAULT_CONFIG,
    ReportConfig,
    load_report_config,
)

logger = logging.getLogger("fuel_calculator")


def run_fuel_calculator(path: Path) -> FuelReport:
    """Load masses from *path* and compute both fuel totals."""
    masses = load_masses(path)
    return compute_fuel_report(masses)


def _load_config(path: Optional[Path]) -> ReportConfig:
    if path is not None:
        return load_report_config(path)
    if DEFAULT_CONFIG.exists():
        return load_report_config(DEFAULT_CONFIG)
    return ReportConfig.default()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Compute fuel required for a list of module masses.",
    )
    parser.add_argument("path", type=Path, help="File with one module mass per line.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Report config YAML (default: {DEFAULT_CONFIG} if present).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output results as JSON.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = _load_config(args.config)
        report = run_fuel_calculator(args.path)
    except OSError as exc:
        logger.error("Unable to open file: %s", exc)
        sys.exit(1)
    except InputParseError as exc:
        logger.error("%s", exc)
        sys.exit(1)
    except UnicodeDecodeError as exc:
        logger.error("Input file is not valid UTF-8: %s", exc)
        sys.exit(1)
    except ValueError as exc:
        logger.error("Invalid report config: %s", exc)
        sys.exit(1)

    if args.json_output:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(report.summary_text(config.fuel))


if __name__ == "__main__":
    main()
