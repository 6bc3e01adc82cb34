#!/usr/bin/env python3
"""Frequency calibration CLI.

Reads frequency deltas (one signed integer per line, e.g. ``+3`` or
``-7``) and prints the resulting frequency plus the first frequency
reached twice when the deltas are replayed in a loop.

Usage
-----
    python scripts/frequency_calibration.py input/deltas.txt
    python scripts/frequency_calibration.py input/deltas.txt --json
    python scripts/frequency_calibration.py input/deltas.txt --max-passes 500

Without a limit the repeat scan runs until a frequency recurs, which may
be never.

Exit codes: 0 = success, 1 = unreadable file, bad input, bad config or
scan limit reached, 2 = usage error.
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

from aoc.calibration import (  # noqa: E402
    CalibrationLimitError,
    CalibrationReport,
    compute_calibration_report,
)
from aoc.input_loader import InputParseError, load_deltas  # noqa: E402
from aoc.report_config import (  # noqa: E402
    DEFAULT_CONFIG,
    ReportConfig,
    load_report_config,
)

logger = logging.getLogger("frequency_calibration")


def run_frequency_calibration(
    path: Path,
    max_passes: Optional[int] = None,
) -> CalibrationReport:
    """Load deltas from *path* and compute both calibration results."""
    deltas = load_deltas(path)
    return compute_calibration_report(deltas, max_passes=max_passes)


def _load_config(path: Optional[Path]) -> ReportConfig:
    if path is not None:
        return load_report_config(path)
    if DEFAULT_CONFIG.exists():
        return load_report_config(DEFAULT_CONFIG)
    return ReportConfig.default()


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {text}")
    return value


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Calibrate a frequency from a list of deltas.",
    )
    parser.add_argument("path", type=Path, help="File with one frequency delta per line.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Report config YAML (default: {DEFAULT_CONFIG} if present).",
    )
    parser.add_argument(
        "--max-passes",
        type=_positive_int,
        default=None,
        help="Give up after this many passes (overrides the config).",
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
        help="Enable debug logging (per-pass scan progress).",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = _load_config(args.config)
        max_passes = args.max_passes or config.calibration.max_passes
        report = run_frequency_calibration(args.path, max_passes=max_passes)
    except OSError as exc:
        logger.error("Unable to open file: %s", exc)
        sys.exit(1)
    except InputParseError as exc:
        logger.error("%s", exc)
        sys.exit(1)
    except CalibrationLimitError as exc:
        logger.error("%s", exc)
        sys.exit(1)
    except UnicodeDecodeError as exc:
        logger.error("Input file is not valid UTF-8: %s", exc)
        sys.exit(1)
    except ValueError as exc:
        logger.error("Invalid input or config: %s", exc)
        sys.exit(1)

    if args.json_output:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(report.summary_text(config.calibration))


if __name__ == "__main__":
    main()
