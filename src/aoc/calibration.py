"""Frequency drift detector.

Two results from one list of frequency deltas:
  - the frequency after applying every delta once
  - the first cumulative frequency reached twice while the deltas are
    replayed in a loop, starting from 0 (which counts as already seen)

The replay has no termination guarantee: if no cumulative value ever
recurs it scans forever unless ``max_passes`` is set.

Usage
-----
>>> from aoc.calibration import calibrate, first_repeated_frequency
>>> calibrate([1, -2, 3, 1])
3
>>> first_repeated_frequency([1, -2, 3, 1])
2
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Set

import pandas as pd

from aoc.report_config import CalibrationSettings

logger = logging.getLogger(__name__)

SCANNING = "SCANNING"
FOUND = "FOUND"

ScanState = str  # SCANNING | FOUND


class CalibrationLimitError(RuntimeError):
    """No frequency repeated within the configured number of passes."""

    def __init__(self, max_passes: int, frequency: int) -> None:
        self.max_passes = max_passes
        self.frequency = frequency
        super().__init__(
            f"No repeated frequency after {max_passes} passes "
            f"(last frequency {frequency})"
        )


def calibrate(deltas: Sequence[int]) -> int:
    """Apply every delta once, in order, starting from 0."""
    freq = 0
    for delta in deltas:
        freq += int(delta)
    return freq


# ---------------------------------------------------------------------------
# First-repeat scan
# ---------------------------------------------------------------------------

@dataclass
class CalibrationScan:
    """State of the cyclic first-repeat scan."""

    state: ScanState = SCANNING
    frequency: int = 0
    passes: int = 0
    steps: int = 0
    seen: Set[int] = field(default_factory=lambda: {0})

    def run(self, deltas: Sequence[int], max_passes: Optional[int] = None) -> int:
        """Replay *deltas* until a cumulative frequency repeats.

        Parameters
        ----------
        deltas : Sequence[int]
            Frequency changes, replayed from the start after each pass.
        max_passes : int, optional
            Upper bound on full passes.  None scans without limit.

        Returns
        -------
        int
            The first frequency visited twice.

        Raises
        ------
        ValueError
            If *deltas* is empty.
        CalibrationLimitError
            If *max_passes* passes complete without a repeat.
        """
        values = [int(d) for d in deltas]
        if not values:
            raise ValueError("Cannot scan an empty delta sequence")

        while self.state == SCANNING:
            if max_passes is not None and self.passes >= max_passes:
                raise CalibrationLimitError(max_passes, self.frequency)
            self.passes += 1
            for delta in values:
                self.frequency += delta
                self.steps += 1
                if self.frequency in self.seen:
                    self.state = FOUND
                    break
                self.seen.add(self.frequency)
            else:
                logger.debug(
                    "Pass %d: frequency=%d seen=%d",
                    self.passes,
                    self.frequency,
                    len(self.seen),
                )

        logger.info(
            "Repeated frequency %d after %d steps (%d passes)",
            self.frequency,
            self.steps,
            self.passes,
        )
        return self.frequency


def first_repeated_frequency(
    deltas: Sequence[int],
    max_passes: Optional[int] = None,
) -> int:
    """First cumulative frequency reached twice; see ``CalibrationScan.run``."""
    return CalibrationScan().run(deltas, max_passes=max_passes)


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

@dataclass
class CalibrationReport:
    """Both calibration results for one input file."""

    frequency: int
    unique_frequency: int
    passes: int
    delta_count: int

    def to_dict(self) -> dict:
        return {
            "frequency": self.frequency,
            "unique_frequency": self.unique_frequency,
            "passes": self.passes,
            "delta_count": self.delta_count,
        }

    def summary_text(self, settings: Optional[CalibrationSettings] = None) -> str:
        settings = settings or CalibrationSettings()
        return (
            f"{settings.frequency_label}: {self.frequency}\n"
            f"{settings.unique_label}: {self.unique_frequency}"
        )


def compute_calibration_report(
    deltas: pd.Series,
    max_passes: Optional[int] = None,
) -> CalibrationReport:
    frequency = calibrate(deltas)
    scan = CalibrationScan()
    unique = scan.run(deltas, max_passes=max_passes)
    return CalibrationReport(
        frequency=frequency,
        unique_frequency=unique,
        passes=scan.passes,
        delta_count=len(deltas),
    )
