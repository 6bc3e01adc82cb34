"""Mass-to-fuel calculator.

Fuel for a module is ``floor(mass / 3) - 2``.  The refined requirement
also carries the fuel needed for that fuel, and so on down the chain.

Usage
-----
>>> from aoc.fuel import fuel_required, fuel_required_recursive
>>> fuel_required(1969)
654
>>> fuel_required_recursive(1969)
966
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from aoc.report_config import FuelLabels

logger = logging.getLogger(__name__)


def fuel_required(mass):
    """Simple fuel for *mass*.  Not clamped: masses below 6 go negative.

    Accepts an int or, element-wise, a Series/ndarray of ints.
    """
    return mass // 3 - 2


def fuel_required_recursive(mass: int) -> int:
    """Refined fuel for *mass*, including fuel for the fuel.

    Only positive fuel is accumulated, but the recursion itself continues
    until the mass argument goes negative.
    """
    fuel = fuel_required(mass)
    total = 0
    if mass < 0:
        return total
    if fuel > 0:
        total += fuel
    total += fuel_required_recursive(fuel)
    return total


def total_fuel(masses: pd.Series) -> int:
    """Sum of simple fuel over all masses, negative terms included."""
    return sum(int(f) for f in fuel_required(masses))


def total_fuel_recursive(masses: pd.Series) -> int:
    """Sum of refined fuel over all masses."""
    return sum(fuel_required_recursive(int(m)) for m in masses)


@dataclass
class FuelReport:
    """Both fuel totals for one input file."""

    part_one: int
    part_two: int
    module_count: int

    def to_dict(self) -> dict:
        return {
            "part_one": self.part_one,
            "part_two": self.part_two,
            "module_count": self.module_count,
        }

    def summary_text(self, labels: Optional[FuelLabels] = None) -> str:
        labels = labels or FuelLabels()
        return (
            f"{labels.part_one_label}: {self.part_one}\n"
            f"{labels.part_two_label}: {self.part_two}"
        )


def compute_fuel_report(masses: pd.Series) -> FuelReport:
    report = FuelReport(
        part_one=total_fuel(masses),
        part_two=total_fuel_recursive(masses),
        module_count=len(masses),
    )
    logger.info(
        "Fuel for %d modules: simple=%d refined=%d",
        report.module_count,
        report.part_one,
        report.part_two,
    )
    return report
