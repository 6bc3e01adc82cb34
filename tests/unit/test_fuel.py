"""Tests for the mass-to-fuel calculator."""

import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from aoc.fuel import (
    FuelReport,
    compute_fuel_report,
    fuel_required,
    fuel_required_recursive,
    total_fuel,
    total_fuel_recursive,
)
from aoc.report_config import FuelLabels


def _chain_sum(mass: int) -> int:
    """Sum of the fuel chain, stopping at the first non-positive term."""
    total = 0
    fuel = mass // 3 - 2
    while fuel > 0:
        total += fuel
        fuel = fuel // 3 - 2
    return total


# --- Simple fuel -----------------------------------------------------------

@pytest.mark.parametrize(
    "mass, expected",
    [(12, 2), (14, 2), (1969, 654), (100756, 33583)],
)
def test_fuel_required_examples(mass, expected):
    assert fuel_required(mass) == expected


def test_fuel_required_not_clamped():
    assert fuel_required(0) == -2
    assert fuel_required(5) == -1
    assert fuel_required(6) == 0
    assert fuel_required(8) == 0


def test_fuel_required_elementwise():
    masses = pd.Series([12, 14, 1969, 100756])
    result = fuel_required(masses)
    np.testing.assert_array_equal(result.values, [2, 2, 654, 33583])


def test_fuel_required_matches_formula_range():
    for mass in range(0, 300):
        assert fuel_required(mass) == mass // 3 - 2


# --- Refined fuel ----------------------------------------------------------

@pytest.mark.parametrize(
    "mass, expected",
    [(14, 2), (1969, 966), (100756, 50346)],
)
def test_fuel_required_recursive_examples(mass, expected):
    assert fuel_required_recursive(mass) == expected


def test_fuel_required_recursive_small_masses_are_zero():
    for mass in range(0, 9):
        assert fuel_required_recursive(mass) == 0


def test_fuel_required_recursive_negative_mass():
    assert fuel_required_recursive(-1) == 0
    assert fuel_required_recursive(-100) == 0


def test_fuel_required_recursive_matches_chain_sum():
    for mass in list(range(0, 500)) + [12345, 99999, 654321]:
        assert fuel_required_recursive(mass) == _chain_sum(mass)


# --- Totals ----------------------------------------------------------------

def test_total_fuel_sums_raw_values():
    # 2 has simple fuel -2; it is summed, not clamped.
    masses = pd.Series([12, 2])
    assert total_fuel(masses) == 0


def test_total_fuel_recursive_ignores_negative_terms():
    masses = pd.Series([12, 2])
    assert total_fuel_recursive(masses) == 2


def test_totals_examples():
    masses = pd.Series([12, 14, 1969, 100756])
    assert total_fuel(masses) == 2 + 2 + 654 + 33583
    assert total_fuel_recursive(masses) == 2 + 2 + 966 + 50346


def test_totals_empty():
    masses = pd.Series([], dtype="int64")
    assert total_fuel(masses) == 0
    assert total_fuel_recursive(masses) == 0


def test_totals_return_python_int():
    masses = pd.Series([1969])
    assert type(total_fuel(masses)) is int
    assert type(total_fuel_recursive(masses)) is int


# --- Report ----------------------------------------------------------------

class TestFuelReport:
    def test_compute_report(self):
        report = compute_fuel_report(pd.Series([14, 1969]))
        assert report.part_one == 656
        assert report.part_two == 968
        assert report.module_count == 2

    def test_summary_text_default_labels(self):
        report = FuelReport(part_one=656, part_two=968, module_count=2)
        assert report.summary_text() == (
            "Part One Total Consumption: 656\n"
            "Part Two Total Consumption: 968"
        )

    def test_summary_text_custom_labels(self):
        report = FuelReport(part_one=1, part_two=2, module_count=1)
        labels = FuelLabels(part_one_label="Simple", part_two_label="Refined")
        assert report.summary_text(labels) == "Simple: 1\nRefined: 2"

    def test_to_dict(self):
        report = FuelReport(part_one=1, part_two=2, module_count=3)
        assert report.to_dict() == {"part_one": 1, "part_two": 2, "module_count": 3}


def test_total_fuel_does_not_wrap():
    big = 9223372036854775807
    masses = pd.Series([big] * 4, dtype="int64")
    expected = 4 * (big // 3 - 2)
    assert total_fuel(masses) == expected
    assert total_fuel(masses) > 0
