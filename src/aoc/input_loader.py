"""Input loader for the puzzle solvers.

Reads a newline-delimited file of integer literals and returns them as an
``int64`` Series, one value per line, in file order.

Rules:
  - one literal per line, no surrounding whitespace, no comments
  - unsigned inputs accept an optional leading ``+``
  - signed inputs accept an optional leading ``+`` or ``-``
  - any other line (including a blank one) is a fatal parse error

A trailing newline at end of file does not count as a blank line.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")

_INT64_MIN = int(np.iinfo(np.int64).min)
_INT64_MAX = int(np.iinfo(np.int64).max)


class InputParseError(ValueError):
    """A line of an input file is not a valid integer literal."""

    def __init__(self, line_no: int, text: str, label: str, reason: str) -> None:
        self.line_no = line_no
        self.text = text
        self.label = label
        super().__init__(f"Bad {label} value on line {line_no}: {text!r} ({reason})")


def parse_lines(
    lines: Iterable[str],
    signed: bool,
    label: str = "value",
) -> pd.Series:
    """Parse integer literals, stopping at the first malformed line.

    Parameters
    ----------
    lines : Iterable[str]
        Raw lines without their line terminators.
    signed : bool
        Whether a leading ``-`` is allowed.
    label : str
        Name used for the Series and in error messages.

    Returns
    -------
    pd.Series
        dtype int64, named *label*, RangeIndex in line order.

    Raises
    ------
    InputParseError
        On the first line that does not parse.
    """
    pattern = _SIGNED_RE if signed else _UNSIGNED_RE
    values = []
    for line_no, text in enumerate(lines, start=1):
        if not pattern.fullmatch(text):
            kind = "signed integer" if signed else "non-negative integer"
            raise InputParseError(line_no, text, label, f"expected a {kind}")
        value = int(text)
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise InputParseError(line_no, text, label, "out of 64-bit range")
        values.append(value)
    return pd.Series(values, dtype="int64", name=label)


def split_lines(text: str) -> List[str]:
    """Split on LF only, dropping one trailing empty line and a trailing CR
    from each line.  Other line-break characters stay in the text.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load_integers(path: Path, signed: bool, label: str = "value") -> pd.Series:
    """Read *path* once and parse every line.

    Raises ``FileNotFoundError``/``OSError`` unchanged when the file cannot
    be read, and ``InputParseError`` on malformed content.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    series = parse_lines(split_lines(text), signed=signed, label=label)
    logger.info("Loaded %d %s values from %s", len(series), label, path)
    return series


def load_masses(path: Path) -> pd.Series:
    """Module masses: non-negative integers."""
    return load_integers(path, signed=False, label="mass")


def load_deltas(path: Path) -> pd.Series:
    """Frequency deltas: signed integers."""
    return load_integers(path, signed=True, label="delta")
