"""A1-style cell labels: encoding, decoding and validation.

Columns use bijective base-26 (``A`` = 1 ... ``Z`` = 26, ``AA`` = 27), so no
letter stands for zero. Rows are 1-based decimal numbers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from sheetcalc._errors import InvalidCellIndex

_LETTERS = 26

# One uppercase letter run, then a digit run that isn't all zeros ("A0" is
# invalid; "A01" is valid but never equal to the canonical "A1").
_LABEL_RE = re.compile(r"([A-Z]+)([0-9]*[1-9][0-9]*)")


def is_valid_label(label: str) -> bool:
    """Return True if *label* looks like ``B12``."""
    return isinstance(label, str) and _LABEL_RE.fullmatch(label) is not None


def column_letters(column: int) -> str:
    """Convert a 1-based column index to its letters (27 -> ``"AA"``)."""
    if column < 1:
        raise ValueError(f"Column must be positive, got {column}")
    letters: list[str] = []
    while column > 0:
        column, rem = divmod(column - 1, _LETTERS)
        letters.append(chr(ord("A") + rem))
    return "".join(reversed(letters))


def column_index(letters: str) -> int:
    """Convert column letters to a 1-based index (``"AA"`` -> 27)."""
    index = 0
    for ch in letters:
        index = index * _LETTERS + (ord(ch) - ord("A") + 1)
    return index


def rowcol_to_a1(row: int, column: int) -> str:
    """Encode a 1-based (row, column) pair as a label: (12, 2) -> ``"B12"``."""
    if row < 1:
        raise ValueError(f"Row must be positive, got {row}")
    return f"{column_letters(column)}{row}"


def a1_to_rowcol(label: str) -> tuple[int, int]:
    """Decode a label into a 1-based (row, column) pair.

    Raises InvalidCellIndex if the label is malformed.
    """
    m = _LABEL_RE.fullmatch(label) if isinstance(label, str) else None
    if m is None:
        raise InvalidCellIndex(label)
    return int(m.group(2)), column_index(m.group(1))


@dataclass(frozen=True)
class Address:
    """Fixed grid position of a cell."""

    row: int
    column: int

    @classmethod
    def from_label(cls, label: str) -> Address:
        row, column = a1_to_rowcol(label)
        return cls(row, column)

    @property
    def label(self) -> str:
        return rowcol_to_a1(self.row, self.column)

    def matches(self, label: str) -> bool:
        """Compare against a label, rejecting malformed labels outright."""
        if not is_valid_label(label):
            raise InvalidCellIndex(label)
        return self.label == label

    def __str__(self) -> str:
        return self.label
