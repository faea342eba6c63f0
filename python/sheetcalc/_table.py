"""Table — parses tabular text into cells and evaluates them by label."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from typing import Any

from sheetcalc._address import Address, a1_to_rowcol
from sheetcalc._cell import Cell
from sheetcalc._errors import CellNotFound, InvalidCellIndex
from sheetcalc.calc._evaluator import TableEvaluator

logger = logging.getLogger(__name__)

# Cells within a row are separated by a tab or by two or more spaces.
_CELL_SEPARATOR_RE = re.compile(r"\t| {2,}")


class Table:
    """Read-only grid of cells built from text.

    Usage::

        table = Table("3  2.5\\n=ADD(A1,B1)  =MULTIPLY(A1,2)")
        table["A2"]         # "5.50"
        table.raw_content_at("A2")  # "=ADD(A1,B1)"
        print(table.render())

    Parameters
    ----------
    cache_values : bool
        Remember each cell's evaluated value after the first lookup. Off by
        default, in which case every lookup re-evaluates the whole reference
        chain. The table never changes after parsing, so results are the
        same either way.
    """

    __slots__ = ("_rows", "_cells", "_values", "_evaluator")

    def __init__(self, text: str = "", *, cache_values: bool = False) -> None:
        self._rows: list[tuple[Cell, ...]] = []
        self._cells: dict[tuple[int, int], Cell] = {}
        self._values: dict[str, str] | None = {} if cache_values else None
        self._evaluator = TableEvaluator(self)
        self._parse(text)

    @classmethod
    def parse(cls, text: str, *, cache_values: bool = False) -> Table:
        return cls(text, cache_values=cache_values)

    def _parse(self, text: str) -> None:
        text = text.strip()
        if not text:
            return
        for row_idx, line in enumerate(text.split("\n"), start=1):
            tokens = (token.strip() for token in _CELL_SEPARATOR_RE.split(line.strip()))
            row = tuple(
                Cell(self, Address(row_idx, col_idx), token)
                for col_idx, token in enumerate((t for t in tokens if t), start=1)
            )
            for cell in row:
                self._cells[(cell.row, cell.column)] = cell
            self._rows.append(row)
        logger.debug("Parsed %d cells in %d rows", len(self._cells), len(self._rows))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def is_empty(self) -> bool:
        return not self._cells

    def cell(self, label: str) -> Cell:
        """Return the Cell at *label*.

        Raises InvalidCellIndex for malformed labels and CellNotFound when
        nothing was parsed at that position.
        """
        cell = self._cells.get(a1_to_rowcol(label))
        # Labels compare by encoded form, so "A01" doesn't name A1.
        if cell is None or cell.label != label:
            raise CellNotFound(label)
        return cell

    def raw_content_at(self, label: str) -> str:
        return self.cell(label).raw_content

    def value_at(self, label: str) -> str:
        """Evaluated value of the cell at *label*.

        Referenced cells are evaluated first, in dependency order, so
        reference chains of any length resolve without deep recursion.
        """
        values = self._values if self._values is not None else {}
        return self._evaluator.evaluate(label, values)

    def __getitem__(self, label: str) -> str:
        return self.value_at(label)

    def __contains__(self, label: object) -> bool:
        if not isinstance(label, str):
            return False
        try:
            self.cell(label)
        except (CellNotFound, InvalidCellIndex):
            return False
        return True

    def __len__(self) -> int:
        return len(self._cells)

    @property
    def cells(self) -> tuple[Cell, ...]:
        """All cells in parse order (row by row, left to right)."""
        return tuple(cell for row in self._rows for cell in row)

    # ------------------------------------------------------------------
    # Iteration + rendering
    # ------------------------------------------------------------------

    def iter_rows(self, values_only: bool = False) -> Iterator[tuple[Any, ...]]:
        """Yield each row as a tuple of Cells, or of evaluated values."""
        for row in self._rows:
            if values_only:
                yield tuple(self.value_at(cell.label) for cell in row)
            else:
                yield row

    def render(self) -> str:
        """Tab-separated evaluated values, one line per row."""
        return "\n".join("\t".join(row) for row in self.iter_rows(values_only=True))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<Table rows={len(self._rows)} cells={len(self._cells)}>"
