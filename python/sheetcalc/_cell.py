"""Cell — one grid entry with raw content and an on-demand value."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sheetcalc.calc._expression import Expression

if TYPE_CHECKING:
    from sheetcalc._address import Address
    from sheetcalc._table import Table


class Cell:
    """Immutable cell owned by a Table."""

    __slots__ = ("_table", "_address", "_raw_content")

    def __init__(self, table: Table, address: Address, raw_content: str) -> None:
        self._table = table
        self._address = address
        self._raw_content = raw_content

    @property
    def address(self) -> Address:
        return self._address

    @property
    def label(self) -> str:
        return self._address.label

    @property
    def raw_content(self) -> str:
        return self._raw_content

    content = raw_content

    @property
    def row(self) -> int:
        return self._address.row

    @property
    def column(self) -> int:
        return self._address.column

    def value(self) -> str:
        """Evaluate this cell's content against the owning table."""
        return Expression(self._raw_content, self._table).value()

    def matches(self, label: str) -> bool:
        return self._address.matches(label)

    def __repr__(self) -> str:
        return f"<Cell {self.label} {self._raw_content!r}>"
