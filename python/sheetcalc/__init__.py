"""sheetcalc — a small spreadsheet formula engine.

Usage::

    from sheetcalc import Table

    table = Table(\"\"\"
    3            2.5
    =ADD(A1,B1)  =MULTIPLY(A1,2)
    \"\"\")
    table["A2"]                # "5.50"
    table.raw_content_at("B2")  # "=MULTIPLY(A1,2)"
    print(table)               # tab-separated evaluated values

Cells hold literals, bare references (``=A1``) or calls to ADD, MULTIPLY,
SUBTRACT, DIVIDE and MOD. Every failure raises a subclass of
:class:`SpreadsheetError`.
"""

from sheetcalc._address import Address, a1_to_rowcol, is_valid_label, rowcol_to_a1
from sheetcalc._cell import Cell
from sheetcalc._errors import (
    ArityError,
    CellNotFound,
    CircularReference,
    DivisionByZero,
    InvalidCellIndex,
    InvalidExpression,
    SpreadsheetError,
    UnknownFunction,
)
from sheetcalc._table import Table

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Address",
    "ArityError",
    "Cell",
    "CellNotFound",
    "CircularReference",
    "DivisionByZero",
    "InvalidCellIndex",
    "InvalidExpression",
    "SpreadsheetError",
    "Table",
    "UnknownFunction",
    "a1_to_rowcol",
    "is_valid_label",
    "rowcol_to_a1",
]
