"""Source protocols and parsed-formula dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from sheetcalc.calc._functions import FunctionKind


class ContentKind(Enum):
    """How a cell's raw content is evaluated."""

    LITERAL = "literal"
    REFERENCE = "reference"
    FUNCTION_CALL = "function_call"


@dataclass(frozen=True)
class FunctionCall:
    """A parsed ``NAME(arg, ...)`` formula body."""

    kind: FunctionKind
    args: tuple[str, ...]  # raw, trimmed argument tokens


@runtime_checkable
class ValueSource(Protocol):
    """What an Expression reads referenced cells from."""

    def value_at(self, label: str) -> str:
        """Return the evaluated value of the cell at *label*."""
        ...


@runtime_checkable
class CellSource(Protocol):
    """What a TableEvaluator reads raw cell content from."""

    def raw_content_at(self, label: str) -> str:
        """Return the unevaluated content at *label*.

        Raises InvalidCellIndex for malformed labels and CellNotFound for
        labels with no cell.
        """
        ...
