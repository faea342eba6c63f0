"""Error hierarchy raised by table lookups and formula evaluation."""

from __future__ import annotations


class SpreadsheetError(Exception):
    """Base class for every error raised by sheetcalc."""


class CellNotFound(SpreadsheetError):
    """A well-formed label has no cell in the table."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Cell '{label}' does not exist")


class InvalidCellIndex(SpreadsheetError):
    """A label is not a letter run followed by a positive row number."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Invalid cell index '{label}'")


class InvalidExpression(SpreadsheetError):
    """Formula body is malformed or an argument can't be resolved to a number."""

    def __init__(self, expression: str) -> None:
        self.expression = expression
        super().__init__(f"Invalid expression '{expression}'")


class UnknownFunction(SpreadsheetError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown function '{name}'")


class ArityError(SpreadsheetError):
    """Argument count violates a function's arity rule.

    ``exact`` is True for "exactly ``expected``" rules and False for
    "at least ``expected``" rules.
    """

    def __init__(self, function: str, expected: int, given: int, exact: bool) -> None:
        self.function = function
        self.expected = expected
        self.given = given
        self.exact = exact
        bound = f"{expected}" if exact else f"at least {expected}"
        super().__init__(
            f"Wrong number of arguments for '{function}': expected {bound}, got {given}"
        )


class CircularReference(SpreadsheetError):
    """Evaluation re-entered a cell that is already being evaluated."""

    def __init__(self, chain: tuple[str, ...]) -> None:
        self.chain = chain
        super().__init__(f"Circular reference: {' -> '.join(chain)}")


class DivisionByZero(SpreadsheetError):
    def __init__(self, function: str) -> None:
        self.function = function
        super().__init__(f"Division by zero in '{function}'")
