"""Function catalogue, arity rules and result formatting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from sheetcalc._errors import ArityError, DivisionByZero, UnknownFunction


class FunctionKind(Enum):
    """The closed set of functions a formula may call."""

    ADD = "ADD"
    MULTIPLY = "MULTIPLY"
    SUBTRACT = "SUBTRACT"
    DIVIDE = "DIVIDE"
    MOD = "MOD"

    @classmethod
    def from_name(cls, name: str) -> FunctionKind:
        """Resolve a function name; matching is case-sensitive."""
        try:
            return cls(name)
        except ValueError:
            raise UnknownFunction(name) from None


@dataclass(frozen=True)
class Arity:
    """Permitted argument count: exactly ``count``, or at least ``count``."""

    count: int
    exact: bool

    def check(self, kind: FunctionKind, given: int) -> None:
        ok = given == self.count if self.exact else given >= self.count
        if not ok:
            raise ArityError(kind.value, self.count, given, self.exact)


# ---------------------------------------------------------------------------
# Builtin implementations. Each takes the already-resolved numeric arguments.
# ---------------------------------------------------------------------------


def _builtin_add(args: list[float]) -> float:
    return sum(args)


def _builtin_multiply(args: list[float]) -> float:
    return math.prod(args)


def _builtin_subtract(args: list[float]) -> float:
    return args[0] - args[1]


def _builtin_divide(args: list[float]) -> float:
    if args[1] == 0:
        raise DivisionByZero(FunctionKind.DIVIDE.value)
    return args[0] / args[1]


def _builtin_mod(args: list[float]) -> float:
    # Floored modulo: the result takes the sign of the divisor.
    if args[1] == 0:
        raise DivisionByZero(FunctionKind.MOD.value)
    return args[0] % args[1]


@dataclass(frozen=True)
class FunctionSpec:
    kind: FunctionKind
    arity: Arity
    operation: Callable[[list[float]], float]


_BUILTINS: dict[FunctionKind, FunctionSpec] = {
    FunctionKind.ADD: FunctionSpec(FunctionKind.ADD, Arity(2, exact=False), _builtin_add),
    FunctionKind.MULTIPLY: FunctionSpec(
        FunctionKind.MULTIPLY, Arity(2, exact=False), _builtin_multiply
    ),
    FunctionKind.SUBTRACT: FunctionSpec(
        FunctionKind.SUBTRACT, Arity(2, exact=True), _builtin_subtract
    ),
    FunctionKind.DIVIDE: FunctionSpec(FunctionKind.DIVIDE, Arity(2, exact=True), _builtin_divide),
    FunctionKind.MOD: FunctionSpec(FunctionKind.MOD, Arity(2, exact=True), _builtin_mod),
}


def format_number(value: float) -> str:
    """Render a computed value: ``5.0`` -> ``"5"``, ``3.5`` -> ``"3.50"``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:.2f}"


class FunctionRegistry:
    """Read-only view over the builtin function catalogue."""

    def __init__(self) -> None:
        self._functions: dict[FunctionKind, FunctionSpec] = dict(_BUILTINS)

    def get(self, name: str) -> FunctionSpec | None:
        try:
            return self._functions[FunctionKind(name)]
        except ValueError:
            return None

    def has(self, name: str) -> bool:
        return self.get(name) is not None

    @property
    def supported_functions(self) -> frozenset[str]:
        return frozenset(kind.value for kind in self._functions)

    def apply(self, kind: FunctionKind, args: list[float]) -> float:
        """Check arity, then run the function on numeric arguments."""
        spec = self._functions[kind]
        spec.arity.check(kind, len(args))
        return spec.operation(args)
