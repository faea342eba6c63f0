"""TableEvaluator: dependency-ordered evaluation without Python recursion.

A cell's value depends on the cells its formula reads, which may themselves
be formulas. Rather than recursing through ``value_at`` for every hop, the
evaluator walks the reference graph depth-first with an explicit stack,
evaluating each cell only after everything it reads has a value. Reference
chains of any length therefore evaluate in constant Python stack depth.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from sheetcalc._errors import CircularReference
from sheetcalc.calc._expression import Expression
from sheetcalc.calc._protocol import CellSource

logger = logging.getLogger(__name__)


class _ResolvedValues:
    """ValueSource over values already computed in this evaluation."""

    __slots__ = ("_values",)

    def __init__(self, values: dict[str, str]) -> None:
        self._values = values

    def value_at(self, label: str) -> str:
        return self._values[label]


class TableEvaluator:
    """Evaluates cells of a CellSource in dependency order.

    Usage::

        evaluator = TableEvaluator(table)
        evaluator.evaluate("A3")

    ``evaluate`` takes an optional ``values`` dict of already-known results;
    every value computed along the way is added to it, so passing the same
    dict across calls memoises them.
    """

    __slots__ = ("_source",)

    def __init__(self, source: CellSource) -> None:
        self._source = source

    def evaluate(self, label: str, values: dict[str, str] | None = None) -> str:
        """Return the evaluated value of *label*.

        Raises CircularReference if the formulas reachable from *label* loop
        back on themselves, and propagates any lookup or formula error.
        """
        if values is None:
            values = {}
        if label in values:
            return values[label]

        resolved = _ResolvedValues(values)
        # Each frame: (label, its expression, remaining references to visit).
        stack: list[tuple[str, Expression, Iterator[str]]] = []
        path: list[str] = []
        on_path: set[str] = set()

        def push(ref: str) -> None:
            expr = Expression(self._source.raw_content_at(ref), resolved)
            stack.append((ref, expr, expr.references()))
            path.append(ref)
            on_path.add(ref)

        push(label)
        while stack:
            current, expr, refs = stack[-1]
            for ref in refs:
                if ref in values:
                    continue
                if ref in on_path:
                    cycle = tuple(path[path.index(ref):]) + (ref,)
                    logger.debug("Circular reference through %s", " -> ".join(cycle))
                    raise CircularReference(cycle)
                push(ref)
                break
            else:
                stack.pop()
                path.pop()
                on_path.discard(current)
                values[current] = expr.value()

        return values[label]
