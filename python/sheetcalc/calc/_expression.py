"""Expression: evaluates one cell's raw content against its table.

Content that doesn't start with ``=`` is a literal and comes back verbatim.
``=B3`` evaluates to B3's value. Anything else after ``=`` must be a call
such as ``=ADD(A1, 2.5)`` whose arguments are numbers or labels. Computed
results are formatted by :func:`format_number`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from sheetcalc._address import is_valid_label
from sheetcalc._errors import InvalidCellIndex, InvalidExpression
from sheetcalc.calc._functions import FunctionRegistry, format_number
from sheetcalc.calc._parser import (
    classify,
    coerce_number,
    formula_body,
    parse_function_call,
    parse_number,
)
from sheetcalc.calc._protocol import ContentKind, FunctionCall, ValueSource

logger = logging.getLogger(__name__)

_REGISTRY = FunctionRegistry()


class Expression:
    """Evaluator for a single cell's content.

    Usage::

        Expression("=ADD(A1,2)", table).value()

    Expressions hold no computed state; build a fresh one per evaluation.
    """

    __slots__ = ("_content", "_source")

    def __init__(self, content: str, source: ValueSource) -> None:
        self._content = content
        self._source = source

    @property
    def content(self) -> str:
        return self._content

    @property
    def kind(self) -> ContentKind:
        return classify(self._content)

    def references(self) -> Iterator[str]:
        """Yield the labels this content reads, in evaluation order.

        Lazy: a malformed call or argument raises only once the labels
        before it have been consumed, matching the order ``value()`` would
        report errors in.
        """
        kind = self.kind
        if kind is ContentKind.LITERAL:
            return
        body = formula_body(self._content)
        if kind is ContentKind.REFERENCE:
            yield body
            return
        for arg in parse_function_call(body).args:
            if parse_number(arg) is not None:
                continue
            if not is_valid_label(arg):
                raise InvalidExpression(self._content)
            yield arg

    def value(self) -> str:
        kind = self.kind
        if kind is ContentKind.LITERAL:
            return self._content

        body = formula_body(self._content)
        if kind is ContentKind.REFERENCE:
            return self._source.value_at(body)

        return self._eval_function(parse_function_call(body))

    # ------------------------------------------------------------------
    # Function dispatch
    # ------------------------------------------------------------------

    def _eval_function(self, call: FunctionCall) -> str:
        args = [self._resolve_arg(arg) for arg in call.args]
        logger.debug("Applying %s to %r", call.kind.value, args)
        return format_number(_REGISTRY.apply(call.kind, args))

    def _resolve_arg(self, arg: str) -> float:
        """Resolve an argument token to a number.

        Numeric literals parse directly; anything else is looked up as a
        label and the cell's value read by its leading number. A bad label
        is reported as an invalid expression for this cell's content.
        """
        number = parse_number(arg)
        if number is not None:
            return number

        try:
            raw = self._source.value_at(arg)
        except InvalidCellIndex:
            raise InvalidExpression(self._content) from None
        return coerce_number(raw)

    def __repr__(self) -> str:
        return f"<Expression {self._content!r} [{self.kind.value}]>"
