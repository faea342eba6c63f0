"""Formula parser: content classification, function calls and numeric literals."""

from __future__ import annotations

import re

from sheetcalc._address import is_valid_label
from sheetcalc._errors import InvalidExpression
from sheetcalc.calc._functions import FunctionKind
from sheetcalc.calc._protocol import ContentKind, FunctionCall

FORMULA_PREFIX = "="

# Plain integer or digits.digits; no sign, no exponent.
_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")

# Leading numeric prefix of a cell value: "12abc" -> "12", "-3.5e2 kg" -> "-3.5e2".
_NUMERIC_PREFIX_RE = re.compile(
    r"\s*([+-]?(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def is_formula(content: str) -> bool:
    return content.startswith(FORMULA_PREFIX)


def formula_body(content: str) -> str:
    """Strip the leading ``=`` from formula content."""
    return content[len(FORMULA_PREFIX):]


def classify(content: str) -> ContentKind:
    """Decide whether content is a literal, a bare reference or a function call."""
    if not is_formula(content):
        return ContentKind.LITERAL
    if is_valid_label(formula_body(content)):
        return ContentKind.REFERENCE
    return ContentKind.FUNCTION_CALL


def parse_number(token: str) -> float | None:
    """Parse ``12`` or ``12.5``; anything else returns None."""
    if _NUMBER_RE.fullmatch(token):
        return float(token)
    return None


def coerce_number(text: str) -> float:
    """Read the leading number of a cell value, or 0.0 if there is none.

    ``"2.5"`` -> 2.5, ``"12abc"`` -> 12.0, ``"hello"`` -> 0.0.
    """
    m = _NUMERIC_PREFIX_RE.match(text)
    if m is None:
        return 0.0
    return float(m.group(1))


def split_args(args_str: str) -> tuple[str, ...]:
    """Split an argument list on commas and trim each token.

    An empty (or all-blank) list yields no arguments at all.
    """
    if not args_str.strip():
        return ()
    return tuple(arg.strip() for arg in args_str.split(","))


def parse_function_call(body: str) -> FunctionCall:
    """Parse a formula body such as ``ADD(A1, 2)``.

    The name runs up to the first ``(`` and the arguments end at the last
    ``)``, which must close the body. Raises InvalidExpression for missing or
    misplaced parentheses and UnknownFunction for names outside the catalogue.
    """
    open_idx = body.find("(")
    close_idx = body.rfind(")")
    if open_idx < 0 or close_idx < 0 or close_idx < open_idx:
        raise InvalidExpression(body)
    if body[close_idx + 1:].strip():
        raise InvalidExpression(body)

    kind = FunctionKind.from_name(body[:open_idx])
    return FunctionCall(kind=kind, args=split_args(body[open_idx + 1:close_idx]))
