"""sheetcalc.calc - Formula evaluation for sheetcalc tables."""

from sheetcalc.calc._evaluator import TableEvaluator
from sheetcalc.calc._expression import Expression
from sheetcalc.calc._functions import Arity, FunctionKind, FunctionRegistry, format_number
from sheetcalc.calc._parser import classify, coerce_number, parse_function_call, parse_number
from sheetcalc.calc._protocol import CellSource, ContentKind, FunctionCall, ValueSource

__all__ = [
    "Arity",
    "CellSource",
    "ContentKind",
    "Expression",
    "FunctionCall",
    "FunctionKind",
    "FunctionRegistry",
    "TableEvaluator",
    "ValueSource",
    "classify",
    "coerce_number",
    "format_number",
    "parse_function_call",
    "parse_number",
]
