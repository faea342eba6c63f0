"""Tests for sheetcalc.calc Expression evaluation."""

from __future__ import annotations

import logging

import pytest

from sheetcalc import (
    ArityError,
    CellNotFound,
    DivisionByZero,
    InvalidCellIndex,
    InvalidExpression,
    UnknownFunction,
)
from sheetcalc._address import is_valid_label
from sheetcalc.calc import ContentKind, Expression, ValueSource


class _DictSource:
    """Minimal ValueSource: evaluates stored contents as expressions."""

    def __init__(self, contents: dict[str, str]) -> None:
        self.contents = contents
        self.lookups: list[str] = []

    def value_at(self, label: str) -> str:
        self.lookups.append(label)
        if not is_valid_label(label):
            raise InvalidCellIndex(label)
        if label not in self.contents:
            raise CellNotFound(label)
        return Expression(self.contents[label], self).value()


def _eval(content: str, **cells: str) -> str:
    return Expression(content, _DictSource(cells)).value()


class TestProtocol:
    def test_dict_source_is_value_source(self) -> None:
        assert isinstance(_DictSource({}), ValueSource)


class TestLiterals:
    @pytest.mark.parametrize("content", ["3", "2.50", "hello world", "ADD(1,2)", "", "007"])
    def test_returned_verbatim(self, content: str) -> None:
        assert _eval(content) == content

    def test_kind(self) -> None:
        assert Expression("42", _DictSource({})).kind is ContentKind.LITERAL


class TestReferences:
    def test_direct_ref(self) -> None:
        assert _eval("=B1", B1="hello") == "hello"

    def test_literal_not_reformatted_through_ref(self) -> None:
        assert _eval("=A1", A1="2.5") == "2.5"

    def test_ref_chain(self) -> None:
        assert _eval("=C1", A1="3", B1="=ADD(A1,2)", C1="=B1") == "5"

    def test_missing_ref(self) -> None:
        with pytest.raises(CellNotFound, match="Cell 'Z9' does not exist"):
            _eval("=Z9")

    def test_looks_up_referenced_label_once(self) -> None:
        source = _DictSource({"A1": "1"})
        Expression("=A1", source).value()
        assert source.lookups == ["A1"]


class TestReferencedLabels:
    def test_literal_reads_nothing(self) -> None:
        assert list(Expression("B1 plus one", _DictSource({})).references()) == []
        assert list(Expression("42", _DictSource({})).references()) == []

    def test_reference(self) -> None:
        assert list(Expression("=B1", _DictSource({})).references()) == ["B1"]

    def test_function_args_skip_numbers(self) -> None:
        expr = Expression("=ADD(A1, 2, B3)", _DictSource({}))
        assert list(expr.references()) == ["A1", "B3"]

    def test_repeated_label_yielded_each_time(self) -> None:
        expr = Expression("=ADD(A1,A1)", _DictSource({}))
        assert list(expr.references()) == ["A1", "A1"]

    def test_bad_label_raises_after_earlier_labels(self) -> None:
        refs = Expression("=ADD(A1,a2)", _DictSource({})).references()
        assert next(refs) == "A1"
        with pytest.raises(InvalidExpression):
            next(refs)

    def test_malformed_call(self) -> None:
        with pytest.raises(InvalidExpression):
            list(Expression("=ADD(1,2", _DictSource({})).references())

    def test_does_not_touch_source(self) -> None:
        source = _DictSource({"A1": "1"})
        list(Expression("=ADD(A1,1)", source).references())
        assert source.lookups == []


class TestFunctionCalls:
    def test_add(self) -> None:
        assert _eval("=ADD(1,2)") == "3"

    def test_add_many(self) -> None:
        assert _eval("=ADD(1, 2, 3, 4.5)") == "10.50"

    def test_multiply(self) -> None:
        assert _eval("=MULTIPLY(A1,2)", A1="3") == "6"

    def test_subtract_negative(self) -> None:
        assert _eval("=SUBTRACT(1,4)") == "-3"

    def test_divide(self) -> None:
        assert _eval("=DIVIDE(10,4)") == "2.50"

    def test_divide_rounds_to_two_places(self) -> None:
        assert _eval("=DIVIDE(2,3)") == "0.67"

    def test_mod(self) -> None:
        assert _eval("=MOD(10,4)") == "2"

    def test_float_sum_formatting(self) -> None:
        assert _eval("=ADD(0.1,0.2)") == "0.30"

    def test_ref_args(self) -> None:
        assert _eval("=ADD(A1,B1)", A1="3", B1="2.5") == "5.50"

    def test_negative_computed_value_as_arg(self) -> None:
        assert _eval("=ADD(A1,10)", A1="=SUBTRACT(1,4)") == "7"

    def test_literal_with_exponent_as_arg(self) -> None:
        assert _eval("=ADD(A1,1)", A1="1e3") == "1001"

    def test_text_referenced_value_reads_as_zero(self) -> None:
        assert _eval("=ADD(A1,1)", A1="hello") == "1"

    def test_leading_number_of_referenced_value(self) -> None:
        assert _eval("=ADD(A1,1)", A1="12abc") == "13"

    @pytest.mark.parametrize("text", ["nan", "inf", "-", ""])
    def test_non_numeric_words_read_as_zero(self, text: str) -> None:
        assert _eval("=ADD(A1,1)", A1=text) == "1"

    @pytest.mark.parametrize(("text", "result"), [("-3", "-2"), (" 4 kg", "5"), ("2.5%", "3.50")])
    def test_signed_and_padded_referenced_values(self, text: str, result: str) -> None:
        assert _eval("=ADD(A1,1)", A1=text) == result

    def test_text_divisor_is_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            _eval("=DIVIDE(1,A1)", A1="n/a")

    def test_logs_dispatch(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="sheetcalc.calc._expression"):
            _eval("=ADD(1,2)")
        assert "Applying ADD" in caplog.text


class TestErrors:
    def test_unknown_function(self) -> None:
        with pytest.raises(UnknownFunction, match="Unknown function 'FOO'"):
            _eval("=FOO(1,2)")

    def test_lowercase_function(self) -> None:
        with pytest.raises(UnknownFunction):
            _eval("=add(1,2)")

    def test_missing_close_paren(self) -> None:
        with pytest.raises(InvalidExpression, match=r"Invalid expression 'ADD\(1,2'"):
            _eval("=ADD(1,2")

    def test_missing_open_paren(self) -> None:
        with pytest.raises(InvalidExpression):
            _eval("=ADD 1,2)")

    def test_bare_invalid_label(self) -> None:
        with pytest.raises(InvalidExpression):
            _eval("=a1")

    def test_arity_at_least(self) -> None:
        with pytest.raises(ArityError) as exc_info:
            _eval("=ADD(1)")
        assert (exc_info.value.expected, exc_info.value.given) == (2, 1)

    def test_arity_no_args(self) -> None:
        with pytest.raises(ArityError) as exc_info:
            _eval("=MULTIPLY()")
        assert exc_info.value.given == 0

    def test_arity_exact(self) -> None:
        with pytest.raises(ArityError) as exc_info:
            _eval("=SUBTRACT(1,2,3)")
        assert (exc_info.value.expected, exc_info.value.given, exc_info.value.exact) == (2, 3, True)

    @pytest.mark.parametrize("arg", ["A0", "1A", "a1", "-1", "1.", ""])
    def test_bad_arg_label_is_invalid_expression(self, arg: str) -> None:
        content = f"=ADD({arg},1)"
        with pytest.raises(InvalidExpression) as exc_info:
            _eval(content)
        assert exc_info.value.expression == content

    def test_missing_arg_cell_propagates(self) -> None:
        with pytest.raises(CellNotFound):
            _eval("=ADD(B9,1)")

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            _eval("=DIVIDE(1,A1)", A1="0")
