import pytest

from prefixcalc.parser import parse
from prefixcalc.runtime import (
    CalcRuntimeError,
    DivisionByZeroError,
    EmptyTailError,
    IntegerOverflowError,
    evaluate,
)
from prefixcalc.tokenizer import INT_MAX, Expression, Number, Operator, OperatorKind
from prefixcalc.utils import FatalCalcError


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("(+ 1 2 3)", Number(6)),
        pytest.param("(- 10 3 2)", Number(5)),
        pytest.param("(* 2 3 4)", Number(24)),
        pytest.param("(/ 20 2 5)", Number(2)),
        # single operand is returned as is
        pytest.param("(+ 7)", Number(7)),
        pytest.param("(/ 7)", Number(7)),
        pytest.param("(- 1 5)", Number(-4)),
        pytest.param("(/ 7 2)", Number(3)),
        pytest.param("(/ 1 2)", Number(0)),
        pytest.param("(* 0 123)", Number(0)),
        pytest.param("(+  1   2 )", Number(3)),
        pytest.param(f"(+ {INT_MAX})", Number(INT_MAX)),
        pytest.param(f"(- 0 {INT_MAX} 1)", Number(-INT_MAX - 1)),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: Number) -> None:
    assert evaluate(parse(code)) == expected_ret_val


def test_division_truncates_toward_zero() -> None:
    expression: Expression = [Operator(OperatorKind.DIV), Number(-7), Number(2)]
    assert evaluate(expression) == Number(-3)


def test_division_by_zero() -> None:
    with pytest.raises(DivisionByZeroError) as exc_info:
        evaluate(parse("(/ 5 1 0)"))
    assert exc_info.value.position == 3
    assert isinstance(exc_info.value, FatalCalcError)
    assert "Division by zero" in str(exc_info.value)
    assert "Invalid input" not in str(exc_info.value)


def test_zero_dividend_is_fine() -> None:
    assert evaluate(parse("(/ 0 5)")) == Number(0)


@pytest.mark.parametrize(
    "code, position",
    [
        pytest.param(f"(+ {INT_MAX} 1)", 2),
        pytest.param(f"(* {INT_MAX} 2)", 2),
        pytest.param(f"(- 0 {INT_MAX} 2)", 3),
    ],
)
def test_overflow(code: str, position: int) -> None:
    with pytest.raises(IntegerOverflowError) as exc_info:
        evaluate(parse(code))
    assert exc_info.value.position == position


def test_leading_number_is_rejected() -> None:
    expression: Expression = [Number(5), Operator(OperatorKind.ADD), Number(1)]
    with pytest.raises(CalcRuntimeError) as exc_info:
        evaluate(expression)
    assert exc_info.value.position == 0
    assert "must begin with an operator" in str(exc_info.value)
    assert not isinstance(exc_info.value, FatalCalcError)


def test_operator_in_tail_is_rejected() -> None:
    with pytest.raises(CalcRuntimeError) as exc_info:
        evaluate(parse("(+ 1 - 2)"))
    assert exc_info.value.position == 2
    assert "Expected number at position 2, found operator -" in str(exc_info.value)
    assert not isinstance(exc_info.value, FatalCalcError)


def test_empty_tail() -> None:
    with pytest.raises(EmptyTailError) as exc_info:
        evaluate([Operator(OperatorKind.MUL)])
    assert "Tail is empty" in str(exc_info.value)
    assert isinstance(exc_info.value, FatalCalcError)


def test_empty_expression() -> None:
    with pytest.raises(CalcRuntimeError, match="empty expression"):
        evaluate([])
