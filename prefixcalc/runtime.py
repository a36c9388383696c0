import logging
import operator
from dataclasses import dataclass
from typing import Callable, Optional

from prefixcalc.tokenizer import INT_MAX, INT_MIN, Expression, Number, Operator, OperatorKind
from prefixcalc.utils import FatalCalcError

logger = logging.getLogger(__name__)


@dataclass
class CalcRuntimeError(Exception):
    errmsg: str
    position: Optional[int] = None

    def __str__(self) -> str:
        return f"Runtime error: {self.errmsg}"


class EmptyTailError(CalcRuntimeError, FatalCalcError):
    pass


class DivisionByZeroError(CalcRuntimeError, FatalCalcError):
    pass


class IntegerOverflowError(CalcRuntimeError, FatalCalcError):
    pass


BinaryOperationImpl = Callable[[int, int], int]


def _truncating_div(a: int, b: int) -> int:
    # rounds toward zero, unlike //
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


FOLD_IMPLS: dict[OperatorKind, BinaryOperationImpl] = {
    OperatorKind.ADD: operator.add,
    OperatorKind.SUB: operator.sub,
    OperatorKind.MUL: operator.mul,
    OperatorKind.DIV: _truncating_div,
}


def evaluate(expression: Expression) -> Number:
    """Applies the leading operator to the numbers that follow it

    The operands are folded from left to right, seeded with the first one:
    (- 10 3 2) is (10 - 3) - 2.
    """
    if not expression:
        raise CalcRuntimeError("Invalid input: empty expression")
    head, *tail = expression
    if not isinstance(head, Operator):
        raise CalcRuntimeError(
            f"Invalid input: expression must begin with an operator, found {head}", position=0
        )

    operands = _to_numbers(tail)
    if not operands:
        raise EmptyTailError("Tail is empty", position=1)

    impl = FOLD_IMPLS[head.kind]
    result = operands[0]
    for position, operand in enumerate(operands[1:], start=2):
        if head.kind is OperatorKind.DIV and operand == 0:
            raise DivisionByZeroError(f"Division by zero at position {position}", position=position)
        result = impl(result, operand)
        if not INT_MIN <= result <= INT_MAX:
            raise IntegerOverflowError(
                f"Integer overflow at position {position}: result does not fit into 64 bits", position=position
            )

    logger.debug("Folded %d operands with %s into %d", len(operands), head, result)
    return Number(result)


def _to_numbers(tail: Expression) -> list[int]:
    numbers: list[int] = []
    for position, token in enumerate(tail, start=1):
        if isinstance(token, Number):
            numbers.append(token.value)
        else:
            raise CalcRuntimeError(f"Expected number at position {position}, found operator {token}", position=position)
    return numbers
