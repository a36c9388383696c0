import functools
import random
import string

from prefixcalc.parser import ParserError
from prefixcalc.repl import evaluate_line
from prefixcalc.runtime import CalcRuntimeError, DivisionByZeroError, FOLD_IMPLS
from prefixcalc.tokenizer import INT_MAX, INT_MIN, OperatorKind, TokenizerError

KNOWN_ERRORS = (TokenizerError, ParserError, CalcRuntimeError)


def eval_reference(kind: OperatorKind, operands: list[int]) -> int | str:
    try:
        result = functools.reduce(FOLD_IMPLS[kind], operands)
    except ZeroDivisionError:
        return "division by zero"
    return result if INT_MIN <= result <= INT_MAX else "overflow"


def eval_my(code: str) -> int | str:
    try:
        return evaluate_line(code).value
    except DivisionByZeroError:
        return "division by zero"
    except CalcRuntimeError as e:
        return "overflow" if "overflow" in e.errmsg.lower() else str(e)


def _spaces(min_count: int) -> str:
    return " " * random.randint(min_count, 3)


def generate_valid() -> tuple[str, OperatorKind, list[int]]:
    kind = random.choice(list(OperatorKind))
    operands = [random.randint(0, 1000) for _ in range(random.randint(1, 6))]
    code = "(" + kind.value + "".join(_spaces(1) + str(n) for n in operands) + _spaces(0) + ")"
    return code, kind, operands


def generate_garbage(length: int) -> str:
    return "".join(random.choices(string.digits + "()+-*/ x", k=length))


if __name__ == "__main__":
    while True:
        code, kind, operands = generate_valid()
        res_reference = eval_reference(kind, operands)
        res_my = eval_my(code)
        if res_reference != res_my:
            print(f"{code!r}\nreference: {res_reference}\nmy: {res_my}\n\n")

        garbage = generate_garbage(10)
        try:
            evaluate_line(garbage)
        except KNOWN_ERRORS:
            pass
        except Exception as e:
            print(f"{garbage!r}\nunexpected {type(e).__name__}: {e}\n\n")
