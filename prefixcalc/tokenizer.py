import string
from dataclasses import dataclass

from prefixcalc.utils import FatalCalcError, PrintableEnum, point_at

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


@dataclass
class TokenizerError(Exception):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return "\n".join([f"[Tokenizer error] {self.errmsg}", *point_at(self.code, self.error_char_idx)])


class LiteralOverflowError(TokenizerError, FatalCalcError):
    """Integer literal does not fit into a signed 64-bit integer"""


class OperatorKind(PrintableEnum):
    ADD = "+"
    SUB = "-"
    DIV = "/"
    MUL = "*"


@dataclass(frozen=True)
class Operator:
    kind: OperatorKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class Number:
    value: int

    def __str__(self) -> str:
        return str(self.value)


Token = Operator | Number
Expression = list[Token]

OPERATOR_TOKENS = {kind.value: Operator(kind) for kind in OperatorKind}


def describe_char(code: str, i: int) -> str:
    return repr(code[i]) if i < len(code) else "end of input"


def scan_atom(code: str, i: int) -> tuple[Token, int]:
    """Matches a single operator or number starting at code[i]

    Returns the token and the index right after it.
    """
    if i < len(code) and code[i] in OPERATOR_TOKENS:
        return OPERATOR_TOKENS[code[i]], i + 1
    elif i < len(code) and code[i] in string.digits:
        number_end_idx = i + 1
        while number_end_idx < len(code) and code[number_end_idx] in string.digits:
            number_end_idx += 1
        lexeme = code[i:number_end_idx]
        # length check first: int() refuses very long digit strings
        significant = lexeme.lstrip("0")
        if len(significant) > len(str(INT_MAX)) or int(significant or "0") > INT_MAX:
            raise LiteralOverflowError(
                f"Integer literal {lexeme} is out of range (max {INT_MAX})", code=code, error_char_idx=i
            )
        return Number(int(significant or "0")), number_end_idx
    else:
        raise TokenizerError(
            f"Operator or number expected, found {describe_char(code, i)}", code=code, error_char_idx=i
        )


def untokenize(expression: Expression) -> str:
    return "(" + " ".join(str(t) for t in expression) + ")"
