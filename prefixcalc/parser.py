import logging
from dataclasses import dataclass

from prefixcalc.tokenizer import Expression, Operator, describe_char, scan_atom
from prefixcalc.utils import point_at

logger = logging.getLogger(__name__)

WHITESPACE = " \t\r\n"


@dataclass
class ParserError(Exception):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return "\n".join([f"Parser error: {self.errmsg}", *point_at(self.code, self.error_char_idx)])


def parse(code: str) -> Expression:
    expression, rest = parse_expression(code)
    if rest.strip(WHITESPACE):
        raise ParserError(
            f"Unexpected trailing input: {rest.strip(WHITESPACE)!r}",
            code=code,
            error_char_idx=len(code) - len(rest.lstrip(WHITESPACE)),
        )
    return expression


def parse_expression(code: str) -> tuple[Expression, str]:
    """Parses one "(op atom ...)" form from the beginning of the code

    Returns the tokens in source order along with the unconsumed rest of the input.
    """
    i = _consume_char(code, 0, "(")
    i = _skip_whitespace(code, i)

    head_idx = i
    head, i = scan_atom(code, i)
    if not isinstance(head, Operator):
        raise ParserError(f"Operator expected, found {head}", code=code, error_char_idx=head_idx)

    expression: Expression = [head]
    while True:
        separator_end = _skip_whitespace(code, i)
        if separator_end >= len(code):
            raise ParserError("Unterminated expression, ')' expected", code=code, error_char_idx=len(code))
        if code[separator_end] == ")":
            if len(expression) < 2:
                raise ParserError(f"Operand expected after {head}", code=code, error_char_idx=separator_end)
            i = separator_end + 1
            break
        if separator_end == i:
            raise ParserError(
                f"Whitespace or ')' expected, found {describe_char(code, i)}", code=code, error_char_idx=i
            )
        atom, i = scan_atom(code, separator_end)
        expression.append(atom)

    logger.debug("Parsed %d atoms from %r", len(expression), code)
    return expression, code[i:]


def _consume_char(code: str, i: int, char: str) -> int:
    if i >= len(code) or code[i] != char:
        raise ParserError(f"{char!r} expected, found {describe_char(code, i)}", code=code, error_char_idx=i)
    return i + 1


def _skip_whitespace(code: str, i: int) -> int:
    while i < len(code) and code[i] in WHITESPACE:
        i += 1
    return i
