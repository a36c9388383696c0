import logging
from dataclasses import dataclass
from typing import Callable

from prefixcalc.parser import WHITESPACE, ParserError, parse
from prefixcalc.runtime import CalcRuntimeError, evaluate
from prefixcalc.tokenizer import Number, TokenizerError
from prefixcalc.utils import FatalCalcError

logger = logging.getLogger(__name__)

LineReader = Callable[[str], str]


@dataclass
class ReplConfig:
    prompt: str = ">> "
    # end the session on division by zero, literal overflow etc. instead of reporting and continuing
    fail_fast: bool = False
    history_length: int = 1000


def evaluate_line(code: str) -> Number:
    return evaluate(parse(code))


def enable_history(config: ReplConfig) -> bool:
    """Turns on line editing and in-memory history for input(), where the platform has readline"""
    try:
        import readline
    except ImportError:
        logger.debug("readline is not available, running without history")
        return False
    readline.set_history_length(config.history_length)
    return True


def run_repl(read_line: LineReader = input, config: ReplConfig | None = None) -> None:
    config = config or ReplConfig()
    while True:
        try:
            code = read_line(config.prompt)
        except (EOFError, KeyboardInterrupt):
            logger.debug("Session ended by the user")
            break
        except OSError as e:
            print(f"Error: {e}")
            break

        if not code.strip(WHITESPACE):
            continue

        try:
            result = evaluate_line(code.strip(WHITESPACE))
        except FatalCalcError as e:
            if config.fail_fast:
                raise
            print(f"Error: {e}")
            continue
        except (TokenizerError, ParserError, CalcRuntimeError) as e:
            print(e)
            continue

        print(result)


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    config = ReplConfig()
    enable_history(config)
    try:
        run_repl(input, config)
    except FatalCalcError as e:
        raise SystemExit(f"Error: {e}")
