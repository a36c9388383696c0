from prefixcalc.parser import ParserError, parse
from prefixcalc.runtime import CalcRuntimeError, evaluate
from prefixcalc.tokenizer import TokenizerError, untokenize

for code in [
    "(+ 1 2 3)",
    "(- 10 3 2)",
    "(* 2 3 4)",
    "(/ 20 2 5)",
    "(+  1   2)",
    "(/ 7 2)",
    "(- 1 5)",
    "(+ 5)",
    "(+)",
    "(1 + 2)",
    "+ 1 2",
    "(+ 1",
    "(+ 1 (2 3))",
    "(+ 1 2) 3",
    "(+ 1 - 2)",
    "(/ 5 0)",
    "(+ 99999999999999999999 1)",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        expression = parse(code)
    except (TokenizerError, ParserError) as e:
        print(e)
        continue

    print(f"tokens: {' '.join(repr(t) for t in expression)}")
    print(f"canonical: {untokenize(expression)}")

    try:
        result = evaluate(expression)
    except CalcRuntimeError as e:
        print(e)
        continue
    print(f"result: {result}")
