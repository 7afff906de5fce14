from typing import List, Tuple

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from generation_errors import ExpressionParsingError

SCANNER = Lark.open(
    "expression.lark",
    rel_to=__file__,
    parser="lalr",
    start="start",
    lexer="basic",
)


def scan(expression: str) -> List[Tuple[str, str]]:
    "Devuelve una lista de tokens (tipo, valor). Lanza ExpressionParsingError con un carácter inválido."
    try:
        return [(tok.type, tok.value) for tok in SCANNER.lex(expression)]
    except UnexpectedCharacters as e:
        raise ExpressionParsingError(e.char, column=e.column) from e


def clean(expression: str) -> List[str]:
    "Devuelve los caracteres de la expresión sin espacios, listos para el convertidor."
    return [value for _, value in scan(expression)]


if __name__ == "__main__":
    import sys

    expression = sys.argv[1] if len(sys.argv) > 1 else "(a + b) * c ^ d"

    print("TOKENS")
    try:
        for ttype, value in scan(expression):
            print(f"({ttype}, {value!r})")
    except ExpressionParsingError as e:
        print("\n[Error de escaneo]", e)
        sys.exit(1)
