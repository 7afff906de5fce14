from typing import Dict

# TABLA DE PRECEDENCIA
# '(' y ')' comparten el rango más bajo: solo delimitan la pila,
# el vaciado al encontrar ')' depende de que sean iguales.
PRECEDENCE: Dict[str, int] = {
    "(": 1,
    ")": 1,
    "+": 2,
    "-": 2,
    "*": 3,
    "/": 3,
    "^": 4,
}

RIGHT_ASSOCIATIVE = "^"

BINARY_OPERATORS = frozenset(op for op in PRECEDENCE if op not in "()")


def rank(operator: str) -> int:
    return PRECEDENCE[operator]


def is_operand(token: str) -> bool:
    """Un operando es una sola letra o dígito."""
    return len(token) == 1 and token.isalnum()


def is_binary_operator(token: str) -> bool:
    return token in BINARY_OPERATORS
