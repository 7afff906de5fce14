from typing import Iterable, List

from generation_errors import ExpressionParsingError, UnbalancedParenthesisError
from intermediate_code_structures import Stack
from precedence import PRECEDENCE, RIGHT_ASSOCIATIVE, is_operand, rank
from scan_expression import clean

# Centinelas: '(' se mete a la pila al inicio y ')' se procesa al final
# para vaciar la pila sin tratar el fin de la entrada como caso especial.
OPENING_SENTINEL = "("
CLOSING_SENTINEL = ")"


class PostfixConverter:
    """
    Convierte una secuencia de tokens infija (sin espacios) a notación postfija
    usando una pila de operadores y la tabla de precedencia.

    '^' es asociativo a la derecha: no saca de la pila otro '^' de igual rango.
    '+ - * /' son asociativos a la izquierda: sacan todo lo de rango mayor o igual.
    """

    def __init__(self) -> None:
        self.operator_stack: Stack = Stack("OPERADORES")
        self.postfix: List[str] = []
        # Paréntesis abiertos por el usuario que aún no se cierran
        self._open_groups: int = 0

    def convert(self, tokens: Iterable[str]) -> List[str]:
        self.operator_stack = Stack("OPERADORES")
        self.operator_stack.push(OPENING_SENTINEL)
        self.postfix = []
        self._open_groups = 0

        for token in tokens:
            self._consume(token)

        if self._open_groups > 0:
            raise UnbalancedParenthesisError("(")

        self._close_group(CLOSING_SENTINEL)
        return self.postfix

    def _consume(self, token: str) -> None:
        if is_operand(token):
            self.postfix.append(token)
        elif token == "(":
            self.operator_stack.push(token)
            self._open_groups += 1
        elif token == ")":
            if self._open_groups == 0:
                raise UnbalancedParenthesisError(")")
            self._open_groups -= 1
            self._close_group(token)
        elif token == RIGHT_ASSOCIATIVE:
            self._push_right_associative(token)
        elif token in PRECEDENCE:
            self._push_left_associative(token)
        else:
            raise ExpressionParsingError(token)

    def _top_rank(self) -> int:
        return rank(self.operator_stack.peek())

    def _pop_to_output(self) -> None:
        self.postfix.append(self.operator_stack.pop())

    def _close_group(self, closing: str) -> None:
        # Saca operadores hasta llegar al '(' correspondiente y lo descarta
        while self._top_rank() > rank(closing):
            self._pop_to_output()
        self.operator_stack.pop()

    def _push_right_associative(self, operator: str) -> None:
        if rank(operator) >= self._top_rank():
            self.operator_stack.push(operator)
            return
        while rank(operator) < self._top_rank():
            self._pop_to_output()
        self.operator_stack.push(operator)

    def _push_left_associative(self, operator: str) -> None:
        if rank(operator) > self._top_rank():
            self.operator_stack.push(operator)
            return
        while rank(operator) <= self._top_rank():
            self._pop_to_output()
        self.operator_stack.push(operator)


def to_postfix(expression: str) -> List[str]:
    """
    Limpia la expresión con el escáner y la convierte a postfija.
    """
    return PostfixConverter().convert(clean(expression))
