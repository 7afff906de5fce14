from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Union

# Prefijo de los nombres de resultado: rslt1, rslt2, ...
RESULT_PREFIX = "rslt"


def result_name(sequence_number: int) -> str:
    return f"{RESULT_PREFIX}{sequence_number}"


@dataclass(frozen=True)
class Quadruple:
    """
    Representa un cuádruplo de la forma: (operador, operando_izq, operando_der, resultado)
    Los operandos son un carácter de la expresión o el nombre rsltN de una subexpresión.
    """
    operator: str
    left_operand: str
    right_operand: str
    result: str

    def __str__(self) -> str:
        """
        Regresa una representación amigable del cuádruplo.
        """
        return f"({self.operator}, {self.left_operand}, {self.right_operand}, {self.result})"


# Nodos del árbol de expresión
@dataclass(frozen=True)
class OperandLeaf:
    """Hoja del árbol: un operando de un solo carácter."""
    symbol: str


@dataclass(frozen=True)
class OperatorNode:
    """
    Nodo interno: operador binario con sus dos hijos.
    sequence_number es el orden en que se creó el nodo al recorrer la postfija (empieza en 1).
    """
    operator: str
    left: "ExpressionNode"
    right: "ExpressionNode"
    sequence_number: int

    @property
    def result(self) -> str:
        return result_name(self.sequence_number)


ExpressionNode = Union[OperandLeaf, OperatorNode]


class Stack:
    """
    Implementación sencilla de una pila usando una lista de Python.
    Se usa para la pila de operadores (convertidor) y la pila de nodos (árbol).
    """

    def __init__(self, name: str = "stack") -> None:
        # name solo se usa para mensajes de error más claros.
        self.name: str = name
        self._items: List[Any] = []

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError(f"No se puede hacer pop() en la pila vacía '{self.name}'")
        return self._items.pop()

    def peek(self) -> Optional[Any]:
        if not self._items:
            return None
        return self._items[-1]

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{self.name}: {self._items}"


class QuadrupleQueue:
    """
    Representa la fila de cuádruplos.
    Los cuádruplos se agregan al final en orden de generación y no se modifican después.
    """

    def __init__(self) -> None:
        self._items: List[Quadruple] = []

    def enqueue(self, quad: Quadruple) -> int:
        self._items.append(quad)
        return len(self._items) - 1

    def to_list(self) -> List[Quadruple]:
        return list(self._items)

    def __iter__(self) -> Iterator[Quadruple]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
