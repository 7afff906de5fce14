from typing import Iterable, Iterator

from generation_errors import StructuralError
from intermediate_code_structures import ExpressionNode, OperandLeaf, OperatorNode, Stack
from precedence import is_binary_operator, is_operand


def build_expression_tree(postfix: Iterable[str]) -> ExpressionNode:
    """
    Construye el árbol binario de expresión a partir de la secuencia postfija.

    - Operando: se mete una hoja a la pila de nodos.
    - Operador: el primer pop es el hijo derecho y el segundo el izquierdo
      (importa para '-' y '/'); el nodo nuevo recibe el siguiente número de
      secuencia, empezando en 1, y se mete a la pila.

    Al terminar debe quedar exactamente un nodo: la raíz.
    Lanza StructuralError si la postfija está mal formada.
    """
    node_stack = Stack("NODOS")
    sequence_number = 1

    for position, token in enumerate(postfix, start=1):
        if is_binary_operator(token):
            if len(node_stack) < 2:
                raise StructuralError(
                    f"Operator {token!r} at position {position} needs two operands, "
                    f"found {len(node_stack)}"
                )
            right = node_stack.pop()
            left = node_stack.pop()
            node_stack.push(OperatorNode(token, left, right, sequence_number))
            sequence_number += 1
        elif is_operand(token):
            node_stack.push(OperandLeaf(token))
        else:
            raise StructuralError(
                f"Token {token!r} at position {position} cannot appear in a postfix sequence"
            )

    if len(node_stack) != 1:
        raise StructuralError(
            f"Postfix sequence must reduce to a single tree, {len(node_stack)} nodes left"
        )

    return node_stack.pop()


def iter_operator_nodes(root: ExpressionNode) -> Iterator[OperatorNode]:
    """Recorre los nodos internos en postorden (izquierdo, derecho, nodo)."""
    # Nodo, derecho, izquierdo con una pila; al invertirlo queda el postorden
    pending = Stack("RECORRIDO")
    reverse_postorder = []
    if isinstance(root, OperatorNode):
        pending.push(root)

    while not pending.is_empty():
        node = pending.pop()
        reverse_postorder.append(node)
        for child in (node.left, node.right):
            if isinstance(child, OperatorNode):
                pending.push(child)

    yield from reversed(reverse_postorder)


def render_tree(root: ExpressionNode) -> str:
    """
    Dibuja el árbol con sangría, raíz primero.
    Los nodos internos muestran su operador y el nombre de su resultado.
    """
    pending = Stack("RECORRIDO")
    pending.push((root, ""))
    lines = []

    while not pending.is_empty():
        node, indent = pending.pop()
        if isinstance(node, OperandLeaf):
            lines.append(f"{indent}{node.symbol}")
            continue
        lines.append(f"{indent}{node.operator} [{node.result}]")
        # El derecho entra primero para que el izquierdo se dibuje antes
        pending.push((node.right, indent + "  "))
        pending.push((node.left, indent + "  "))

    return "\n".join(lines)
