from typing import Optional

from intermediate_code_structures import (
    ExpressionNode,
    OperatorNode,
    Quadruple,
    QuadrupleQueue,
    Stack,
)


# Generador principal de cuádruplos
class ExpressionQuadrupleGenerator:
    """
    Recorre el árbol de expresión en inorden (izquierdo, nodo, derecho) y
    llena una QuadrupleQueue con un cuádruplo por cada nodo interno.

    Los nombres rsltN salen del número de secuencia que el árbol ya asignó;
    aquí no se renumera nada.
    """

    def __init__(self, quadruples: Optional[QuadrupleQueue] = None) -> None:
        # Fila de cuádruplos donde se van agregando en orden de generación
        self.quadruples: QuadrupleQueue = (
            quadruples if quadruples is not None else QuadrupleQueue()
        )

    def generate(self, root: ExpressionNode) -> QuadrupleQueue:
        """
        Genera los cuádruplos de todo el árbol y regresa la fila.
        """
        self._visit(root)
        return self.quadruples

    def _visit(self, root: ExpressionNode) -> None:
        # Inorden con pila explícita: la profundidad del árbol no está acotada.
        # Las hojas no generan cuádruplos.
        pending = Stack("RECORRIDO")
        node = root
        while isinstance(node, OperatorNode) or not pending.is_empty():
            # Baja por la rama izquierda guardando los nodos internos
            while isinstance(node, OperatorNode):
                pending.push(node)
                node = node.left

            current = pending.pop()
            self._emit(current)
            node = current.right

    def _emit(self, node: OperatorNode) -> None:
        self.quadruples.enqueue(
            Quadruple(
                node.operator,
                operand_text(node.left),
                operand_text(node.right),
                node.result,
            )
        )


def operand_text(node: ExpressionNode) -> str:
    """
    Texto con el que un hijo aparece dentro del cuádruplo de su padre:
    el nombre rsltN si es nodo interno, o su propio carácter si es hoja.
    """
    if isinstance(node, OperatorNode):
        return node.result
    return node.symbol
