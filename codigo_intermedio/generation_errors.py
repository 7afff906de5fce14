from typing import Optional


# ERRORES DEL GENERADOR DE CÓDIGO INTERMEDIO
class CodeGenerationError(Exception):
    pass


class ExpressionParsingError(CodeGenerationError):
    """
    Un carácter de la expresión no es operando ni operador reconocido.
    Guarda el carácter y, si se conoce, la columna (base 1) donde aparece.
    """

    def __init__(self, character: str, column: Optional[int] = None, message: Optional[str] = None) -> None:
        self.character: str = character
        self.column: Optional[int] = column
        if message is None:
            message = f"Character {character!r} is neither an operand nor an operator"
            if column is not None:
                message += f" (column {column})"
        super().__init__(message)


class UnbalancedParenthesisError(ExpressionParsingError):
    def __init__(self, character: str) -> None:
        if character == ")":
            message = "Closing parenthesis ')' has no matching '('"
        else:
            message = "Opening parenthesis '(' is never closed"
        super().__init__(character, message=message)


class StructuralError(CodeGenerationError):
    """
    La secuencia postfija no forma un árbol: falta un operando para
    algún operador o sobran operandos al final.
    """
    pass
