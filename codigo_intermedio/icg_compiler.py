import sys
from pathlib import Path
from typing import Callable, List, Optional

from generation_errors import ExpressionParsingError, StructuralError, UnbalancedParenthesisError
from expression_tree import iter_operator_nodes, render_tree
from intermediate_code_structures import Quadruple
from quadruple_pipeline import PipelineResult, generate_intermediate_code

PROMPT = "\nEnter infix expression with character-long operands: "

COLUMN_WIDTH = 12
TABLE_TITLE = "Quadruple table (ordered as per the inorder traversal of the binary expression tree):"
TABLE_COLUMNS = ("Operator", "Operand1", "Operand2", "Result")


class CompilationError(Exception):
    """Error listo para mostrarse al usuario."""
    pass


def format_postfix(postfix: List[str]) -> str:
    return "Reverse polish notation: " + "".join(postfix)


def _table_row(values) -> str:
    return "".join(f"{value:<{COLUMN_WIDTH}}" for value in values).rstrip()


def format_quadruple_table(quadruples: List[Quadruple]) -> str:
    lines = [TABLE_TITLE, "", _table_row(TABLE_COLUMNS)]
    for quad in quadruples:
        lines.append(
            _table_row((quad.operator, quad.left_operand, quad.right_operand, quad.result))
        )
    return "\n".join(lines)


class IntermediateCodeCompiler:
    """
    Front end del generador: recibe expresiones, corre el pipeline y muestra
    la postfija, el árbol y la tabla de cuádruplos.
    """

    def __init__(self, verbose: bool = False, show_tree: bool = False):
        """
        Args:
            verbose: Si es True, imprime cada fase del pipeline
            show_tree: Si es True, imprime también el árbol de expresión
        """
        self.verbose = verbose
        self.show_tree = show_tree
        self.result: Optional[PipelineResult] = None

    def log(self, message: str, level: str = "INFO"):
        """Imprime el mensaje solo si está activo el modo verbose."""
        if self.verbose:
            print(f"[{level}] {message}")

    def compile_expression(self, expression: str) -> bool:
        """
        Corre escaneo, postfija, árbol y cuádruplos sobre una expresión.

        Returns:
            True si la expresión se compiló

        Raises:
            CompilationError: Con el mensaje formateado si alguna fase falla
        """
        self.result = None
        self.log(f"Expresión: {expression.strip()!r}")

        result = generate_intermediate_code(expression)
        if not result.ok:
            self.log(f"Falló la fase '{result.failed_stage}'", level="ERROR")
            raise CompilationError(self._format_error(expression, result))

        self.log("✓ Escaneo y conversión a postfija completados")
        self.log(f"  - Tokens en postfija: {len(result.postfix)}")
        self.log("✓ Árbol de expresión construido")
        self.log(f"  - Nodos de operador: {len(list(iter_operator_nodes(result.tree)))}")
        self.log("✓ Código intermedio generado")
        self.log(f"  - Cuádruplos generados: {len(result.quadruples)}")

        self.result = result
        return True

    def compile_file(self, file_path: str) -> bool:
        """
        Compila una expresión por línea. Las líneas vacías y las que empiezan
        con '#' se ignoran.

        Returns:
            True si todas las expresiones compilaron

        Raises:
            CompilationError: Si el archivo no se puede leer
        """
        source_path = Path(file_path)
        if not source_path.exists():
            raise CompilationError(f"❌ Archivo no encontrado: {file_path}")

        try:
            content = source_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CompilationError(f"❌ Error de codificación: El archivo debe estar en UTF-8\n{e}")
        except OSError as e:
            raise CompilationError(f"❌ Error al leer archivo: {e}")

        all_ok = True
        for line_number, line in enumerate(content.splitlines(), start=1):
            expression = line.strip()
            if not expression or expression.startswith("#"):
                continue

            print(f"\n[{line_number}] {expression}")
            try:
                self.compile_expression(expression)
                self.show_results()
            except CompilationError as e:
                print(e)
                all_ok = False

        return all_ok

    def show_results(self):
        """Muestra la postfija, el árbol (opcional) y la tabla de cuádruplos."""
        if self.result is None:
            print("❌ No hay resultados para mostrar. Compila primero.")
            return

        print("\n" + format_postfix(self.result.postfix))

        if self.show_tree:
            print("\nExpression tree:\n")
            print(render_tree(self.result.tree))

        print("\n" + format_quadruple_table(self.result.quadruples))

    def _format_error(self, expression: str, result: PipelineResult) -> str:
        """Arma el mensaje de error con contexto y una sugerencia."""
        error = result.error

        if isinstance(error, UnbalancedParenthesisError):
            msg = f"❌ ERROR DE SINTAXIS:\n{error}\n"
            if error.character == ")":
                msg += "\n💡 Sugerencia: ¿Sobra un paréntesis de cierre ())?"
            else:
                msg += "\n💡 Sugerencia: ¿Falta un paréntesis de cierre ())?"
            return msg

        if isinstance(error, ExpressionParsingError):
            msg = f"❌ ERROR DE SINTAXIS:\n{error}\n"
            if error.column is not None:
                msg += f"\n  {expression}\n  {' ' * (error.column - 1)}^\n"
            msg += "\n💡 Sugerencia: Usa operandos de una letra o dígito y los operadores + - * / ^ ( )"
            return msg

        if isinstance(error, StructuralError):
            msg = f"❌ ERROR ESTRUCTURAL:\n{error}\n"
            msg += "\n💡 Sugerencia: Cada operador binario necesita un operando a cada lado"
            return msg

        return f"❌ Error durante la fase '{result.failed_stage}':\n{error}"


def interactive_session(
    compiler: IntermediateCodeCompiler,
    read_line: Callable[[str], str] = input,
) -> bool:
    """
    Pide expresiones hasta recibir una línea vacía o fin de archivo.
    Si una expresión falla se muestra el error y se vuelve a preguntar.

    Returns: True si todas las expresiones compilaron
    """
    all_ok = True
    while True:
        try:
            expression = read_line(PROMPT)
        except EOFError:
            break

        if not expression.strip():
            break

        try:
            compiler.compile_expression(expression)
            compiler.show_results()
        except CompilationError as e:
            print(f"\n{e}")
            all_ok = False

    return all_ok


def print_usage(program: str):
    print("=" * 60)
    print("GENERADOR DE CÓDIGO INTERMEDIO")
    print("=" * 60)
    print("\nUso:")
    print(f"  {program} \"<expresión>\"")
    print(f"  {program}                      (modo interactivo)")
    print(f"  {program} --file <archivo>")
    print("\nOpciones:")
    print("  --file <archivo>  Compila una expresión por línea")
    print("  --tree            Muestra el árbol de expresión")
    print("  --verbose         Muestra información detallada de cada fase")
    print("  --help            Muestra esta ayuda")
    print("\nEjemplos:")
    print(f"  {program} \"(a+b)*c\"")
    print(f"  {program} \"a^b^c\" --tree --verbose")
    print(f"  {program} --file expresiones.txt")
    print("=" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    """Punto de entrada. Regresa el código de salida del proceso."""
    program = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "icg"
    args = list(sys.argv[1:] if argv is None else argv)

    if "--help" in args or "-h" in args:
        print_usage(program)
        return 0

    verbose = "--verbose" in args
    show_tree = "--tree" in args

    file_path: Optional[str] = None
    if "--file" in args:
        index = args.index("--file")
        if index + 1 >= len(args):
            print("❌ Falta la ruta después de --file")
            print_usage(program)
            return 1
        file_path = args[index + 1]
        del args[index:index + 2]

    expression_parts = [arg for arg in args if arg not in ("--verbose", "--tree")]
    unknown = [arg for arg in expression_parts if arg.startswith("--")]
    if unknown:
        print(f"❌ Opción desconocida: {unknown[0]}")
        print_usage(program)
        return 1

    compiler = IntermediateCodeCompiler(verbose=verbose, show_tree=show_tree)

    try:
        if file_path is not None:
            success = compiler.compile_file(file_path)
        elif expression_parts:
            compiler.compile_expression(" ".join(expression_parts))
            compiler.show_results()
            success = True
        else:
            success = interactive_session(compiler)

        return 0 if success else 1

    except CompilationError as e:
        print(f"\n{e}")
        return 1
    except KeyboardInterrupt:
        print("\n\n⚠️  Compilación interrumpida por el usuario")
        return 1


if __name__ == "__main__":
    sys.exit(main())
