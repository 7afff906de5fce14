from dataclasses import dataclass, field
from typing import List, Optional

from generation_errors import CodeGenerationError
from expression_to_quads import ExpressionQuadrupleGenerator
from expression_tree import build_expression_tree
from infix_to_postfix import PostfixConverter
from intermediate_code_structures import ExpressionNode, Quadruple
from scan_expression import clean

SCAN = "scan"
POSTFIX = "postfix"
TREE = "tree"
QUADRUPLES = "quadruples"


@dataclass
class PipelineResult:
    """
    Resultado de una corrida completa.

    Si todo sale bien, postfix, tree y quadruples están llenos y error es None.
    Si alguna etapa falla, error guarda la excepción, failed_stage el nombre
    de la etapa y no se reporta ni postfija ni cuádruplos.
    """
    expression: str
    postfix: List[str] = field(default_factory=list)
    tree: Optional[ExpressionNode] = None
    quadruples: List[Quadruple] = field(default_factory=list)
    error: Optional[CodeGenerationError] = None
    failed_stage: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def generate_intermediate_code(expression: str) -> PipelineResult:
    """
    Genera el código intermedio en forma de cuádruplos.

    No lanza los errores del generador: si una etapa falla regresa un
    PipelineResult con el error y la etapa, y las etapas siguientes no corren.
    Quien llama decide si termina, reporta o pide otra expresión.
    """
    stage = SCAN
    try:
        # 1) Escaneo: quita espacios y valida los caracteres
        tokens = clean(expression)

        # 2) Infija -> postfija
        stage = POSTFIX
        postfix = PostfixConverter().convert(tokens)

        # 3) Postfija -> árbol de expresión
        stage = TREE
        tree = build_expression_tree(postfix)

        # 4) Árbol -> cuádruplos en inorden
        stage = QUADRUPLES
        quadruples = ExpressionQuadrupleGenerator().generate(tree).to_list()
    except CodeGenerationError as e:
        return PipelineResult(expression, error=e, failed_stage=stage)

    return PipelineResult(expression, postfix, tree, quadruples)


def generate_quadruples(expression: str) -> PipelineResult:
    """
    Variante que lanza ExpressionParsingError o StructuralError en lugar de
    regresarlos dentro del resultado.
    """
    result = generate_intermediate_code(expression)
    if result.error is not None:
        raise result.error
    return result
