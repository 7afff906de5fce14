import pytest

from generation_errors import StructuralError
from expression_tree import build_expression_tree, iter_operator_nodes, render_tree
from infix_to_postfix import to_postfix
from intermediate_code_structures import OperandLeaf, OperatorNode


def test_single_operand_is_a_leaf():
    assert build_expression_tree(["a"]) == OperandLeaf("a")


def test_first_pop_is_right_child():
    root = build_expression_tree(list("ab-"))
    assert root == OperatorNode("-", OperandLeaf("a"), OperandLeaf("b"), 1)


def test_sequence_numbers_follow_postfix_order():
    # a+b*c -> abc*+ : '*' se crea primero
    root = build_expression_tree(list("abc*+"))
    assert root.operator == "+"
    assert root.sequence_number == 2
    assert root.left == OperandLeaf("a")
    assert root.right.operator == "*"
    assert root.right.sequence_number == 1


def test_right_associative_tree_shape():
    root = build_expression_tree(to_postfix("a^b^c"))
    assert root.left == OperandLeaf("a")
    assert root.right == OperatorNode("^", OperandLeaf("b"), OperandLeaf("c"), 1)


def test_postorder_numbers_are_consecutive():
    root = build_expression_tree(to_postfix("(a+b)*(c-d)/e^f"))
    numbers = [node.sequence_number for node in iter_operator_nodes(root)]
    assert numbers == list(range(1, len(numbers) + 1))


def test_children_numbered_before_parent():
    root = build_expression_tree(to_postfix("a-(b*c)^(d+e)/f"))
    for node in iter_operator_nodes(root):
        for child in (node.left, node.right):
            if isinstance(child, OperatorNode):
                assert child.sequence_number < node.sequence_number


def test_tree_is_immutable():
    root = build_expression_tree(list("ab+"))
    with pytest.raises(AttributeError):
        root.operator = "-"


def test_render_tree():
    root = build_expression_tree(list("ab+c*"))
    assert render_tree(root) == "* [rslt2]\n  + [rslt1]\n    a\n    b\n  c"


@pytest.mark.parametrize(
    "postfix",
    [
        "+",
        "a+",
        "ab+*",
        "ab",
        "",
        "ab+c",
    ],
)
def test_malformed_postfix(postfix):
    with pytest.raises(StructuralError):
        build_expression_tree(list(postfix))


def test_parenthesis_in_postfix():
    with pytest.raises(StructuralError):
        build_expression_tree(["a", "(", "b", "+"])


def test_traversals_on_deep_tree():
    root = build_expression_tree(to_postfix("a" + "^a" * 1500))
    numbers = [node.sequence_number for node in iter_operator_nodes(root)]
    assert numbers == list(range(1, 1501))
    lines = render_tree(root).splitlines()
    assert len(lines) == 3001
    assert lines[0] == "^ [rslt1500]"
