# logic/variables.py

"""
Collection of the free variables of a formula, in the order a depth-first,
left-to-right walk of the AST meets them.
"""

from typing import List

from parser import ast_nodes as ast


class VariableCollector(ast.Visitor):
    """Visitor appending every Variable token it meets; duplicates are kept."""

    def __init__(self):
        self.tokens: List[str] = []

    def collect(self, root: ast.Expr) -> List[str]:
        self.tokens = []
        root.accept(self)
        return self.tokens

    def visit_literal(self, n: ast.Literal) -> None:
        pass

    def visit_variable(self, n: ast.Variable) -> None:
        self.tokens.append(n.token)

    def visit_not(self, n: ast.Not) -> None:
        n.operand.accept(self)

    def _visit_binary(self, n: ast.BinaryOp) -> None:
        n.left.accept(self)
        n.right.accept(self)

    visit_and = _visit_binary
    visit_or = _visit_binary
    visit_xor = _visit_binary
    visit_implies = _visit_binary
    visit_equals = _visit_binary
    visit_not_equals = _visit_binary


def collect_variables(root: ast.Expr) -> List[str]:
    """Return every variable occurrence of ``root`` in traversal order.

    ``A ∧ (B ∨ A)`` yields ``["A", "B", "A"]``.
    """
    return VariableCollector().collect(root)


def distinct_variables(root: ast.Expr) -> List[str]:
    """Return the variables of ``root`` in first-occurrence order, each once."""
    return list(dict.fromkeys(collect_variables(root)))
