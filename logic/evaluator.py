# logic/evaluator.py

"""
Evaluation of a formula AST under a complete variable assignment.
"""

from typing import Mapping

from parser import ast_nodes as ast


class UndefinedVariableError(LookupError):
    """The assignment has no value for a variable the formula references.

    Assignments are generated from the formula's own variables, so this
    signals a bug rather than bad input.
    """

    def __init__(self, token: str):
        super().__init__(f"Variable '{token}' does not have a value")
        self.token = token


class Evaluator(ast.Visitor):
    """
    Computes the truth value of each node. Both operands of a binary node are
    always evaluated.
    """

    def __init__(self, assignment: Mapping[str, bool]):
        self._assignment = assignment

    def visit_literal(self, n: ast.Literal) -> bool:
        return n.value

    def visit_variable(self, n: ast.Variable) -> bool:
        try:
            return self._assignment[n.token]
        except KeyError:
            raise UndefinedVariableError(n.token) from None

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    def visit_and(self, n: ast.And) -> bool:
        left, right = n.left.accept(self), n.right.accept(self)
        return left and right

    def visit_or(self, n: ast.Or) -> bool:
        left, right = n.left.accept(self), n.right.accept(self)
        return left or right

    def visit_xor(self, n: ast.Xor) -> bool:
        return n.left.accept(self) != n.right.accept(self)

    def visit_implies(self, n: ast.Implies) -> bool:
        left, right = n.left.accept(self), n.right.accept(self)
        return (not left) or right

    def visit_equals(self, n: ast.Equals) -> bool:
        return n.left.accept(self) == n.right.accept(self)

    def visit_not_equals(self, n: ast.NotEquals) -> bool:
        return n.left.accept(self) != n.right.accept(self)


def evaluate(root: ast.Expr, assignment: Mapping[str, bool]) -> bool:
    """Return the truth value of ``root`` under ``assignment``.

    Raises:
        UndefinedVariableError: ``assignment`` misses a referenced variable
    """
    return root.accept(Evaluator(assignment))
