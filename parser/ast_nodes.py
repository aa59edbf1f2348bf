# parser/ast_nodes.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional logic formulas. The set of node types is
closed: the parser only ever produces the classes listed below, and every
visitor is expected to handle all of them.

Node Types:
    Literal: Boolean constants (⊤ and ⊥)
    Variable: Single-character propositional variables
    Not: Negation
    And, Or, Xor, Implies, Equals, NotEquals: Binary connectives

All nodes support the visitor design pattern for traversal and evaluation.
Rendering a node with ``str`` yields a fully parenthesised formula that parses
back to an equal tree.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Protocol


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and evaluation.
    """

    def visit_literal(self, n: Literal): ...

    def visit_variable(self, n: Variable): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_xor(self, n: Xor): ...

    def visit_implies(self, n: Implies): ...

    def visit_equals(self, n: Equals): ...

    def visit_not_equals(self, n: NotEquals): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and must implement
    the accept method for visitor dispatch and __str__ for string representation.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Literal(Expr):
    """Boolean constant in a formula.

    Attributes:
        value: The truth value this constant stands for
    """

    value: bool

    def accept(self, v: Visitor):
        return v.visit_literal(self)

    def __str__(self) -> str:
        return "⊤" if self.value else "⊥"


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Propositional variable identified by a single-character token.

    A variable has no intrinsic value; it is looked up in the assignment
    supplied at evaluation time.

    Attributes:
        token: The character naming this variable
    """

    token: str

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def __str__(self) -> str:
        return self.token


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of a single operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"¬{self.operand}"


@dataclass(frozen=True, slots=True)
class BinaryOp(Expr):
    """Common shape of the two-operand connectives.

    Subclasses only differ by their operator glyph and visitor method; the
    glyph is what the parser splits on and what ``__str__`` prints.

    Attributes:
        left: Left operand
        right: Right operand
    """

    symbol: ClassVar[str] = ""

    left: Expr
    right: Expr

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"


@dataclass(frozen=True, slots=True)
class And(BinaryOp):
    """Conjunction: true when both operands are true."""

    symbol: ClassVar[str] = "∧"

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(BinaryOp):
    """Disjunction: true when at least one operand is true."""

    symbol: ClassVar[str] = "∨"

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Xor(BinaryOp):
    """Exclusive disjunction: true when exactly one operand is true."""

    symbol: ClassVar[str] = "⊕"

    def accept(self, v: Visitor):
        return v.visit_xor(self)


@dataclass(frozen=True, slots=True)
class Implies(BinaryOp):
    """Material implication: false only when left is true and right is false."""

    symbol: ClassVar[str] = "→"

    def accept(self, v: Visitor):
        return v.visit_implies(self)


@dataclass(frozen=True, slots=True)
class Equals(BinaryOp):
    """Equivalence: true when both operands have the same value."""

    symbol: ClassVar[str] = "="

    def accept(self, v: Visitor):
        return v.visit_equals(self)


@dataclass(frozen=True, slots=True)
class NotEquals(BinaryOp):
    """Non-equivalence: true when the operands differ."""

    symbol: ClassVar[str] = "≠"

    def accept(self, v: Visitor):
        return v.visit_not_equals(self)
