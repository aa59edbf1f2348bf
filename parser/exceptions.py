# parser/exceptions.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for propositional formula parsing.

Every failure the parser can produce derives from ParseError, so callers that
process formulas line by line can reject the offending line with a single
``except ParseError`` clause and keep going with the next one.
"""

from enum import Enum


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Base class for the more specific grouping, operand and terminal errors.
    Used throughout the parsing pipeline to provide consistent error handling.
    """

    pass


class GroupingErrorKind(Enum):
    """Which side of a parenthesis pair is missing."""

    NO_OPENING = "no opening parenthesis"
    NO_CLOSING = "no closing parenthesis"


class UnbalancedGroupingError(ParseError):
    """Parenthesis nesting in the formula is not well-formed.

    Attributes:
        kind: Whether a ``)`` had no matching ``(`` or a ``(`` was never closed
    """

    def __init__(self, kind: GroupingErrorKind):
        super().__init__(f"Unbalanced grouping: {kind.value}")
        self.kind = kind


class MissingOperandError(ParseError):
    """An operator has no valid operand on one of its sides.

    Attributes:
        operator: The operator token that was split on
        position: ``"left"`` or ``"right"``
        operand: The text found where the operand was expected
    """

    def __init__(self, operator: str, position: str, operand: str = ""):
        detail = f": '{operand.strip()}'" if operand.strip() else ""
        super().__init__(
            f"Operator '{operator}' is missing its {position} operand{detail}"
        )
        self.operator = operator
        self.position = position
        self.operand = operand


class MalformedTerminalError(ParseError):
    """Text that is neither a group, an operator split nor a one-character terminal."""

    def __init__(self, text: str):
        if text.strip():
            message = f"Cannot interpret '{text.strip()}' as a formula"
        else:
            message = "Input formula is empty."
        super().__init__(message)
        self.text = text
