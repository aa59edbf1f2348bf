# parser/__init__.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Formula parsing components for propositional logic expressions

"""Propositional formula parsing.

This package turns formula text into abstract syntax trees. The parsing
pipeline has two stages:

1. ``preprocess`` rewrites word synonyms (``and``, ``implies``, ``true`` ...)
   into single-character operator symbols.
2. ``parse`` splits the symbolic string recursively, loosest operator first,
   into an immutable tree of nodes from ``parser.ast_nodes``.

Core Functions:
    parse: Converts symbolic formula strings into Abstract Syntax Trees
    parse_formula: Synonym preprocessing followed by parse

Supported Logic:
    - Constants ⊤ and ⊥
    - Single-character propositional variables
    - ¬ (not), ∧ (and), ∨ (or), ⊕ (xor), → (implies), = (equals), ≠ (not equals)
    - Parenthetical grouping

Example:
    >>> from parser import parse_formula
    >>> parse_formula("A and (B or C)")
    And(left=Variable(token='A'), right=Or(left=Variable(token='B'), right=Variable(token='C')))
"""

from .exceptions import (
    GroupingErrorKind,
    MalformedTerminalError,
    MissingOperandError,
    ParseError,
    UnbalancedGroupingError,
)
from .lexer import preprocess
from .recursive_parser import _FormulaParser
from utils.logger import get_logger


def parse(source: str):
    """Parse a symbolic formula string into Abstract Syntax Tree representation.

    Uses a fresh parser instance for each invocation; nothing is shared
    between two calls.

    Args:
        source: Formula using symbolic operators only

    Returns:
        Root AST node representing the parsed formula structure

    Raises:
        ParseError: Formula is malformed (one of the ParseError subclasses)
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _FormulaParser()

    try:
        result = parser.parse(source)
    except ParseError as exc:
        logger.debug(f"{type(exc).__name__} encountered during formula parsing")
        raise
    except RecursionError as exc:
        raise ParseError("Formula is nested too deeply to parse") from exc

    logger.debug(f"Formula parsed successfully into AST with type: {type(result).__name__}")
    return result


def parse_formula(raw: str, synonyms: bool = True):
    """Preprocess a raw input line and parse it.

    Args:
        raw: Formula as typed by the user, words or symbols
        synonyms: Apply word-to-symbol substitution first

    Returns:
        Root AST node

    Raises:
        ParseError: Formula is malformed
    """
    source = preprocess(raw) if synonyms else raw
    return parse(source)


__all__ = [
    "parse",
    "parse_formula",
    "preprocess",
    "ParseError",
    "UnbalancedGroupingError",
    "GroupingErrorKind",
    "MissingOperandError",
    "MalformedTerminalError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing components"
