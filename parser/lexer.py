# parser/lexer.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Word-synonym lexer turning readable formulas into symbolic ones using SLY

"""Lexical preprocessing of word-form formulas.

Users may type ``A and not B implies C`` instead of ``A ∧ ¬B → C``. This
module tokenizes a raw input line and replaces every whole word that is a
known operator or constant synonym with its single-character symbol. All other
text, whitespace included, is passed through unchanged, so operator positions
in the result line up with what the recursive parser expects.

Supported Synonyms:
- and → ∧, or → ∨, not → ¬, xor → ⊕
- imply / implies → →
- equals → =, notequals → ≠
- true → ⊤, false → ⊥

Matching is case-sensitive and whole-word: ``android`` and ``NOT`` are left
as they are.
"""

from types import MappingProxyType

from sly import Lexer
from utils.logger import get_logger


class SynonymLexer(Lexer):
    """SLY-based lexer splitting a raw line into words, spaces and symbols.

    Words that spell an operator or constant are remapped to dedicated token
    types; everything else is a WORD, a WHITESPACE run or a single SYMBOL.

    Attributes:
        tokens: Set of valid token types
        WORD: Identifier pattern with keyword mapping
    """

    tokens = {
        "AND",
        "OR",
        "NOT",
        "XOR",
        "IMPLIES",
        "EQUALS",
        "NOTEQUALS",
        "TRUE",
        "FALSE",
        "WORD",
        "WHITESPACE",
        "SYMBOL",
    }

    # Letters, digits and underscores form one word, so "notequals" is never
    # read as "not" followed by "equals"
    WORD = r"[A-Za-z_][A-Za-z0-9_]*"

    WORD["and"] = "AND"
    WORD["or"] = "OR"
    WORD["not"] = "NOT"
    WORD["xor"] = "XOR"
    WORD["imply"] = "IMPLIES"
    WORD["implies"] = "IMPLIES"
    WORD["equals"] = "EQUALS"
    WORD["notequals"] = "NOTEQUALS"
    WORD["true"] = "TRUE"
    WORD["false"] = "FALSE"

    WHITESPACE = r"\s+"

    # Any other single character: operator glyphs, parentheses, digits
    SYMBOL = r"."


SYNONYM_SYMBOLS = MappingProxyType(
    {
        "AND": "∧",
        "OR": "∨",
        "NOT": "¬",
        "XOR": "⊕",
        "IMPLIES": "→",
        "EQUALS": "=",
        "NOTEQUALS": "≠",
        "TRUE": "⊤",
        "FALSE": "⊥",
    }
)


def preprocess(text: str) -> str:
    """Replace word synonyms in ``text`` with their operator symbols.

    Args:
        text: Raw formula line, e.g. ``"p and not q"``

    Returns:
        Symbolic formula, e.g. ``"p ∧ ¬ q"``
    """
    pieces = []
    for token in SynonymLexer().tokenize(text):
        pieces.append(SYNONYM_SYMBOLS.get(token.type, token.value))

    result = "".join(pieces)
    if result != text:
        get_logger().debug(f"Substituted synonyms: '{text}' -> '{result}'")
    return result
