# parser/precedence.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Operator token table and precedence levels

"""Operator tokens, node constructors and split order.

The recursive parser enforces precedence by the order in which it looks for
operators: the loosest-binding level is scanned first, so whatever operator of
that level occurs first at nesting depth 0 becomes the root of the tree.

Split order (loosest first):
    1. →  =  ≠
    2. ∨  ⊕
    3. ∧
Negation (¬) is only tried once no binary operator is found, which makes it
bind tightest. All tokens of one level are matched in a single left-to-right
scan, so the leftmost occurrence of any of them wins and declaration order
never decides between two tokens of the same level.
"""

from types import MappingProxyType
from typing import Mapping, Tuple, Type

from .ast_nodes import And, BinaryOp, Equals, Implies, NotEquals, Or, Xor

NEGATION = "¬"
TRUE_GLYPH = "⊤"
FALSE_GLYPH = "⊥"
OPEN_GROUP = "("
CLOSE_GROUP = ")"

BINARY_OPERATORS: Mapping[str, Type[BinaryOp]] = MappingProxyType(
    {
        "→": Implies,
        "=": Equals,
        "≠": NotEquals,
        "∨": Or,
        "⊕": Xor,
        "∧": And,
    }
)

PRECEDENCE_LEVELS: Tuple[Tuple[str, ...], ...] = (
    ("→", "=", "≠"),
    ("∨", "⊕"),
    ("∧",),
)


def precedence_rank(token: str) -> int:
    """Return the 1-based split rank of a binary operator token.

    Rank 1 is the loosest binding level, i.e. the one split first.

    Raises:
        KeyError: If the token is not a binary operator
    """
    for rank, level in enumerate(PRECEDENCE_LEVELS, start=1):
        if token in level:
            return rank
    raise KeyError(token)


def _check_tables() -> None:
    ranked = [token for level in PRECEDENCE_LEVELS for token in level]
    if len(ranked) != len(set(ranked)):
        raise RuntimeError("Operator listed in more than one precedence level")
    if set(ranked) != set(BINARY_OPERATORS):
        raise RuntimeError(
            "Precedence levels and operator constructors disagree: "
            f"{sorted(set(ranked) ^ set(BINARY_OPERATORS))}"
        )
    for token, node_type in BINARY_OPERATORS.items():
        if node_type.symbol != token:
            raise RuntimeError(
                f"{node_type.__name__} renders as '{node_type.symbol}', "
                f"but is registered under '{token}'"
            )


_check_tables()
