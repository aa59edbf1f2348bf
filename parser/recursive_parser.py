# parser/recursive_parser.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Precedence-driven recursive splitting parser for symbolic formulas

"""Recursive parser for symbolic propositional formulas.

Rather than encoding precedence in grammar productions, the parser enforces it
through the order in which it splits strings. For every sub-string it:

1. validates parenthesis balance,
2. strips one redundant pair of enclosing parentheses when possible,
3. looks for the loosest-binding binary operator at nesting depth 0 and splits
   the string around its first occurrence,
4. falls back to a leading negation,
5. finally classifies what is left as a one-character terminal.

Since the first occurrence wins, a chain such as ``A ∧ B ∧ C`` nests to the
right. Right operands, negation operands and stripped groups are therefore
followed in a loop, and only left operands recurse. Recursion depth grows
with parenthesised nesting on the left (``((A ∧ B) ∧ C) ∧ D``), never with
the length of a flat chain.

Every sub-string is re-validated and re-segmented from scratch. Formulas are
short, so the repeated scanning is not worth optimizing away.

Input is expected to be symbolic already (see ``parser.lexer.preprocess`` for
the word-to-symbol substitution).
"""

from typing import List, Optional, Tuple

from .ast_nodes import Expr, Literal, Not, Variable
from .exceptions import MalformedTerminalError, MissingOperandError
from .grouping import check_balance, is_balanced, ungrouped_ranges
from .precedence import (
    BINARY_OPERATORS,
    CLOSE_GROUP,
    FALSE_GLYPH,
    NEGATION,
    OPEN_GROUP,
    PRECEDENCE_LEVELS,
    TRUE_GLYPH,
    precedence_rank,
)
from utils.logger import get_logger


class _FormulaParser:
    """Stateless splitter turning a symbolic formula string into an AST."""

    def parse(self, text: str) -> Expr:
        """Parse ``text`` into an expression tree.

        Args:
            text: Symbolic formula, e.g. ``"A ∧ ¬(B → C)"``

        Returns:
            Root AST node

        Raises:
            UnbalancedGroupingError: Parentheses do not nest
            MissingOperandError: An operator lacks an operand
            MalformedTerminalError: Some part reduces to no valid formula
        """
        # operators still waiting for their right operand; left is None for ¬
        chain: List[Tuple[str, Optional[Expr]]] = []

        while True:
            try:
                check_balance(text)

                trimmed = text.strip()

                inner = self._strip_redundant_group(trimmed)
                if inner is not None:
                    text = inner
                    continue

                split = self._find_split(text)
                if split is None:
                    node = self._terminal(trimmed)
                    break

                token, index = split
                chain.append((token, self._left_operand(text, token, index)))
                text = text[index + 1:]

            except MalformedTerminalError as exc:
                if not chain:
                    raise
                raise MissingOperandError(chain[-1][0], "right", text) from exc

        for token, left in reversed(chain):
            node = Not(node) if left is None else BINARY_OPERATORS[token](left, node)
        return node

    def _strip_redundant_group(self, trimmed: str):
        """Return the interior of ``(...)`` if it is itself balanced, else None.

        ``(A)∧(B)`` starts and ends with parentheses but its interior
        ``A)∧(B`` is unbalanced, so nothing is stripped in that case.
        """
        if len(trimmed) < 2:
            return None
        if trimmed[0] != OPEN_GROUP or trimmed[-1] != CLOSE_GROUP:
            return None

        interior = trimmed[1:-1]
        if not is_balanced(interior):
            get_logger().debug(f"Keeping outer group of '{trimmed}'")
            return None
        return interior

    def _find_split(self, text: str) -> Optional[Tuple[str, int]]:
        """Locate the depth-0 operator to split on, loosest level first."""
        ranges = ungrouped_ranges(text)

        for level in PRECEDENCE_LEVELS:
            for segment in ranges:
                for index in segment:
                    if text[index] in level:
                        return text[index], index

        for segment in ranges:
            for index in segment:
                if text[index] == NEGATION:
                    return NEGATION, index

        return None

    def _left_operand(self, text: str, token: str, index: int) -> Optional[Expr]:
        left_text = text[:index]

        if token == NEGATION:
            # negation is prefix-only; "A¬B" has no operator joining A to ¬B
            if left_text.strip():
                raise MalformedTerminalError(text)
            get_logger().debug(f"Negating '{text[index + 1:]}'")
            return None

        get_logger().debug(
            f"Splitting at '{token}' (rank {precedence_rank(token)}, index {index}): "
            f"'{left_text}' | '{text[index + 1:]}'"
        )

        try:
            return self.parse(left_text)
        except MalformedTerminalError as exc:
            raise MissingOperandError(token, "left", left_text) from exc

    def _terminal(self, trimmed: str) -> Expr:
        if len(trimmed) != 1:
            raise MalformedTerminalError(trimmed)

        if trimmed == TRUE_GLYPH:
            return Literal(True)
        if trimmed == FALSE_GLYPH:
            return Literal(False)
        return Variable(trimmed)
