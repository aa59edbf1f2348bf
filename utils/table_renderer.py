# utils/table_renderer.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Plain-text rendering of truth tables

"""Text layout for truth tables.

A table over ``A`` and ``B`` for ``A ∧ B`` renders as::

    ｜ A ｜ B ｜ A ∧ B ｜
    --------------------
    ｜ F ｜ F ｜   F   ｜
    ｜ T ｜ F ｜   F   ｜
    ｜ F ｜ T ｜   F   ｜
    ｜ T ｜ T ｜   T   ｜
    --------------------

The result cell is padded to the width of the formula header, with the value
under its middle (left of middle for an even-length header).
"""

from typing import TYPE_CHECKING, List

# Type hint only; logic.runner imports this module
if TYPE_CHECKING:
    from logic.enumerator import TruthTable

SEPARATOR = "｜"
RULE = "-"


def format_value(value: bool) -> str:
    return "T" if value else "F"


def render_table(table: "TruthTable") -> str:
    """Render ``table`` as text, one line per row plus header and rules.

    Args:
        table: Truth table to render

    Returns:
        Multi-line string without a trailing newline
    """
    formula = table.formula
    rule = RULE * (len(table.variables) * 5 + len(formula) + 5)
    left_pad = " " * ((len(formula) - 1) // 2)
    right_pad = " " * (len(formula) - 1 - len(left_pad))

    header = f"{SEPARATOR} "
    for variable in table.variables:
        header += f"{variable} {SEPARATOR} "
    header += f"{formula} {SEPARATOR}"

    lines: List[str] = [header, rule]

    for row in table.rows:
        line = SEPARATOR
        for variable in table.variables:
            line += f" {format_value(row.assignment[variable])} {SEPARATOR}"
        line += f" {left_pad}{format_value(row.result)}{right_pad} {SEPARATOR}"
        lines.append(line)

    lines.append(rule)
    return "\n".join(lines)
