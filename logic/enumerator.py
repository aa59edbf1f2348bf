# logic/enumerator.py

"""
Brute-force enumeration of truth assignments and construction of the
truth table for one parsed formula.

Row i of a table over variables v0..v(n-1) gives v_k the value of bit k of i,
so the first variable alternates fastest:

    i   v0  v1
    0   F   F
    1   T   F
    2   F   T
    3   T   T
"""

import sys
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple

from parser.ast_nodes import Expr
from utils.logger import get_logger

from .evaluator import evaluate
from .variables import distinct_variables

DEFAULT_MAX_VARIABLES = 16


class TooManyVariablesError(ValueError):
    """A formula has more distinct variables than the configured limit allows."""

    def __init__(self, count: int, limit: int):
        super().__init__(
            f"Formula has {count} variables; at most {limit} are allowed "
            f"({2 ** count} rows would be needed)"
        )
        self.count = count
        self.limit = limit


class FormulaTooDeepError(ValueError):
    """The parsed tree is too deep for recursive variable collection or evaluation."""

    def __init__(self):
        super().__init__(
            "Formula is nested too deeply to evaluate "
            f"(interpreter recursion limit is {sys.getrecursionlimit()})"
        )


def enumerate_assignments(variables: Sequence[str]) -> Iterator[Dict[str, bool]]:
    """Yield all 2**len(variables) assignments over ``variables``.

    A token listed twice is driven by both of its positions; the later
    position's bit overwrites the earlier one. Pass distinct tokens to get
    one bit per variable.

    Args:
        variables: Variable tokens, position k maps to bit k of the row index

    Yields:
        A fresh token -> bool mapping per row, starting with all False
    """
    for row_index in range(1 << len(variables)):
        assignment: Dict[str, bool] = {}
        for position, token in enumerate(variables):
            assignment[token] = (row_index >> position) & 1 != 0
        yield assignment


@dataclass(frozen=True)
class TableRow:
    """
    One line of a truth table.

    Attributes:
        assignment: Value of every variable in this row.
        result: Value of the formula under that assignment.
    """
    assignment: Mapping[str, bool]
    result: bool


@dataclass(frozen=True)
class TruthTable:
    """
    Everything the renderer needs for one formula.

    Attributes:
        formula: The symbolic formula text used as the result column header.
        variables: Column order, first occurrence in the formula.
        rows: 2**len(variables) evaluated rows.
    """
    formula: str
    variables: Tuple[str, ...]
    rows: Tuple[TableRow, ...]

    def results(self) -> List[bool]:
        return [row.result for row in self.rows]

    def is_tautology(self) -> bool:
        return all(self.results())

    def is_contradiction(self) -> bool:
        return not any(self.results())


def build_truth_table(
    formula: str, root: Expr, max_variables: int = DEFAULT_MAX_VARIABLES
) -> TruthTable:
    """Evaluate ``root`` under every assignment of its distinct variables.

    Args:
        formula: Text shown as the formula column header
        root: Parsed formula
        max_variables: Largest number of distinct variables accepted

    Returns:
        The complete truth table

    Raises:
        TooManyVariablesError: ``root`` has more than ``max_variables`` variables
        FormulaTooDeepError: ``root`` is too deep to walk recursively
    """
    try:
        variables = distinct_variables(root)
    except RecursionError as exc:
        raise FormulaTooDeepError() from exc

    if len(variables) > max_variables:
        raise TooManyVariablesError(len(variables), max_variables)

    try:
        rows = tuple(
            TableRow(assignment, evaluate(root, assignment))
            for assignment in enumerate_assignments(variables)
        )
    except RecursionError as exc:
        raise FormulaTooDeepError() from exc

    get_logger().table_built(len(variables), len(rows))
    return TruthTable(formula, tuple(variables), rows)
