# logic/runner.py

"""
FormulaTableRunner: glue code that takes formula lines one at a time,
preprocesses and parses each, builds its truth table and writes the rendered
table out. A bad line is logged and skipped; the next line is processed as
if nothing happened.
"""

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO, Tuple

from parser import parse, preprocess
from parser.exceptions import ParseError
from utils.logger import get_logger
from utils.table_renderer import render_table

from .enumerator import (
    DEFAULT_MAX_VARIABLES,
    FormulaTooDeepError,
    TooManyVariablesError,
    TruthTable,
    build_truth_table,
)


@dataclass
class RunSummary:
    """Counts of accepted and rejected formulas for one input run."""
    accepted: int = 0
    rejected: int = 0

    @property
    def all_accepted(self) -> bool:
        return self.rejected == 0


class FormulaTableRunner:
    """
    Drives the parse -> enumerate -> render pipeline over a sequence of
    numbered formula lines.
    """

    def __init__(
        self,
        max_variables: int = DEFAULT_MAX_VARIABLES,
        synonyms: bool = True,
        output: Optional[TextIO] = None,
    ):
        if max_variables < 0:
            raise ValueError("max_variables must not be negative")
        self._max_variables = max_variables
        self._synonyms = synonyms
        self._output = output

    def _symbolic(self, raw: str) -> str:
        return (preprocess(raw) if self._synonyms else raw).strip()

    def build_table(self, raw: str) -> TruthTable:
        """
        Turn one raw formula line into its truth table.

        Raises:
            ParseError: the line is not a well-formed formula.
            TooManyVariablesError: the formula exceeds the variable limit.
            FormulaTooDeepError: the formula is too deep to evaluate.
        """
        formula = self._symbolic(raw)
        root = parse(formula)
        return build_truth_table(formula, root, self._max_variables)

    def process_line(self, line_number: int, raw: str) -> Optional[TruthTable]:
        """
        Build and write the table for one line. Returns None if the line was
        rejected.
        """
        logger = get_logger()
        logger.formula_received(line_number, raw)

        try:
            table = self.build_table(raw)
        except (ParseError, TooManyVariablesError, FormulaTooDeepError) as e:
            logger.formula_rejected(line_number, raw, str(e))
            return None

        if table.variables and table.is_tautology():
            logger.info(f"Line {line_number} is a tautology")
        elif table.variables and table.is_contradiction():
            logger.info(f"Line {line_number} is a contradiction")

        print(render_table(table), file=self._output or sys.stdout)
        return table

    def validate_line(self, line_number: int, raw: str) -> bool:
        """Parse one line without enumerating it."""
        logger = get_logger()
        try:
            parse(self._symbolic(raw))
        except ParseError as e:
            logger.formula_rejected(line_number, raw, str(e))
            return False

        logger.formula_accepted(line_number, raw)
        return True

    def run(
        self, formulas: Iterable[Tuple[int, str]], validate_only: bool = False
    ) -> RunSummary:
        """
        Process every (line_number, formula) pair in order.

        Args:
            formulas: Numbered formula lines, e.g. from utils.read_formulas.
            validate_only: Only parse; do not build or print tables.
        """
        summary = RunSummary()

        for line_number, raw in formulas:
            if validate_only:
                ok = self.validate_line(line_number, raw)
            else:
                ok = self.process_line(line_number, raw) is not None

            if ok:
                summary.accepted += 1
            else:
                summary.rejected += 1

        get_logger().run_summary(summary.accepted, summary.rejected)
        return summary
