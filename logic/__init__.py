# logic/__init__.py

"""Formula semantics.

This package provides:
  • collect_variables / distinct_variables: free variables in traversal order
  • evaluate: truth value of an AST under an assignment
  • enumerate_assignments / build_truth_table: brute-force truth tables
  • FormulaTableRunner: line-by-line parse, enumerate and render loop
"""

from .variables import collect_variables, distinct_variables
from .evaluator import evaluate, UndefinedVariableError
from .enumerator import (
    DEFAULT_MAX_VARIABLES,
    FormulaTooDeepError,
    TableRow,
    TooManyVariablesError,
    TruthTable,
    build_truth_table,
    enumerate_assignments,
)
from .runner import FormulaTableRunner, RunSummary

__all__ = [
    "collect_variables",
    "distinct_variables",
    "evaluate",
    "UndefinedVariableError",
    "DEFAULT_MAX_VARIABLES",
    "FormulaTooDeepError",
    "TableRow",
    "TooManyVariablesError",
    "TruthTable",
    "build_truth_table",
    "enumerate_assignments",
    "FormulaTableRunner",
    "RunSummary",
]
