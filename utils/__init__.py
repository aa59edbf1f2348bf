# utils/__init__.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Utility module exports

from .line_reader import read_formulas, read_formula_file, FormulaInputError
from .logger import LogLevel, get_logger, configure_logging

__all__ = [
    "read_formulas",
    "read_formula_file",
    "FormulaInputError",
    "LogLevel",
    "get_logger",
    "configure_logging",
]
