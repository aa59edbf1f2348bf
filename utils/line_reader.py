# utils/line_reader.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Line-oriented formula input

from pathlib import Path
from typing import Iterator, TextIO, Tuple

from utils.logger import get_logger


class FormulaInputError(Exception):
    """Exception raised when the formula input file cannot be read."""

    pass


def read_formulas(stream: TextIO) -> Iterator[Tuple[int, str]]:
    """Yield formulas from a text stream, one per line, until end of stream.

    Blank lines are skipped; line numbers still count them so that error
    messages point at the right place in the input.

    Args:
        stream: Open text stream, e.g. ``sys.stdin``

    Yields:
        (line_number, formula) pairs, line numbers starting at 1
    """
    logger = get_logger()

    for line_number, line in enumerate(stream, start=1):
        formula = line.rstrip("\r\n")
        if not formula.strip():
            logger.debug(f"Skipping blank line {line_number}")
            continue
        yield line_number, formula


def read_formula_file(filepath: str) -> Iterator[Tuple[int, str]]:
    """Yield formulas from a UTF-8 text file.

    Args:
        filepath: Path to the formula file

    Yields:
        (line_number, formula) pairs

    Raises:
        FormulaInputError: If the file is missing or unreadable
    """
    path = Path(filepath)

    if not path.exists():
        raise FormulaInputError(f"Formula file not found: {filepath}")

    get_logger().debug(f"Reading formula file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            yield from read_formulas(file)
    except (OSError, UnicodeDecodeError) as e:
        raise FormulaInputError(f"Could not read formula file {filepath}: {e}")
