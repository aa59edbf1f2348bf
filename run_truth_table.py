#!/usr/bin/env python3
# run_truth_table.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Command-line interface for truth table generation with configurable logging levels

import sys
import argparse
from pathlib import Path

from logic.enumerator import DEFAULT_MAX_VARIABLES
from logic.runner import FormulaTableRunner
from utils.line_reader import FormulaInputError, read_formula_file, read_formulas
from utils.logger import configure_logging, get_logger


def non_negative_int(text: str) -> int:
    """argparse type for --max-variables."""
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return value


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Veritas propositional logic truth table generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  echo "A and (B or not C)" | python run_truth_table.py
  python run_truth_table.py -i formulas.txt
  python run_truth_table.py -i formulas.txt --validate-only -v
  python run_truth_table.py --debug < formulas.txt

Formula syntax (one formula per line):
  Symbols: ¬ ∧ ∨ ⊕ → = ≠ ⊤ ⊥ ( )
  Words:   not and or xor imply implies equals notequals true false
  Variables are single characters, e.g. A, B, p, q

Limits:
  At most --max-variables distinct variables (default 16) per formula.
  Formula length is not limited, but a formula whose tree is more than a
  few hundred levels deep (a long chain A ∧ B ∧ C ∧ ..., or left nesting
  such as ((A ∧ B) ∧ C) ∧ ...) is rejected as nested too deeply.
  Use --validate-only to check such formulas without building tables.
        """,
    )

    parser.add_argument(
        "-i",
        "--input",
        type=Path,
        help="Read formulas from this file instead of standard input",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--max-variables",
        type=non_negative_int,
        default=DEFAULT_MAX_VARIABLES,
        help=f"Reject formulas with more distinct variables (default: {DEFAULT_MAX_VARIABLES})",
    )

    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Only check that each formula parses; print no tables",
    )

    parser.add_argument(
        "--no-synonyms",
        action="store_true",
        help="Do not replace words such as 'and' or 'true' with symbols",
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the truth table generator.

    Returns:
        Exit code (0 if every formula was accepted, non-zero otherwise)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    runner = FormulaTableRunner(
        max_variables=args.max_variables, synonyms=not args.no_synonyms
    )

    try:
        if args.input is not None:
            formulas = read_formula_file(str(args.input))
        else:
            formulas = read_formulas(sys.stdin)

        summary = runner.run(formulas, validate_only=args.validate_only)
        return 0 if summary.all_accepted else 2

    except FormulaInputError as e:
        logger.error(f"Input error: {e}")
        return 1

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
