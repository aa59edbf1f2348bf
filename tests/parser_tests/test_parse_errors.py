# tests/parser_tests/test_parse_errors.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Test suite for parser error handling

"""Test suite for parser error handling.

Every malformed formula must raise a ParseError subclass that tells the
caller what went wrong, rather than terminating the process.
"""

import pytest
from parser import parse, parse_formula
from parser.exceptions import (
    GroupingErrorKind,
    MalformedTerminalError,
    MissingOperandError,
    ParseError,
    UnbalancedGroupingError,
)
from parser.ast_nodes import And, Not, Or, Variable
from logic.enumerator import build_truth_table
from utils.logger import get_logger


class TestParserErrors:
    """Test cases for parser syntax validation and error handling."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    GROUPING_CASES = [
        ("(A", GroupingErrorKind.NO_CLOSING),
        ("A)", GroupingErrorKind.NO_OPENING),
        (")A(", GroupingErrorKind.NO_OPENING),
        ("(A∧B", GroupingErrorKind.NO_CLOSING),
        ("A∧B)", GroupingErrorKind.NO_OPENING),
        ("¬((A)", GroupingErrorKind.NO_CLOSING),
    ]

    @pytest.mark.parametrize("formula, kind", GROUPING_CASES)
    def test_unbalanced_grouping(self, formula, kind):
        with pytest.raises(UnbalancedGroupingError) as exc_info:
            parse(formula)

        assert exc_info.value.kind is kind

    MISSING_OPERAND_CASES = [
        ("A∧", "∧", "right"),
        ("∧A", "∧", "left"),
        ("A → ", "→", "right"),
        ("¬", "¬", "right"),
        ("A∧BC", "∧", "right"),
        ("∨", "∨", "left"),
        # The innermost missing operand is reported
        ("A∧(B∨)", "∨", "right"),
        ("(=A)→B", "=", "left"),
    ]

    @pytest.mark.parametrize("formula, operator, position", MISSING_OPERAND_CASES)
    def test_missing_operand(self, formula, operator, position):
        with pytest.raises(MissingOperandError) as exc_info:
            parse(formula)

        error = exc_info.value
        self.logger.debug(f"Parse error message: {error}")

        assert error.operator == operator
        assert error.position == position
        assert operator in str(error)
        assert position in str(error)

    MALFORMED_CASES = [
        "",
        "   ",
        "AB",
        "()",
        "(  )",
        "A B",
        "A¬B",
        "foo",
    ]

    @pytest.mark.parametrize("formula", MALFORMED_CASES)
    def test_malformed_terminal(self, formula):
        with pytest.raises(MalformedTerminalError):
            parse(formula)

    def test_empty_input_message(self):
        with pytest.raises(ParseError, match="empty"):
            parse("")

    def test_errors_share_parse_error_base(self):
        for formula in ["(A", "A∧", "AB"]:
            with pytest.raises(ParseError):
                parse(formula)

    def test_unknown_words_survive_preprocessing_and_fail(self):
        with pytest.raises(MissingOperandError) as exc_info:
            parse_formula("A and maybe")

        assert exc_info.value.operand.strip() == "maybe"

    def test_deep_left_nesting_is_reported_as_parse_error(self):
        formula = "(" * 600 + "A" + "∧B)" * 600
        with pytest.raises(ParseError, match="nested too deeply"):
            parse(formula)


class TestLongFormulas:
    """Long formulas without left nesting parse regardless of length."""

    def test_flat_chain_of_400_operators(self):
        tree = parse("∧".join("A" * 401))

        depth = 0
        while isinstance(tree, And):
            assert tree.left == Variable("A")
            tree = tree.right
            depth += 1

        assert depth == 400
        assert tree == Variable("A")

    def test_flat_chain_with_two_variables_builds_table(self):
        formula = "∧".join("AB" * 100)
        table = build_truth_table(formula, parse(formula))

        assert table.variables == ("A", "B")
        assert table.results() == [False, False, False, True]

    def test_mixed_levels_chain(self):
        tree = parse("A∨B∧" * 300 + "A")
        assert isinstance(tree, Or)

    def test_long_negation_chain(self):
        tree = parse("¬" * 1000 + "A")
        for _ in range(1000):
            assert isinstance(tree, Not)
            tree = tree.operand
        assert tree == Variable("A")

    def test_deep_redundant_groups(self):
        assert parse("(" * 2000 + "A" + ")" * 2000) == Variable("A")

    def test_deep_right_nesting(self):
        formula = "A∧(" * 800 + "B" + ")" * 800
        tree = parse(formula)
        for _ in range(800):
            assert tree.left == Variable("A")
            tree = tree.right
        assert tree == Variable("B")

    def test_missing_operand_at_end_of_long_chain(self):
        with pytest.raises(MissingOperandError) as exc_info:
            parse("A∨" * 400)

        assert exc_info.value.operator == "∨"
        assert exc_info.value.position == "right"
