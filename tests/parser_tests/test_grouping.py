# tests/parser_tests/test_grouping.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Test suite for parenthesis balance checking and depth-0 segmentation

"""Test suite for the grouping helpers used at every parser recursion level."""

import pytest
from parser.exceptions import GroupingErrorKind, UnbalancedGroupingError
from parser.grouping import check_balance, is_balanced, ungrouped_ranges


class TestCheckBalance:
    """Test cases for parenthesis balance validation."""

    BALANCED = [
        "",
        "A",
        "(A)",
        "((A))",
        "(A)∧(B)",
        "¬(A ∨ (B ∧ C))",
        "()",
    ]

    @pytest.mark.parametrize("text", BALANCED)
    def test_balanced_strings_pass(self, text):
        check_balance(text)
        assert is_balanced(text)

    UNBALANCED = [
        ("(A", GroupingErrorKind.NO_CLOSING),
        ("A)", GroupingErrorKind.NO_OPENING),
        (")A(", GroupingErrorKind.NO_OPENING),
        ("((A)", GroupingErrorKind.NO_CLOSING),
        ("(A))", GroupingErrorKind.NO_OPENING),
        ("A)∧(B", GroupingErrorKind.NO_OPENING),
        ("(A∧(B∨C)", GroupingErrorKind.NO_CLOSING),
    ]

    @pytest.mark.parametrize("text, kind", UNBALANCED)
    def test_unbalanced_strings_report_kind(self, text, kind):
        with pytest.raises(UnbalancedGroupingError) as exc_info:
            check_balance(text)

        assert exc_info.value.kind is kind
        assert not is_balanced(text)

    def test_closing_first_fails_before_end_of_scan(self):
        """A leading ')' fails as NO_OPENING even though '(' follows later."""
        with pytest.raises(UnbalancedGroupingError) as exc_info:
            check_balance(")(")

        assert exc_info.value.kind is GroupingErrorKind.NO_OPENING


class TestUngroupedRanges:
    """Test cases for depth-0 segmentation."""

    SEGMENTATION_CASES = [
        ("A", [range(0, 1)]),
        ("A∧B", [range(0, 3)]),
        ("(A∧B)", []),
        ("((A))", []),
        ("A∧(B∨C)", [range(0, 2)]),
        ("(A∨B)∧C", [range(5, 7)]),
        ("A∧(B∨C)→D", [range(0, 2), range(7, 9)]),
        ("(A)∧(B)", [range(3, 4)]),
        ("¬(A)", [range(0, 1)]),
        ("", []),
    ]

    @pytest.mark.parametrize("text, expected", SEGMENTATION_CASES)
    def test_segmentation(self, text, expected):
        assert ungrouped_ranges(text) == expected

    def test_ranges_never_contain_grouped_characters(self):
        text = "A ∧ (B ∨ (C → D)) ⊕ E"
        inside = set(range(text.index("("), text.rindex(")") + 1))

        for segment in ungrouped_ranges(text):
            assert not inside.intersection(segment)
