# parser/grouping.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Parenthesis balance checking and depth-0 segmentation

"""Parenthesis handling shared by every level of the recursive parser.

Two scans live here:

- ``check_balance`` rejects strings whose parentheses do not nest properly.
- ``ungrouped_ranges`` reports the runs of characters that sit outside every
  parenthesised group. The parser only looks for operators inside these
  ranges, which is what lets parentheses override precedence.
"""

from typing import List

from .exceptions import GroupingErrorKind, UnbalancedGroupingError
from .precedence import CLOSE_GROUP, OPEN_GROUP


def check_balance(text: str) -> None:
    """Verify that every parenthesis in ``text`` is matched.

    Args:
        text: Formula or sub-formula to check

    Raises:
        UnbalancedGroupingError: NO_OPENING as soon as a ``)`` has no pending
            ``(``, NO_CLOSING if a ``(`` is still pending at the end
    """
    pending: List[int] = []

    for index, char in enumerate(text):
        if char == OPEN_GROUP:
            pending.append(index)
        elif char == CLOSE_GROUP:
            if not pending:
                raise UnbalancedGroupingError(GroupingErrorKind.NO_OPENING)
            pending.pop()

    if pending:
        raise UnbalancedGroupingError(GroupingErrorKind.NO_CLOSING)


def is_balanced(text: str) -> bool:
    """Return True if ``text`` passes check_balance."""
    try:
        check_balance(text)
    except UnbalancedGroupingError:
        return False
    return True


def ungrouped_ranges(text: str) -> List[range]:
    """Return the maximal index ranges of ``text`` lying at nesting depth 0.

    A run starts at the first non-parenthesis character seen at depth 0 and
    ends at the next ``(`` opened at depth 0, or at the end of the string.
    The closing ``)`` of a group is never the start of a run.

    Example:
        >>> ungrouped_ranges("A∧(B∨C)→D")
        [range(0, 2), range(7, 9)]
        >>> ungrouped_ranges("(A∧B)")
        []
    """
    ranges: List[range] = []
    depth = 0
    start = None

    for index, char in enumerate(text):
        if char == CLOSE_GROUP:
            depth -= 1
        elif char == OPEN_GROUP:
            if depth == 0 and start is not None:
                ranges.append(range(start, index))
                start = None
            depth += 1
        elif depth == 0 and start is None:
            start = index

    if start is not None:
        ranges.append(range(start, len(text)))

    return ranges
