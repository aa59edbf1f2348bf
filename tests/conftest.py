# tests/conftest.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Veritas test suite.

This module makes the project packages importable from the tests and provides
a few formulas that several test modules share.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import logic
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    # Bind the shared logger's console handler to the session-wide stdout
    # rather than to a per-test capture stream
    utils.get_logger()

    yield


@pytest.fixture
def basic_formula():
    """Provide a two-variable symbolic formula.

    Returns:
        str: Conjunction of A and B
    """
    return "A ∧ B"


@pytest.fixture
def complex_formula():
    """Provide a formula mixing every binary level with negation and grouping.

    Returns:
        str: Formula over A, B and C
    """
    return "¬(A ∧ B) → (C ⊕ A) = B ∨ ⊤"


@pytest.fixture
def word_formula():
    """Provide a formula written with word synonyms.

    Returns:
        str: Word-form formula equivalent to "A ∧ ¬B → C"
    """
    return "A and not B implies C"
