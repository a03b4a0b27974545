"""
Shared fixtures for rankcodes tests
"""

import pytest


@pytest.fixture
def corner_permutation():
    """Eight distinct values in a scrambled order"""
    return [3, 6, 5, 7, 0, 2, 1, 4]


@pytest.fixture
def corner_twists():
    """Base-3 digits summing to a multiple of 3"""
    return [2, 0, 0, 1, 1, 0, 0, 2]


@pytest.fixture
def slice_edges():
    """Twelve edge labels where 8..11 belong to the middle slice"""
    return [0, 1, 2, 8, 3, 4, 9, 5, 6, 10, 7, 11]
