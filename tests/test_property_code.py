"""
Unit tests for conserved property digit ranking
"""

from itertools import product

import pytest

from rankcodes import (
    InvalidInputError,
    OutOfRangeError,
    property_count,
    rank_property,
    unrank_property,
)
from rankcodes import property_code


def _complete(head, base):
    return list(head) + [-sum(head) % base]


class TestRankProperty:
    """rank_property"""

    def test_small_example(self):
        assert rank_property([1, 2, 0], 3) == 1 * 3 + 2

    def test_corner_twists(self, corner_twists):
        # 2*3^6 + 1*3^3 + 1*3^2; the last digit is not stored
        assert rank_property(corner_twists, 3) == 1494

    @pytest.mark.parametrize("n,base", [(1, 2), (3, 2), (4, 3), (5, 2), (3, 4)])
    def test_enumeration_is_dense(self, n, base):
        ranks = [rank_property(_complete(head, base), base) for head in product(range(base), repeat=n - 1)]
        assert ranks == list(range(property_count(n, base)))

    def test_mapping(self):
        flips = {"UF": 1, "UR": 1, "UB": 0, "UL": 0}
        assert rank_property(["UF", "UR", "UB", "UL"], 2, mapping=flips.get) == 0b110

    def test_degenerate_lengths(self):
        assert rank_property([], 3) == 0
        assert rank_property([0], 3) == 0

    def test_base_one(self):
        assert rank_property([0, 0, 0], 1) == 0

    @pytest.mark.parametrize("digits", [[3, 0, 0], [-1, 1, 0], [1.0, 2, 0], [True, 2, 0]])
    def test_bad_digit_rejected(self, digits):
        with pytest.raises(InvalidInputError):
            rank_property(digits, 3)

    @pytest.mark.parametrize("base", [0, -3])
    def test_bad_base_rejected(self, base):
        with pytest.raises(InvalidInputError):
            rank_property([0, 0], base)

    def test_conservation_checked(self):
        with pytest.raises(InvalidInputError):
            rank_property([1, 0, 0], 3)
        with pytest.raises(InvalidInputError):
            rank_property([1], 3)

    def test_conservation_check_can_be_skipped(self):
        assert rank_property([1, 0, 0], 3, check=False) == 3

    def test_conservation_default_from_config(self, monkeypatch):
        monkeypatch.setattr(property_code, "CHECK_CONSERVATION", False)
        assert rank_property([1, 0, 0], 3) == 3
        with pytest.raises(InvalidInputError):
            rank_property([1, 0, 0], 3, check=True)

    def test_bits_limit(self, corner_twists):
        assert rank_property(corner_twists, 3, bits=12) == 1494
        with pytest.raises(OutOfRangeError):
            rank_property(corner_twists, 3, bits=8)


class TestUnrankProperty:
    """unrank_property"""

    def test_small_example(self):
        assert unrank_property(5, 3, 3) == [1, 2, 0]

    def test_corner_twists(self, corner_twists):
        assert unrank_property(1494, 8, 3) == corner_twists

    def test_leading_zeros_kept(self):
        assert unrank_property(1, 4, 2) == [0, 0, 1, 1]

    def test_round_trip_edge_flips(self):
        for head in product(range(2), repeat=5):
            digits = _complete(head, 2)
            assert unrank_property(rank_property(digits, 2), 6, 2) == digits

    def test_degenerate_lengths(self):
        assert unrank_property(0, 0, 3) == []
        assert unrank_property(0, 1, 3) == [0]

    def test_base_one(self):
        assert unrank_property(0, 4, 1) == [0, 0, 0, 0]

    @pytest.mark.parametrize("rank,n,base", [(9, 3, 3), (-1, 3, 3), (1, 1, 3), (1, 0, 2), (2048, 12, 2)])
    def test_out_of_range(self, rank, n, base):
        with pytest.raises(OutOfRangeError):
            unrank_property(rank, n, base)

    def test_bad_parameters_rejected(self):
        with pytest.raises(InvalidInputError):
            unrank_property(0, -1, 3)
        with pytest.raises(InvalidInputError):
            unrank_property(0, 3, 0)
