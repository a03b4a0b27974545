"""
Reversible ranking of structural properties of short sequences.

Permutations rank into [0, n!), conserved property digits into
[0, base^(n-1)) and marked positions into [0, C(n, k)). The ranks are dense
and meant to be used as indices into precomputed tables.
"""
from .counting import (
    binomial,
    check_rank,
    factorial,
    permutation_count,
    position_count,
    property_count,
    storage_bits,
)
from .errors import InvalidInputError, OutOfRangeError, RankCodeError
from .lehmer_code import rank_permutation, unrank_permutation
from .position_code import rank_position, unrank_position
from .property_code import rank_property, unrank_property

__version__ = "0.1.0"

__all__ = [
    "binomial",
    "check_rank",
    "factorial",
    "permutation_count",
    "position_count",
    "property_count",
    "storage_bits",
    "InvalidInputError",
    "OutOfRangeError",
    "RankCodeError",
    "rank_permutation",
    "unrank_permutation",
    "rank_position",
    "unrank_position",
    "rank_property",
    "unrank_property",
]
