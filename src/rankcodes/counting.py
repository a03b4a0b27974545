"""
Counting helpers shared by the coders.

Each ``*_count`` function returns the number of distinct ranks for a given
parameterization, so callers can size their tables with it.
"""
import math

from .errors import InvalidInputError, OutOfRangeError


def _check_size(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an int (got {value!r})")
    if value < 0:
        raise InvalidInputError(f"{name} must be non-negative (got {value})")


def factorial(n: int) -> int:
    _check_size("n", n)
    return math.factorial(n)


def binomial(n: int, k: int) -> int:
    """C(n, k), which is 0 when k > n."""
    _check_size("n", n)
    _check_size("k", k)
    return math.comb(n, k)


def permutation_count(n: int) -> int:
    return factorial(n)


def property_count(n: int, base: int) -> int:
    _check_size("n", n)
    if isinstance(base, bool) or not isinstance(base, int) or base < 1:
        raise InvalidInputError(f"base must be an int >= 1 (got {base!r})")
    # The last digit is implied by the others, so only n - 1 are free.
    return base ** max(n - 1, 0)


def position_count(n: int, k: int) -> int:
    _check_size("n", n)
    _check_size("k", k)
    if k > n:
        raise InvalidInputError(f"cannot mark {k} positions out of {n}")
    return math.comb(n, k)


def storage_bits(limit: int) -> int:
    """
    Number of bits needed to store any rank in [0, limit).

    8! needs 16 bits, 12! needs 29.
    """
    _check_size("limit", limit)
    if limit == 0:
        raise InvalidInputError("limit must be at least 1")
    return (limit - 1).bit_length()


def check_rank(rank: int, limit: int) -> None:
    if isinstance(rank, bool) or not isinstance(rank, int):
        raise InvalidInputError(f"rank must be an int (got {rank!r})")
    if not 0 <= rank < limit:
        raise OutOfRangeError(f"rank {rank} is outside [0, {limit})")


def check_bits(rank: int, bits) -> int:
    if bits is not None and rank.bit_length() > bits:
        raise OutOfRangeError(f"rank {rank} does not fit in {bits} bits")
    return rank
