"""
Ranking of per-element property digits under a conservation law.

Every element carries a digit in [0, base), e.g. the twist of a cube corner
(base 3) or the flip of an edge (base 2). The digits of a reachable state
always sum to a multiple of the base, so the last digit is implied by the
others and is not stored: n digits rank into [0, base^(n-1)).
"""
import os
from typing import Any, Callable, List, Optional, Sequence

from .counting import check_bits, check_rank, property_count
from .errors import InvalidInputError

# Whether rank_property validates the conservation law unless told otherwise
CHECK_CONSERVATION: bool = os.environ.get(
    "RANKCODES_CHECK_CONSERVATION", "1"
).strip().lower() not in ("0", "false", "no", "off")


def rank_property(
    data: Sequence,
    base: int,
    mapping: Optional[Callable[[Any], int]] = None,
    check: Optional[bool] = None,
    bits: Optional[int] = None,
) -> int:
    """
    Rank the property digits of `data` in the given base.

    `data` holds the digits themselves, or arbitrary elements when
    `mapping` extracts the digit of each one. The first n - 1 digits are
    read as a base-`base` number, most significant first.

    Raises InvalidInputError for a base below 1, for a digit outside
    [0, base) and, when checking is enabled, for digits whose sum is not
    a multiple of the base.
    """
    digits = list(data) if mapping is None else [mapping(x) for x in data]
    property_count(len(digits), base)  # validates base

    for i, digit in enumerate(digits):
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit < base:
            raise InvalidInputError(
                f"Digit {digit!r} at position {i} is not in [0, {base})"
            )

    if CHECK_CONSERVATION if check is None else check:
        if sum(digits) % base:
            raise InvalidInputError(
                f"Digits {digits} sum to {sum(digits)}, not a multiple of {base}"
            )

    rank = 0
    for digit in digits[:-1]:
        rank = rank * base + digit

    return check_bits(rank, bits)


def unrank_property(rank: int, n: int, base: int) -> List[int]:
    """Rebuild all n digits, deriving the last one from the conservation law."""
    check_rank(rank, property_count(n, base))
    if n == 0:
        return []

    digits = []
    for _ in range(n - 1):
        rank, digit = divmod(rank, base)
        digits.append(digit)
    digits.reverse()

    digits.append(-sum(digits) % base)
    return digits
