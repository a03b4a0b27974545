"""
Ranking of the positions occupied by k marked elements among n.

Only which slots are marked matters, not the order of the marked elements
among themselves. Ranks follow the combinatorial number system in
colexicographic order: with marked positions p_1 < p_2 < ... < p_k the rank
is C(p_1, 1) + C(p_2, 2) + ... + C(p_k, k). Marks packed at the start rank
0, marks packed at the end rank C(n, k) - 1.

For the UD-slice edges of a cube (n=12, k=4) this gives 495 ranks.
"""
from math import comb
from typing import Any, Callable, List, Optional, Sequence

from .counting import check_bits, check_rank, position_count
from .errors import InvalidInputError


def rank_position(
    data: Sequence,
    k: Optional[int] = None,
    is_marked: Optional[Callable[[Any], bool]] = None,
    bits: Optional[int] = None,
) -> int:
    """
    Rank the marked positions of `data`.

    An element is marked when it is truthy, or when `is_marked` returns
    True for it. If `k` is given it must equal the number of marks.
    """
    flags = [bool(x) for x in data] if is_marked is None else [bool(is_marked(x)) for x in data]

    marked = sum(flags)
    if k is not None and k != marked:
        raise InvalidInputError(f"Expected {k} marked elements, found {marked}")

    rank = 0
    seen = 0
    for pos, flag in enumerate(flags):
        if flag:
            seen += 1
            rank += comb(pos, seen)

    return check_bits(rank, bits)


def unrank_position(rank: int, n: int, k: int) -> List[bool]:
    """
    Rebuild the marked flags for n positions from a rank.

    Greedy descent: the highest mark sits at the largest p with
    C(p, k) <= rank, the next one below it with k - 1, and so on.
    """
    check_rank(rank, position_count(n, k))

    flags = [False] * n
    remaining = k
    for pos in range(n - 1, -1, -1):
        if remaining == 0:
            break
        cutoff = comb(pos, remaining)
        if cutoff <= rank:
            flags[pos] = True
            rank -= cutoff
            remaining -= 1

    return flags
