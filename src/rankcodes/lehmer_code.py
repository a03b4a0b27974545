from math import factorial
from typing import Any, Callable, List, Optional, Sequence

from .counting import check_bits, check_rank
from .errors import InvalidInputError


class Fenwick:
    def __init__(self, n):
        self.n = n
        self.bit = [0] * (n + 1)

    @classmethod
    def full(cls, n):
        """A tree over n slots that are all marked as unused."""
        fw = cls(n)
        for i in range(1, n + 1):
            fw.bit[i] += 1
            j = i + (i & -i)
            if j <= n:
                fw.bit[j] += fw.bit[i]
        return fw

    def add(self, i, delta):
        while i <= self.n:
            self.bit[i] += delta
            i += i & -i

    def sum(self, i):
        s = 0
        while i > 0:
            s += self.bit[i]
            i -= i & -i
        return s

    def find(self, digit):
        """Smallest slot i with sum(i) > digit, i.e. the (digit+1)-th unused slot."""
        left, right = 1, self.n
        while left < right:
            mid = (left + right) // 2
            if self.sum(mid) > digit:
                right = mid
            else:
                left = mid + 1
        return left


def _sorted_order(values: Sequence, key: Optional[Callable[[Any], Any]]) -> List[int]:
    # Indices of `values` in ascending order. Elements only need to be
    # comparable, not hashable.
    keys = list(values) if key is None else [key(v) for v in values]
    order = sorted(range(len(keys)), key=keys.__getitem__)
    for a, b in zip(order, order[1:]):
        if keys[a] == keys[b]:
            raise InvalidInputError(
                f"Duplicate value at positions {min(a, b)} and {max(a, b)}: {values[a]!r}"
            )
    return order


def rank_permutation(
    perm: Sequence,
    key: Optional[Callable[[Any], Any]] = None,
    bits: Optional[int] = None,
) -> int:
    """
    Returns the Lehmer rank of `perm` among permutations
    of its values. Rank ∈ [0, n! - 1].

    The sorted sequence ranks 0, the reversed one n! - 1, and
    lexicographic order of sequences is preserved. Elements are
    compared through `key` when it is given.
    Time: O(n log n)
    """
    n = len(perm)
    p = [0] * n
    for slot, i in enumerate(_sorted_order(perm, key)):
        p[i] = slot

    fw = Fenwick.full(n)

    rank = 0
    for i in range(n):
        x = p[i] + 1
        smaller_unused = fw.sum(x - 1)
        rank += smaller_unused * factorial(n - 1 - i)
        fw.add(x, -1)

    return check_bits(rank, bits)


def unrank_permutation(
    rank: int,
    values: Sequence,
    key: Optional[Callable[[Any], Any]] = None,
) -> list:
    """
    Given a rank and the set `values` (in any order),
    reconstructs the corresponding permutation.
    Time: O(n log n)
    """
    n = len(values)
    values = [values[i] for i in _sorted_order(values, key)]
    check_rank(rank, factorial(n))

    fw = Fenwick.full(n)

    result = []
    r = rank

    for i in range(n):
        f = factorial(n - 1 - i)
        digit = r // f
        r %= f

        slot = fw.find(digit)
        fw.add(slot, -1)
        result.append(values[slot - 1])

    return result
