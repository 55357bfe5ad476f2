"""Binary-search and sliding-window problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence

_MAX_DISTANCE = 2**31 - 1


def can_place_cows(positions: Sequence[int], cows: int, distance: int) -> bool:
    """Tell whether ``cows`` stalls can be chosen at least ``distance`` apart.

    ``positions`` must be sorted in ascending order. The first cow always
    goes into the first stall; the answer is true only once a further cow
    has been placed and the count reaches ``cows``.
    """
    placed = 1
    last = positions[0] if positions else 0
    for position in positions[1:]:
        if position - last >= distance:
            placed += 1
            last = position
            if placed == cows:
                return True
    return False


def aggressive_cows(positions: Sequence[int], cows: int) -> int:
    """Return the largest minimum distance at which ``cows`` cows fit.

    Raises ValueError when no distance allows the cows to be placed.
    """
    stalls = sorted(positions)
    low, high = 0, _MAX_DISTANCE
    best: int | None = None
    while low <= high:
        mid = (low + high) // 2
        if can_place_cows(stalls, cows, mid):
            best = mid if best is None else max(best, mid)
            low = mid + 1
        else:
            high = mid - 1
    if best is None:
        raise ValueError(f"cannot place {cows} cows in {len(stalls)} stalls")
    return best


def total_fruit(fruits: Sequence[Hashable]) -> int:
    """Return the longest run of ``fruits`` that holds at most two kinds."""
    counts: Counter[Hashable] = Counter()
    best = 0
    left = 0
    for right, fruit in enumerate(fruits):
        counts[fruit] += 1
        while len(counts) > 2:
            dropped = fruits[left]
            counts[dropped] -= 1
            if not counts[dropped]:
                del counts[dropped]
            left += 1
        best = max(best, right - left + 1)
    return best