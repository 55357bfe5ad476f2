"""Dynamic-programming problems: 0/1 knapsack and longest common subsequence."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def _check_items(prices: Sequence[int], weights: Sequence[int], capacity: int) -> None:
    if len(prices) != len(weights):
        raise ValueError("prices and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def knapsack(prices: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Return the best total price of items fitting in ``capacity`` (memoised)."""
    _check_items(prices, weights, capacity)
    prices = tuple(prices)
    weights = tuple(weights)

    @lru_cache(maxsize=None)
    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        skip = best(count - 1, room)
        weight = weights[count - 1]
        if weight <= room:
            return max(skip, prices[count - 1] + best(count - 1, room - weight))
        return skip

    return best(len(prices), capacity)


def knapsack_table(
    prices: Sequence[int], weights: Sequence[int], capacity: int
) -> list[list[int]]:
    """Return the bottom-up knapsack table.

    Row ``n`` column ``c`` holds the best price using the first ``n`` items
    within capacity ``c``; the answer is the last cell.
    """
    _check_items(prices, weights, capacity)
    table = [[0] * (capacity + 1)]
    for price, weight in zip(prices, weights):
        previous = table[-1]
        row = [0] * (capacity + 1)
        for room in range(1, capacity + 1):
            row[room] = previous[room]
            if weight <= room:
                row[room] = max(row[room], price + previous[room - weight])
        table.append(row)
    return table


def lcs_length(first: Sequence, second: Sequence) -> int:
    """Return the length of the longest common subsequence (memoised)."""

    @lru_cache(maxsize=None)
    def solve(i: int, j: int) -> int:
        if i == len(first) or j == len(second):
            return 0
        if first[i] == second[j]:
            return 1 + solve(i + 1, j + 1)
        return max(solve(i + 1, j), solve(i, j + 1))

    return solve(0, 0)


def lcs_length_table(first: Sequence, second: Sequence) -> int:
    """Return the length of the longest common subsequence, built bottom-up."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]