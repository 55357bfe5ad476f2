"""Small counting and arithmetic helpers."""

from __future__ import annotations

from collections.abc import Iterable

GREETING = "Hello World! "
MAX_AVERAGE_COUNT = 100


def greetings(times: int = 5) -> list[str]:
    """Return the greeting line repeated ``times`` times."""
    if times < 0:
        raise ValueError("times must not be negative")
    return [GREETING] * times


def count_to(limit: int = 5) -> list[int]:
    """Return the integers from 1 up to ``limit`` inclusive."""
    return list(range(1, limit + 1))


def sum_of_naturals(n: int) -> int:
    """Return 1 + 2 + ... + n; zero when ``n`` is below 1."""
    return sum(range(1, n + 1))


def factorial(n: int) -> int:
    """Return ``n!``; raises ValueError for negative ``n``."""
    if n < 0:
        raise ValueError("factorial of a negative number doesn't exist")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def average(values: Iterable[float]) -> float:
    """Return the mean of between 1 and 100 numbers."""
    numbers = [float(v) for v in values]
    if not 1 <= len(numbers) <= MAX_AVERAGE_COUNT:
        raise ValueError(
            f"number of values should be in range of (1 to {MAX_AVERAGE_COUNT})"
        )
    return sum(numbers) / len(numbers)