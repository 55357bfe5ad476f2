"""Classifying the triangle formed by three points."""

from __future__ import annotations

import math
from dataclasses import dataclass

Point = tuple[float, float]


def _same(x: float, y: float) -> bool:
    return math.isclose(x, y, rel_tol=1e-9, abs_tol=1e-12)


@dataclass(frozen=True)
class TriangleReport:
    """Side lengths of three points and what kind of triangle they form."""

    sides: tuple[float, float, float]
    is_triangle: bool
    right_angled: bool
    equilateral: bool
    isosceles: bool

    @property
    def scalene(self) -> bool:
        return self.is_triangle and not self.isosceles

    def messages(self) -> list[str]:
        """Return the report as human-readable lines."""
        if not self.is_triangle:
            return ["The given sides donot form a triangle"]
        lines = ["The given sides form a triangle"]
        if self.right_angled:
            lines.append("The given Triangle is Right Angled Triangle")
        if self.equilateral:
            lines.append("The given Triangle is Equilateral")
        if self.isosceles:
            lines.append("The given Triangle is Isosceles")
        else:
            lines.append("The given Triangle is Scalene")
        return lines


def classify_triangle(first: Point, second: Point, third: Point) -> TriangleReport:
    """Classify the triangle with corners ``first``, ``second`` and ``third``."""
    side1 = math.dist(first, second)
    side2 = math.dist(second, third)
    side3 = math.dist(third, first)
    sides = (side1, side2, side3)
    valid = side1 + side2 > side3 and side1 + side3 > side2 and side3 + side2 > side1
    if not valid:
        return TriangleReport(sides, False, False, False, False)
    right = (
        _same(side2, math.hypot(side1, side3))
        or _same(side3, math.hypot(side1, side2))
        or _same(side1, math.hypot(side2, side3))
    )
    equilateral = _same(side1, side2) and _same(side2, side3)
    isosceles = _same(side1, side2) or _same(side2, side3) or _same(side3, side1)
    return TriangleReport(sides, True, right, equilateral, isosceles)