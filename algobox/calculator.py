"""A small interactive two-number calculator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO


def add(a: float, b: float) -> float:
    """Return ``a + b``."""
    return a + b


def difference(a: float, b: float) -> float:
    """Return the absolute difference of ``a`` and ``b``."""
    return a - b if a > b else b - a


def subtract(a: float, b: float) -> float:
    """Return ``a - b``."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Return ``a * b``."""
    return a * b


@dataclass(frozen=True)
class DivisionResult:
    """The outcome of dividing ``numerator`` by ``denominator``."""

    numerator: float
    denominator: float
    value: float

    @property
    def fractional(self) -> bool:
        """True when the result is shown as a fraction as well as a decimal."""
        return self.numerator != 0 and self.numerator < self.denominator

    def __str__(self) -> str:
        if self.numerator == 0:
            return "Result is 0"
        if self.fractional:
            return (
                f"Fractional Result is: {self.numerator:.0f}/{self.denominator:.0f}\n"
                f"Decimal Result is : {self.value:.2f}"
            )
        return f"The result is : {self.value:.2f}"


def divide(a: float, b: float) -> DivisionResult:
    """Divide ``a`` by ``b``; raises ZeroDivisionError when ``b`` is zero."""
    if b == 0:
        raise ZeroDivisionError("Can't Divide by zero.")
    return DivisionResult(numerator=a, denominator=b, value=a / b)


_MENU = (
    "\nSelect the operation:\n"
    "1. Addition\n"
    "2. Difference\n"
    "3. Subtract\n"
    "4. Multiply\n"
    "5. Divide\n"
    "6. Change Inputs\n"
    "7. Exit\n"
    "Enter your choice : "
)

_OPERATIONS = {
    1: ("addition", add),
    2: ("difference", difference),
    3: ("subtraction", subtract),
    4: ("multiplication", multiply),
}


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(prompt: str, tokens: Iterator[str], out: TextIO) -> str | None:
    out.write(prompt)
    out.flush()
    return next(tokens, None)


def _run(stream: TextIO, out: TextIO) -> int:
    tokens = _tokens(stream)
    while True:
        first = _ask("\nEnter the first number : ", tokens, out)
        if first is None:
            return 0
        second = _ask("\nEnter the second number : ", tokens, out)
        if second is None:
            return 0
        try:
            a, b = float(first), float(second)
        except ValueError:
            print("\nInvalid number", file=sys.stderr)
            return 1
        while True:
            choice_text = _ask(_MENU, tokens, out)
            if choice_text is None:
                return 0
            try:
                choice = int(choice_text)
            except ValueError:
                choice = 0
            if choice in _OPERATIONS:
                name, operation = _OPERATIONS[choice]
                out.write(f"\nThe result of {name} is : {operation(a, b):.2f}")
            elif choice == 5:
                try:
                    out.write(f"\n{divide(a, b)}")
                except ZeroDivisionError as error:
                    out.write(str(error))
            elif choice == 6:
                break
            elif choice == 7:
                out.write("\n")
                return 0
            else:
                out.write("\nWrong Choice! try Again\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="algobox-calc", description="Interactive two-number calculator."
    )
    parser.parse_args(argv)
    return _run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())