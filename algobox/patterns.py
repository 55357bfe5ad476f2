"""Text patterns drawn with digits and stars."""

from __future__ import annotations


def _require_positive(n: int) -> None:
    if n < 1:
        raise ValueError("pattern size must be at least 1")


def _descending(k: int) -> str:
    return "".join(f"{d} " for d in range(k, 0, -1))


def _ascending(k: int) -> str:
    return "".join(f"{d} " for d in range(1, k + 1))


def _arrow_row(n: int, k: int) -> str:
    return (
        " " * (2 * n - (4 * k - 2))
        + _descending(k)
        + " " * (4 * k - 6)
        + _ascending(k)
    )


def double_sided_arrow(n: int) -> str:
    """Return a double-sided number arrow of ``n`` rows."""
    _require_positive(n)
    if n == 1:
        return "1"
    tip = " " * (2 * n - 2) + "1"
    rows = [tip]
    rows.extend(_arrow_row(n, k) for k in range(2, (n + 1) // 2 + 1))
    rows.extend(_arrow_row(n, k) for k in range(n // 2, 1, -1))
    rows.append(tip)
    return "\n".join(rows) + "\n"


def ganesha(n: int) -> str:
    """Return the swastika-like star figure of size ``n``."""
    _require_positive(n)
    half = n // 2
    rows = ["*" + " " * (half - 1) + "*" * (half + 1)]
    rows.extend("*" + " " * (half - 1) + "*" for _ in range(2, half + 1))
    rows.append("*" * n)
    rows.extend(" " * half + "*" + " " * (half - 1) + "*" for _ in range(2, half + 1))
    rows.append("*" * (half + 1) + " " * (half - 1) + "*")
    return "\n".join(rows) + "\n"


def _hourglass_row(n: int, i: int) -> str:
    return "  " * (n - i) + _descending(i) + "0 " + _ascending(i)


def hourglass(n: int) -> str:
    """Return a number hourglass narrowing to 0 in the middle."""
    _require_positive(n)
    rows = [_hourglass_row(n, i) for i in range(n, 0, -1)]
    rows.append("  " * n + "0")
    rows.extend(_hourglass_row(n, i) for i in range(1, n + 1))
    return "\n".join(rows) + "\n"


def _diamond_row(n: int, i: int) -> str:
    width = 2 * i - 1
    cells = "".join("* " if j in (1, width) else "  " for j in range(1, width + 1))
    return "  " * (n - i) + cells


def hollow_diamond(n: int) -> str:
    """Return a hollow star diamond; the widest row appears twice."""
    _require_positive(n)
    rows = [_diamond_row(n, i) for i in range(1, n + 1)]
    rows.extend(_diamond_row(n, i) for i in range(n, 0, -1))
    return "\n".join(rows) + "\n"