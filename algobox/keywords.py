"""Writing the C keyword list to a file and counting its lines."""

from __future__ import annotations

import os
from pathlib import Path

KEYWORDS = (
    "extern", "return", "union", "const", "float", "short",
    "auto", "double", "int", "struct", "break", "else", "long",
    "goto", "sizeof", "volatile", "do", "if", "static", "while",
    "unsigned", "continue", "for", "signed", "void", "default",
    "switch", "case", "enum", "register", "typedef", "char",
)


def write_keywords(path: str | os.PathLike[str]) -> int:
    """Write one keyword per line to ``path`` and return how many were written."""
    with Path(path).open("w", encoding="ascii", newline="\n") as handle:
        for keyword in KEYWORDS:
            handle.write(keyword + "\n")
    return len(KEYWORDS)


def count_lines(path: str | os.PathLike[str]) -> int:
    """Return the number of newline characters in the file at ``path``."""
    with Path(path).open("rb") as handle:
        return sum(chunk.count(b"\n") for chunk in iter(lambda: handle.read(65536), b""))