"""Lexical significance of a changed line.

A priority cascade over plain substring checks on the trimmed line; the
first matching tier wins, so a line with both ``function`` and ``const`` is
high.
"""

from __future__ import annotations

from codedelta.compare.models import Significance

STRUCTURAL_KEYWORDS: tuple[str, ...] = (
    "export",
    "import",
    "class",
    "function",
    "interface",
    "type",
)
STATEMENT_KEYWORDS: tuple[str, ...] = ("const", "let", "var", "return", "throw")
COMMENT_MARKERS: tuple[str, ...] = ("//", "/*")


def classify(line: str) -> Significance:
    trimmed = line.strip()

    if any(keyword in trimmed for keyword in STRUCTURAL_KEYWORDS):
        return Significance.HIGH

    if any(keyword in trimmed for keyword in STATEMENT_KEYWORDS):
        return Significance.MEDIUM

    if not trimmed or trimmed.startswith(COMMENT_MARKERS):
        return Significance.LOW

    return Significance.MEDIUM
