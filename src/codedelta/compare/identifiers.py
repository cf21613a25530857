"""Shallow identifier extraction.

No tokenizer: each physical line yields at most one candidate, either the
name after a declaration keyword or the name in front of the first call
parenthesis. False positives are expected; the rename detector filters them
through its similarity threshold.
"""

from __future__ import annotations

import re

_DECLARATION = re.compile(r"(?:function\s+|const\s+|let\s+|var\s+)(\w+)")
_CALL = re.compile(r"(\w+)\s*\(")

# Substring checks, so "notify(" is skipped too.
CALL_EXCLUDING_KEYWORDS: tuple[str, ...] = ("if", "for", "while")


def extract_identifiers(text: str) -> list[str]:
    identifiers: list[str] = []
    for line in text.split("\n"):
        declaration = _DECLARATION.search(line)
        if declaration:
            identifiers.append(declaration.group(1))
            continue

        call = _CALL.search(line)
        if call and not any(keyword in line for keyword in CALL_EXCLUDING_KEYWORDS):
            identifiers.append(call.group(1))
    return identifiers
