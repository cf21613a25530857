"""Logic-preservation guard.

A best-effort shape check on a rewrite, not a semantic one. Two checks, both
must pass:

1. The non-blank line count may drift by at most ``max_ratio`` of the
   original's non-blank line count.
2. Brace-delimited languages must have as many ``{`` as ``}`` afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from codedelta.config.constants import GUARD_MAX_LINE_DELTA_RATIO
from codedelta.core.languages import is_brace_delimited


@dataclass(frozen=True, slots=True)
class GuardVerdict:
    ok: bool
    reason: str | None = None


def count_nonblank_lines(content: str) -> int:
    return sum(1 for line in content.split("\n") if line.strip())


def check_logic_preserved(
    original: str,
    rewritten: str,
    path: str | Path,
    *,
    max_ratio: float = GUARD_MAX_LINE_DELTA_RATIO,
) -> GuardVerdict:
    before = count_nonblank_lines(original)
    after = count_nonblank_lines(rewritten)
    if abs(before - after) > before * max_ratio:
        return GuardVerdict(
            ok=False,
            reason=f"non-blank line count changed from {before} to {after}",
        )

    if is_brace_delimited(path):
        opening = rewritten.count("{")
        closing = rewritten.count("}")
        if opening != closing:
            return GuardVerdict(
                ok=False,
                reason=f"unbalanced braces ({opening} '{{' vs {closing} '}}')",
            )

    return GuardVerdict(ok=True)
