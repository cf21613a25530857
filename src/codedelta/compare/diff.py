"""Line diff between a baseline and a local text.

Myers' O(ND) shortest-edit-script algorithm over physical lines, after
trimming the common prefix and suffix. Lines keep their terminators, so the
blocks reconstruct both inputs byte for byte:

- unchanged + removed blocks, in order, give the baseline
- unchanged + added blocks, in order, give the local text
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from codedelta.compare.models import ChangeKind, ChangeRecord
from codedelta.compare.significance import classify


class DiffTag(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


@dataclass(frozen=True, slots=True)
class DiffBlock:
    """A run of consecutive lines sharing one tag."""

    tag: DiffTag
    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return "".join(self.lines)


_PHYSICAL_LINE = re.compile(r"[^\n]*\n|[^\n]+")

_KIND_FOR_TAG = {
    DiffTag.ADDED: ChangeKind.ADDED,
    DiffTag.REMOVED: ChangeKind.REMOVED,
}


def split_lines(text: str) -> list[str]:
    r"""Split into physical lines, keeping line terminators.

    Only ``\n`` ends a line (``\r\n`` included), matching the line scans
    used for identifiers and control flow. Form feeds and other Unicode line
    boundaries stay inside their line.
    """
    return _PHYSICAL_LINE.findall(text)


def diff_lines(baseline: str, local: str) -> list[DiffBlock]:
    """Diff two texts line by line.

    Within a change hunk, removals are reported before additions, and
    adjacent lines with the same tag are merged into one block.
    """
    a = split_lines(baseline)
    b = split_lines(local)

    prefix = 0
    limit = min(len(a), len(b))
    while prefix < limit and a[prefix] == b[prefix]:
        prefix += 1

    suffix = 0
    while (
        suffix < limit - prefix
        and a[len(a) - 1 - suffix] == b[len(b) - 1 - suffix]
    ):
        suffix += 1

    middle = _edit_script(a[prefix : len(a) - suffix], b[prefix : len(b) - suffix])

    ops: list[tuple[DiffTag, str]] = [(DiffTag.UNCHANGED, line) for line in a[:prefix]]
    ops.extend(middle)
    ops.extend((DiffTag.UNCHANGED, line) for line in a[len(a) - suffix :])
    return _group(ops)


def _edit_script(a: Sequence[str], b: Sequence[str]) -> list[tuple[DiffTag, str]]:
    """Shortest edit script turning ``a`` into ``b``."""
    n, m = len(a), len(b)
    if n == 0:
        return [(DiffTag.ADDED, line) for line in b]
    if m == 0:
        return [(DiffTag.REMOVED, line) for line in a]

    # v[k] is the furthest x reached on diagonal k = x - y.
    # trace[d] is v as it stood before round d.
    v: dict[int, int] = {1: 0}
    trace: list[dict[int, int]] = []
    for d in range(n + m + 1):
        trace.append(dict(v))
        done = False
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[k - 1] < v[k + 1]):
                x = v[k + 1]
            else:
                x = v[k - 1] + 1
            y = x - k
            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1
            v[k] = x
            if x >= n and y >= m:
                done = True
                break
        if done:
            break

    return _backtrack(a, b, trace)


def _backtrack(
    a: Sequence[str], b: Sequence[str], trace: list[dict[int, int]]
) -> list[tuple[DiffTag, str]]:
    ops: list[tuple[DiffTag, str]] = []
    x, y = len(a), len(b)
    for d in range(len(trace) - 1, -1, -1):
        v = trace[d]
        k = x - y
        if k == -d or (k != d and v[k - 1] < v[k + 1]):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = v[prev_k]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            ops.append((DiffTag.UNCHANGED, a[x - 1]))
            x -= 1
            y -= 1

        if d > 0:
            if x == prev_x:
                ops.append((DiffTag.ADDED, b[prev_y]))
            else:
                ops.append((DiffTag.REMOVED, a[prev_x]))
        x, y = prev_x, prev_y

    ops.reverse()
    return ops


def _group(ops: Iterable[tuple[DiffTag, str]]) -> list[DiffBlock]:
    blocks: list[DiffBlock] = []
    unchanged: list[str] = []
    removed: list[str] = []
    added: list[str] = []

    def flush_hunk() -> None:
        if removed:
            blocks.append(DiffBlock(DiffTag.REMOVED, tuple(removed)))
            removed.clear()
        if added:
            blocks.append(DiffBlock(DiffTag.ADDED, tuple(added)))
            added.clear()

    for tag, line in ops:
        if tag is DiffTag.UNCHANGED:
            flush_hunk()
            unchanged.append(line)
            continue
        if unchanged:
            blocks.append(DiffBlock(DiffTag.UNCHANGED, tuple(unchanged)))
            unchanged.clear()
        (removed if tag is DiffTag.REMOVED else added).append(line)

    flush_hunk()
    if unchanged:
        blocks.append(DiffBlock(DiffTag.UNCHANGED, tuple(unchanged)))
    return blocks


def collect_changes(blocks: Iterable[DiffBlock]) -> list[ChangeRecord]:
    """Turn diff blocks into classified change records.

    Every physical line advances the running counter, whichever block it
    comes from. Blank lines in added/removed blocks advance it too but do not
    produce a record.
    """
    records: list[ChangeRecord] = []
    counter = 0
    for block in blocks:
        kind = _KIND_FOR_TAG.get(block.tag)
        for line in block.lines:
            if kind is not None:
                content = line.rstrip("\r\n")
                if content.strip():
                    records.append(
                        ChangeRecord(
                            kind=kind,
                            line_number=counter,
                            content=content,
                            significance=classify(content),
                        )
                    )
            counter += 1
    return records
