"""Relationship inference between a baseline and a local text.

Two independent detectors:

- Renames: every local identifier missing from the baseline is matched to
  its most similar baseline identifier (normalized Levenshtein). Matches
  strictly above the threshold become ``method_rename`` records.
- Logic changes: lines mentioning a control-flow keyword are collected per
  text and compared index by index. There is no alignment, so reordering
  control-flow lines reports a change at every shifted index.
"""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein

from codedelta.compare.identifiers import extract_identifiers
from codedelta.compare.models import RelationshipKind, RelationshipRecord
from codedelta.config.constants import LOGIC_CHANGE_CONFIDENCE, RENAME_CONFIDENCE_THRESHOLD

CONTROL_FLOW_KEYWORDS: tuple[str, ...] = (
    "if",
    "else",
    "for",
    "while",
    "switch",
    "case",
    "try",
    "catch",
)

NO_REFERENCE = "none"


def levenshtein(a: str, b: str) -> int:
    """Edit distance with unit-cost insert, delete and substitute."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """``1 - distance / longer length``; 1.0 for equal strings (including two empty ones)."""
    if a == b:
        return 1.0
    longest = max(len(a), len(b))
    return 1.0 - levenshtein(a, b) / longest


def detect_renames(
    local: str,
    baseline: str,
    *,
    threshold: float = RENAME_CONFIDENCE_THRESHOLD,
) -> list[RelationshipRecord]:
    # Callers may only raise the bar
    threshold = max(threshold, RENAME_CONFIDENCE_THRESHOLD)
    local_ids = extract_identifiers(local)
    baseline_ids = extract_identifiers(baseline)
    baseline_set = set(baseline_ids)

    records: list[RelationshipRecord] = []
    seen: set[str] = set()
    for name in local_ids:
        if name in seen or name in baseline_set:
            continue
        seen.add(name)

        best_match: str | None = None
        best_score = 0.0
        for candidate in baseline_ids:
            score = similarity(name, candidate)
            if score > best_score:
                best_match, best_score = candidate, score

        if best_match is not None and best_score > threshold:
            records.append(
                RelationshipRecord(
                    kind=RelationshipKind.METHOD_RENAME,
                    old_reference=best_match,
                    new_reference=name,
                    confidence=best_score,
                    description=f"Method '{best_match}' appears to be renamed to '{name}'",
                )
            )
    return records


def extract_control_flow(text: str) -> list[str]:
    """Trimmed lines containing any control-flow keyword as a substring."""
    flow: list[str] = []
    for line in text.split("\n"):
        trimmed = line.strip()
        if any(keyword in trimmed for keyword in CONTROL_FLOW_KEYWORDS):
            flow.append(trimmed)
    return flow


def detect_logic_changes(
    local: str,
    baseline: str,
    *,
    confidence: float = LOGIC_CHANGE_CONFIDENCE,
) -> list[RelationshipRecord]:
    old_flow = extract_control_flow(baseline)
    new_flow = extract_control_flow(local)

    records: list[RelationshipRecord] = []
    for i in range(max(len(old_flow), len(new_flow))):
        old = old_flow[i] if i < len(old_flow) else None
        new = new_flow[i] if i < len(new_flow) else None

        if old is None:
            detail = f"Added control flow: {new}"
        elif new is None:
            detail = f"Removed control flow: {old}"
        elif old != new:
            detail = f"Modified control flow: {old} -> {new}"
        else:
            continue

        records.append(
            RelationshipRecord(
                kind=RelationshipKind.LOGIC_CHANGE,
                old_reference=old or NO_REFERENCE,
                new_reference=new or NO_REFERENCE,
                confidence=confidence,
                description=f"Control flow change: {detail}",
            )
        )
    return records
