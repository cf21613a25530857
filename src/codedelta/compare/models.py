"""Value objects produced by a comparison.

All records are created fresh per call and owned by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ChangeKind(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


class Significance(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RelationshipKind(str, Enum):
    METHOD_RENAME = "method_rename"
    METHOD_MOVE = "method_move"
    LOGIC_CHANGE = "logic_change"
    DEPENDENCY_CHANGE = "dependency_change"


class AnalysisDepth(str, Enum):
    """How far a comparison goes beyond the raw line diff."""

    BASIC = "basic"
    DETAILED = "detailed"
    COMPREHENSIVE = "comprehensive"

    @property
    def infers_relationships(self) -> bool:
        return self is not AnalysisDepth.BASIC


@dataclass(frozen=True, slots=True)
class ChangeRecord:
    """A single changed, non-blank line.

    ``line_number`` is the 0-based running counter across the whole diff,
    not the line's position in either file.
    """

    kind: ChangeKind
    line_number: int
    content: str
    significance: Significance

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "line_number": self.line_number,
            "content": self.content,
            "significance": self.significance.value,
        }


@dataclass(frozen=True, slots=True)
class RelationshipRecord:
    """An inferred correspondence between the baseline and local versions."""

    kind: RelationshipKind
    old_reference: str
    new_reference: str
    confidence: float
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "old_reference": self.old_reference,
            "new_reference": self.new_reference,
            "confidence": self.confidence,
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class Metrics:
    total_changes: int
    significant_changes: int
    complexity_score: float
    maintainability_impact: Significance

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_changes": self.total_changes,
            "significant_changes": self.significant_changes,
            "complexity_score": self.complexity_score,
            "maintainability_impact": self.maintainability_impact.value,
        }


@dataclass
class ComparisonResult:
    """Result of a compare call. Fully determined by its inputs and depth."""

    metrics: Metrics
    changes: list[ChangeRecord] = field(default_factory=list)
    relationships: list[RelationshipRecord] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "changes": [c.to_dict() for c in self.changes],
            "relationships": [r.to_dict() for r in self.relationships],
            "recommendations": list(self.recommendations),
            "metrics": self.metrics.to_dict(),
        }


@dataclass
class ChangeAnalysis:
    """Result of analyze_changes: method and logic relationships plus a summary."""

    summary: str
    method_changes: list[RelationshipRecord] = field(default_factory=list)
    logic_changes: list[RelationshipRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "method_changes": [r.to_dict() for r in self.method_changes],
            "logic_changes": [r.to_dict() for r in self.logic_changes],
            "summary": self.summary,
        }
