"""Compare operations module - diff, relationship inference and metrics."""

from codedelta.compare.models import (
    AnalysisDepth,
    ChangeAnalysis,
    ChangeKind,
    ChangeRecord,
    ComparisonResult,
    Metrics,
    RelationshipKind,
    RelationshipRecord,
    Significance,
)
from codedelta.compare.ops import CompareOps

__all__ = [
    "CompareOps",
    "AnalysisDepth",
    "ChangeAnalysis",
    "ChangeKind",
    "ChangeRecord",
    "ComparisonResult",
    "Metrics",
    "RelationshipKind",
    "RelationshipRecord",
    "Significance",
]
