"""Change metrics and advisory recommendations."""

from __future__ import annotations

from collections.abc import Sequence

from codedelta.compare.models import (
    ChangeKind,
    ChangeRecord,
    Metrics,
    RelationshipKind,
    RelationshipRecord,
    Significance,
)
from codedelta.config.constants import COMPLEXITY_SCORE_MAX

CHANGE_WEIGHT = 0.1
SIGNIFICANT_CHANGE_WEIGHT = 0.5
RELATIONSHIP_WEIGHT = 0.3

RECOMMEND_SPLIT = "Consider breaking this change into smaller, more focused commits"
RECOMMEND_DOCS = "Update documentation and comments to reflect method renames"
RECOMMEND_VERIFY_REMOVAL = "Verify that removed functionality is intentional and properly handled"
RECOMMEND_TESTS = "Consider adding unit tests to cover the complex changes"


def complexity_score(total: int, significant: int, relationships: int) -> float:
    score = (
        total * CHANGE_WEIGHT
        + significant * SIGNIFICANT_CHANGE_WEIGHT
        + relationships * RELATIONSHIP_WEIGHT
    )
    return min(score, COMPLEXITY_SCORE_MAX)


def maintainability_impact(score: float, significant: int) -> Significance:
    """Monotone step function of the score and the high-significance count."""
    if score < 3 and significant < 5:
        return Significance.LOW
    if score < 7 and significant < 15:
        return Significance.MEDIUM
    return Significance.HIGH


def calculate_metrics(
    changes: Sequence[ChangeRecord],
    relationships: Sequence[RelationshipRecord],
) -> Metrics:
    significant = sum(1 for c in changes if c.significance is Significance.HIGH)
    score = complexity_score(len(changes), significant, len(relationships))
    return Metrics(
        total_changes=len(changes),
        significant_changes=significant,
        complexity_score=score,
        maintainability_impact=maintainability_impact(score, significant),
    )


def generate_recommendations(
    changes: Sequence[ChangeRecord],
    relationships: Sequence[RelationshipRecord],
    metrics: Metrics,
) -> list[str]:
    """Every applicable trigger fires, in a fixed order."""
    recommendations: list[str] = []

    if metrics.maintainability_impact is Significance.HIGH:
        recommendations.append(RECOMMEND_SPLIT)

    if any(r.kind is RelationshipKind.METHOD_RENAME for r in relationships):
        recommendations.append(RECOMMEND_DOCS)

    removed = sum(1 for c in changes if c.kind is ChangeKind.REMOVED)
    added = sum(1 for c in changes if c.kind is ChangeKind.ADDED)
    if removed > added:
        recommendations.append(RECOMMEND_VERIFY_REMOVAL)

    if metrics.complexity_score > 7:
        recommendations.append(RECOMMEND_TESTS)

    return recommendations
