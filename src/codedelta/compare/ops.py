"""Compare operations - compare and analyze_changes implementation.

Diff -> significance -> (optional) relationships -> metrics ->
recommendations. Pure over its text inputs; the *_file variants only add a
read of the local file.
"""

from __future__ import annotations

from pathlib import Path

from codedelta.compare.diff import collect_changes, diff_lines
from codedelta.compare.metrics import calculate_metrics, generate_recommendations
from codedelta.compare.models import (
    AnalysisDepth,
    ChangeAnalysis,
    ComparisonResult,
    RelationshipRecord,
)
from codedelta.compare.relationships import detect_logic_changes, detect_renames
from codedelta.config.models import CodeDeltaConfig
from codedelta.core.languages import is_code_file
from codedelta.core.logging import get_logger, set_operation_id
from codedelta.files.ops import FileOps

log = get_logger("compare")

NO_CHANGES_SUMMARY = "No significant method or logic changes detected."


def summarize(
    method_changes: list[RelationshipRecord],
    logic_changes: list[RelationshipRecord],
) -> str:
    total = len(method_changes) + len(logic_changes)
    if total == 0:
        return NO_CHANGES_SUMMARY

    summary = f"Found {total} significant change(s):\n"
    if method_changes:
        summary += f"- {len(method_changes)} method-related change(s)\n"
    if logic_changes:
        summary += f"- {len(logic_changes)} logic change(s)\n"
    return summary


class CompareOps:
    """Comparison operations over a baseline and a local version of a file."""

    def __init__(
        self,
        config: CodeDeltaConfig | None = None,
        *,
        file_ops: FileOps | None = None,
    ) -> None:
        self._config = config or CodeDeltaConfig()
        self._files = file_ops or FileOps()

    def compare(
        self,
        local: str,
        baseline: str,
        depth: AnalysisDepth | str | None = None,
    ) -> ComparisonResult:
        """Compare a local text against its baseline.

        Args:
            local: Local content
            baseline: Baseline (remote) content
            depth: basic skips relationship inference. Defaults to
                   config.analysis.default_depth.

        Returns:
            ComparisonResult with changes, relationships, metrics and
            recommendations
        """
        set_operation_id()
        depth = AnalysisDepth(depth or self._config.analysis.default_depth)

        changes = collect_changes(diff_lines(baseline, local))

        relationships: list[RelationshipRecord] = []
        if depth.infers_relationships:
            relationships = detect_renames(
                local, baseline, threshold=self._config.analysis.rename_threshold
            )

        metrics = calculate_metrics(changes, relationships)
        recommendations = generate_recommendations(changes, relationships, metrics)

        log.info(
            "compare_complete",
            depth=depth.value,
            changes=metrics.total_changes,
            significant=metrics.significant_changes,
            relationships=len(relationships),
            impact=metrics.maintainability_impact.value,
        )
        return ComparisonResult(
            changes=changes,
            relationships=relationships,
            recommendations=recommendations,
            metrics=metrics,
        )

    def compare_file(
        self,
        local_path: Path,
        baseline: str,
        depth: AnalysisDepth | str | None = None,
    ) -> ComparisonResult:
        """Compare the file at local_path against baseline content.

        Raises:
            InputError: local_path missing or not a file
        """
        return self.compare(self._files.read_text(local_path), baseline, depth)

    def analyze_changes(
        self,
        local: str,
        baseline: str,
        *,
        method_tracking: bool | None = None,
        logic_analysis: bool | None = None,
        path: str | Path | None = None,
    ) -> ChangeAnalysis:
        """Report method renames and control-flow changes with a summary.

        When ``path`` names a file without a known code extension, nothing is
        analyzed and the summary reports no changes.
        """
        set_operation_id()
        analysis = self._config.analysis
        if method_tracking is None:
            method_tracking = analysis.enable_method_tracking
        if logic_analysis is None:
            logic_analysis = analysis.enable_logic_analysis

        code = path is None or is_code_file(path)
        if not code:
            log.debug("analysis_skipped", path=str(path), reason="not a code file")

        method_changes: list[RelationshipRecord] = []
        logic_changes: list[RelationshipRecord] = []
        if method_tracking and code:
            method_changes = detect_renames(local, baseline, threshold=analysis.rename_threshold)
        if logic_analysis and code:
            logic_changes = detect_logic_changes(
                local, baseline, confidence=analysis.logic_change_confidence
            )

        log.info(
            "analysis_complete",
            method_changes=len(method_changes),
            logic_changes=len(logic_changes),
        )
        return ChangeAnalysis(
            method_changes=method_changes,
            logic_changes=logic_changes,
            summary=summarize(method_changes, logic_changes),
        )

    def analyze_file(
        self,
        local_path: Path,
        baseline: str,
        *,
        method_tracking: bool | None = None,
        logic_analysis: bool | None = None,
    ) -> ChangeAnalysis:
        return self.analyze_changes(
            self._files.read_text(local_path),
            baseline,
            method_tracking=method_tracking,
            logic_analysis=logic_analysis,
            path=local_path,
        )
