"""Refactor operations - rule-driven rewrites of a file or directory.

For every selected file the named rules run in order, each on the previous
rule's output. When logic preservation is on, each changed file must pass
the guard. Writes only happen once every file has passed: one rejection
aborts the whole call and leaves every file as it was.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from codedelta.config.models import CodeDeltaConfig
from codedelta.core.errors import RefactorError
from codedelta.core.logging import get_logger, set_operation_id
from codedelta.files.ops import FileOps, require_exists
from codedelta.mutation.backup import create_backup as snapshot
from codedelta.mutation.ops import FileRewrite, MutationOps
from codedelta.refactor.guard import check_logic_preserved
from codedelta.refactor.models import CodePatterns, RefactoringChange, RefactoringResult
from codedelta.refactor.rules import RULES, Rule, get_rule

log = get_logger("refactor")


class RefactorOps:
    """Refactoring operations over a target path."""

    def __init__(
        self,
        config: CodeDeltaConfig | None = None,
        *,
        file_ops: FileOps | None = None,
        mutation_ops: MutationOps | None = None,
    ) -> None:
        self._config = config or CodeDeltaConfig()
        self._files = file_ops or FileOps()
        self._mutation = mutation_ops or MutationOps(self._files)

    def extract_patterns(self) -> CodePatterns:
        """Pattern hints used when a caller supplies none."""
        return CodePatterns.default()

    def refactor(
        self,
        target: Path,
        patterns: CodePatterns | None = None,
        *,
        rules: Sequence[str] | None = None,
        preserve_logic: bool | None = None,
        create_backup: bool | None = None,
        dry_run: bool = False,
    ) -> RefactoringResult:
        """Apply rules to a file, or to every code file under a directory.

        Args:
            target: File or directory to refactor
            patterns: Pattern hints; defaults to extract_patterns()
            rules: Rule names in application order; defaults to
                   config.refactoring.rules
            preserve_logic: Run the guard; defaults to config
            create_backup: Snapshot target first; defaults to config
            dry_run: Compute changes only. No backup, no writes.

        Returns:
            RefactoringResult listing modified files and per-rule changes

        Raises:
            InputError: target does not exist
            InputError: a code file could not be read as text
            RefactorError: a file failed the guard (nothing written), or an
                unknown rule was named with strict_rules enabled
        """
        set_operation_id()
        settings = self._config.refactoring
        patterns = patterns or self.extract_patterns()
        if preserve_logic is None:
            preserve_logic = settings.preserve_logic
        if create_backup is None:
            create_backup = settings.create_backups

        require_exists(target)
        selected = self._select_rules(settings.rules if rules is None else rules)
        files = self._files.list_code_files(target)
        originals = [(path, self._files.read_text(path)) for path in files]

        backup_path: Path | None = None
        if create_backup and not dry_run:
            backup_path = snapshot(target)

        changes: list[RefactoringChange] = []
        rewrites: list[FileRewrite] = []
        for path, original in originals:
            content, file_changes = self._apply_rules(path, original, selected, patterns)
            if content == original:
                continue

            if preserve_logic:
                verdict = check_logic_preserved(
                    original, content, path, max_ratio=settings.max_line_delta_ratio
                )
                if not verdict.ok:
                    log.warning("guard_rejected", path=str(path), reason=verdict.reason)
                    raise RefactorError.guard_rejected(str(path), verdict.reason or "unknown")

            rewrites.append(FileRewrite(path=path, old_content=original, new_content=content))
            changes.extend(file_changes)

        delta = self._mutation.apply(rewrites, dry_run=dry_run)

        log.info(
            "refactor_complete",
            target=str(target),
            files_scanned=len(files),
            files_changed=delta.files_changed,
            changes=len(changes),
            dry_run=dry_run,
        )
        return RefactoringResult(
            files=[str(r.path) for r in rewrites],
            changes=changes,
            backup_path=str(backup_path) if backup_path else None,
            dry_run=dry_run,
        )

    def _select_rules(self, names: Sequence[str]) -> list[Rule]:
        selected: list[Rule] = []
        for name in names:
            rule = get_rule(name)
            if rule is None:
                if self._config.refactoring.strict_rules:
                    raise RefactorError.unsupported_rule(name, list(RULES))
                log.warning("rule_skipped", rule=name, reason="unsupported")
                continue
            selected.append(rule)
        return selected

    def _apply_rules(
        self,
        path: Path,
        content: str,
        rules: list[Rule],
        patterns: CodePatterns,
    ) -> tuple[str, list[RefactoringChange]]:
        changes: list[RefactoringChange] = []
        for rule in rules:
            outcome = rule.apply(content, patterns)
            if outcome.content == content:
                continue
            content = outcome.content
            changes.append(
                RefactoringChange(
                    file=str(path),
                    kind=rule.kind,
                    description=rule.description,
                    line_numbers=outcome.line_numbers,
                )
            )
            log.debug("rule_applied", rule=rule.name, path=str(path), lines=outcome.line_numbers)
        return content, changes
