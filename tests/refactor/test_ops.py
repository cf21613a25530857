"""Tests for RefactorOps.

Covers:
- Default rule pipeline on a single file
- Guard rejection aborting the whole call before any write
- Backups, dry runs and rule selection
- Directory discovery
"""

from __future__ import annotations

from pathlib import Path

import pytest

from codedelta.config.models import CodeDeltaConfig, RefactoringConfig
from codedelta.core.errors import ErrorCode, InputError, RefactorError
from codedelta.refactor.models import CodePatterns, RefactoringKind
from codedelta.refactor.ops import RefactorOps

MODULE = """\
import { b_helper } from './b';
import { a_util } from './a';

function load_data() {
  let total = 0;
  return a_util(b_helper(total));
}
"""

REFACTORED = """\
import { a_util } from './a';
import { b_helper } from './b';

function loadData() {
  const total: number = 0;
  return a_util(b_helper(total));
}
"""

# Twenty lines with one unused import: dropping it stays within the guard ratio.
SAFE = "import { unused } from 'x';\n" + "".join(f"step{i}();\n" for i in range(19))
# Two lines with one unused name: dropping the import halves the file.
UNSAFE = "import { a, b } from 'x';\nconsole.log(a);"


@pytest.fixture
def ops() -> RefactorOps:
    return RefactorOps()


def _backups(directory: Path) -> list[Path]:
    return sorted(p for p in directory.iterdir() if ".backup." in p.name)


class TestExtractPatterns:
    """Tests for RefactorOps.extract_patterns."""

    def test_returns_defaults(self, ops: RefactorOps) -> None:
        assert ops.extract_patterns() == CodePatterns.default()


class TestRefactorFile:
    """Refactoring a single file."""

    def test_default_rules(self, ops: RefactorOps, tmp_path: Path) -> None:
        path = tmp_path / "module.ts"
        path.write_text(MODULE)

        result = ops.refactor(path, create_backup=False)

        assert path.read_text() == REFACTORED
        assert result.files == [str(path)]
        assert [(c.kind, c.description, c.line_numbers) for c in result.changes] == [
            (RefactoringKind.RENAME, "Applied consistent naming patterns", [4]),
            (RefactoringKind.IMPORT, "Organized imports", [1, 2]),
            (RefactoringKind.FORMAT, "Applied code formatting", [5]),
        ]
        assert all(c.file == str(path) for c in result.changes)
        assert result.backup_path is None

    def test_partially_used_import_without_guard(self, ops: RefactorOps, tmp_path: Path) -> None:
        path = tmp_path / "a.ts"
        path.write_text(UNSAFE)

        result = ops.refactor(
            path, rules=["remove-unused-imports"], preserve_logic=False, create_backup=False
        )

        assert path.read_text() == "console.log(a);"
        assert len(result.changes) == 1
        assert result.changes[0].kind is RefactoringKind.IMPORT
        assert result.changes[0].line_numbers == [1]

    def test_guard_rejects(self, ops: RefactorOps, tmp_path: Path) -> None:
        path = tmp_path / "a.ts"
        path.write_text(UNSAFE)

        with pytest.raises(RefactorError) as exc_info:
            ops.refactor(path, rules=["remove-unused-imports"], create_backup=False)

        assert exc_info.value.code == ErrorCode.REFACTOR_GUARD_REJECTED
        assert str(path) in exc_info.value.message
        assert exc_info.value.message.endswith("Refactoring aborted.")
        assert path.read_text() == UNSAFE

    def test_no_op_file_is_not_reported(self, ops: RefactorOps, tmp_path: Path) -> None:
        path = tmp_path / "clean.js"
        path.write_text("run();\n")

        result = ops.refactor(path, create_backup=False)

        assert result.files == []
        assert result.changes == []

    def test_file_target_ignores_extension(self, ops: RefactorOps, tmp_path: Path) -> None:
        path = tmp_path / "snippet.txt"
        path.write_text("let count = 1;\nshow(count);\n")

        result = ops.refactor(path, rules=["format-code"], create_backup=False)

        assert result.files == [str(path)]
        assert path.read_text() == "const count: number = 1;\nshow(count);\n"

    def test_custom_patterns(self, ops: RefactorOps, tmp_path: Path) -> None:
        path = tmp_path / "a.js"
        path.write_text("let user_name = 'x';\nuse(user_name);\n")

        ops.refactor(path, CodePatterns(), create_backup=False)

        assert path.read_text() == "let user_name = 'x';\nuse(user_name);\n"

    def test_preserves_crlf_on_untouched_lines(self, ops: RefactorOps, tmp_path: Path) -> None:
        path = tmp_path / "a.js"
        path.write_bytes(b"let total = 0;\r\nshow(total);\r\n")

        ops.refactor(path, rules=["format-code"], create_backup=False)

        assert path.read_bytes() == b"const total: number = 0;\r\nshow(total);\r\n"

    def test_missing_target(self, ops: RefactorOps, tmp_path: Path) -> None:
        with pytest.raises(InputError) as exc_info:
            ops.refactor(tmp_path / "missing.ts")
        assert exc_info.value.code == ErrorCode.INPUT_NOT_FOUND
        assert _backups(tmp_path) == []


class TestRefactorDirectory:
    """Refactoring every code file under a directory."""

    def test_all_or_nothing(self, ops: RefactorOps, tmp_path: Path) -> None:
        """A rejected file leaves files processed before it untouched."""
        src = tmp_path / "src"
        src.mkdir()
        (src / "a.ts").write_text(SAFE)
        (src / "b.ts").write_text(UNSAFE)

        with pytest.raises(RefactorError):
            ops.refactor(src, rules=["remove-unused-imports"], create_backup=False)

        assert (src / "a.ts").read_text() == SAFE
        assert (src / "b.ts").read_text() == UNSAFE

    def test_rewrites_within_ratio(self, ops: RefactorOps, tmp_path: Path) -> None:
        src = tmp_path / "src"
        src.mkdir()
        (src / "a.ts").write_text(SAFE)

        result = ops.refactor(src, rules=["remove-unused-imports"], create_backup=False)

        assert result.files == [str(src / "a.ts")]
        assert (src / "a.ts").read_text() == SAFE.split("\n", 1)[1]

    def test_skips_non_code_and_pruned_dirs(self, ops: RefactorOps, tmp_path: Path) -> None:
        src = tmp_path / "src"
        (src / "node_modules" / "lib").mkdir(parents=True)
        (src / "nested").mkdir()
        vendored = src / "node_modules" / "lib" / "index.js"
        notes = src / "notes.md"
        code = src / "nested" / "c.js"
        for path in (vendored, notes, code):
            path.write_text("let total = 0;\nshow(total);\n")

        result = ops.refactor(src, rules=["format-code"], create_backup=False)

        assert result.files == [str(code)]
        assert vendored.read_text() == "let total = 0;\nshow(total);\n"
        assert notes.read_text() == "let total = 0;\nshow(total);\n"

    def test_files_in_sorted_order(self, ops: RefactorOps, tmp_path: Path) -> None:
        src = tmp_path / "src"
        src.mkdir()
        for name in ("z.js", "a.js", "m.js"):
            (src / name).write_text("let total = 0;\nshow(total);\n")

        result = ops.refactor(src, rules=["format-code"], create_backup=False)

        assert result.files == [str(src / n) for n in ("a.js", "m.js", "z.js")]

    def test_undecodable_file_aborts_before_backup(self, ops: RefactorOps, tmp_path: Path) -> None:
        src = tmp_path / "src"
        src.mkdir()
        (src / "a.js").write_text("let total = 0;\nshow(total);\n")
        (src / "b.js").write_bytes(b"let y = '\xff\xfe';")

        with pytest.raises(InputError) as exc_info:
            ops.refactor(src, rules=["format-code"])

        assert exc_info.value.code == ErrorCode.INPUT_UNREADABLE
        assert (src / "a.js").read_text() == "let total = 0;\nshow(total);\n"
        assert _backups(tmp_path) == []

    def test_current_directory(
        self, ops: RefactorOps, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        project = tmp_path / "proj"
        project.mkdir()
        (project / "a.js").write_text("let total = 0;\nshow(total);\n")
        monkeypatch.chdir(project)

        result = ops.refactor(Path("."), rules=["format-code"], preserve_logic=False)

        assert result.files == [str(Path("a.js"))]
        assert (project / "a.js").read_text() == "const total: number = 0;\nshow(total);\n"
        assert result.backup_path is not None
        backup = Path(result.backup_path)
        assert backup.parent == tmp_path
        assert backup.name.startswith("proj.backup.")
        assert (backup / "a.js").read_text() == "let total = 0;\nshow(total);\n"


class TestBackupAndDryRun:
    """Backups and dry runs."""

    def test_backup_of_file(self, ops: RefactorOps, tmp_path: Path) -> None:
        path = tmp_path / "module.ts"
        path.write_text(MODULE)

        result = ops.refactor(path)

        assert result.backup_path is not None
        backup = Path(result.backup_path)
        assert backup.parent == tmp_path
        assert backup.name.startswith("module.ts.backup.")
        assert backup.read_text() == MODULE
        assert path.read_text() == REFACTORED

    def test_backup_of_directory(self, ops: RefactorOps, tmp_path: Path) -> None:
        src = tmp_path / "src"
        src.mkdir()
        (src / "module.ts").write_text(MODULE)

        result = ops.refactor(src)

        assert result.backup_path is not None
        assert (Path(result.backup_path) / "module.ts").read_text() == MODULE

    def test_backup_even_when_guard_rejects(self, ops: RefactorOps, tmp_path: Path) -> None:
        path = tmp_path / "a.ts"
        path.write_text(UNSAFE)

        with pytest.raises(RefactorError):
            ops.refactor(path, rules=["remove-unused-imports"])

        backups = _backups(tmp_path)
        assert len(backups) == 1
        assert backups[0].read_text() == UNSAFE

    def test_backups_disabled_by_config(self, tmp_path: Path) -> None:
        config = CodeDeltaConfig(refactoring=RefactoringConfig(create_backups=False))
        path = tmp_path / "module.ts"
        path.write_text(MODULE)

        result = RefactorOps(config).refactor(path)

        assert result.backup_path is None
        assert _backups(tmp_path) == []

    def test_dry_run_writes_nothing(self, ops: RefactorOps, tmp_path: Path) -> None:
        path = tmp_path / "module.ts"
        path.write_text(MODULE)

        result = ops.refactor(path, dry_run=True)

        assert result.dry_run
        assert result.files == [str(path)]
        assert len(result.changes) == 3
        assert path.read_text() == MODULE
        assert _backups(tmp_path) == []

    def test_dry_run_still_guards(self, ops: RefactorOps, tmp_path: Path) -> None:
        path = tmp_path / "a.ts"
        path.write_text(UNSAFE)

        with pytest.raises(RefactorError):
            ops.refactor(path, rules=["remove-unused-imports"], dry_run=True)


class TestRuleSelection:
    """Unknown and custom rule lists."""

    def test_unknown_rule_is_skipped(self, ops: RefactorOps, tmp_path: Path) -> None:
        path = tmp_path / "a.js"
        path.write_text("let total = 0;\nshow(total);\n")

        result = ops.refactor(path, rules=["extract-method", "format-code"], create_backup=False)

        assert [c.kind for c in result.changes] == [RefactoringKind.FORMAT]

    def test_strict_rules_raise(self, tmp_path: Path) -> None:
        config = CodeDeltaConfig(refactoring=RefactoringConfig(strict_rules=True))
        path = tmp_path / "a.js"
        path.write_text("let total = 0;\n")

        with pytest.raises(RefactorError) as exc_info:
            RefactorOps(config).refactor(path, rules=["extract-method"])

        assert exc_info.value.code == ErrorCode.REFACTOR_UNSUPPORTED_RULE
        assert path.read_text() == "let total = 0;\n"
        assert _backups(tmp_path) == []

    def test_rules_from_config(self, tmp_path: Path) -> None:
        config = CodeDeltaConfig(
            refactoring=RefactoringConfig(rules=["format-code"], create_backups=False)
        )
        path = tmp_path / "module.ts"
        path.write_text(MODULE)

        result = RefactorOps(config).refactor(path)

        assert [c.kind for c in result.changes] == [RefactoringKind.FORMAT]

    def test_empty_rule_list(self, ops: RefactorOps, tmp_path: Path) -> None:
        path = tmp_path / "module.ts"
        path.write_text(MODULE)

        result = ops.refactor(path, rules=[], create_backup=False)

        assert result.changes == []
        assert path.read_text() == MODULE

    def test_rule_order_matters(self, ops: RefactorOps, tmp_path: Path) -> None:
        """Each rule sees the previous rule's output."""
        path = tmp_path / "a.js"
        path.write_text("let user_count = 0;\nshow(user_count);\n")

        ops.refactor(
            path,
            rules=["consistent-naming", "format-code"],
            preserve_logic=False,
            create_backup=False,
        )

        assert path.read_text() == "const userCount: number = 0;\nshow(user_count);\n"
