"""Value objects for refactoring calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from codedelta.config.constants import (
    NAMING_CAMEL_CASE,
    NAMING_PASCAL_CASE,
    NAMING_UPPER_SNAKE,
    STYLE_ARROW_FUNCTIONS,
    STYLE_EXPLICIT_TYPES,
    STYLE_PREFER_CONST,
)


class RefactoringKind(str, Enum):
    RENAME = "rename"
    FORMAT = "format"
    IMPORT = "import"
    STRUCTURE = "structure"


@dataclass
class CodePatterns:
    """Advisory pattern hints that parametrize the naming and format rules.

    Hints are opaque strings; a rule reacts to a hint when it contains one of
    the phrases in config.constants.
    """

    naming_patterns: list[str] = field(default_factory=list)
    structural_patterns: list[str] = field(default_factory=list)
    coding_styles: list[str] = field(default_factory=list)

    @classmethod
    def default(cls) -> CodePatterns:
        return cls(
            naming_patterns=[NAMING_CAMEL_CASE, NAMING_PASCAL_CASE, NAMING_UPPER_SNAKE],
            structural_patterns=[
                "Import statements at top of file",
                "Type definitions before implementations",
                "Export statements at end of file",
            ],
            coding_styles=[STYLE_EXPLICIT_TYPES, STYLE_PREFER_CONST, STYLE_ARROW_FUNCTIONS],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "naming_patterns": list(self.naming_patterns),
            "structural_patterns": list(self.structural_patterns),
            "coding_styles": list(self.coding_styles),
        }


@dataclass
class RefactoringChange:
    """One rule's effect on one file. ``line_numbers`` are 1-based."""

    file: str
    kind: RefactoringKind
    description: str
    line_numbers: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "type": self.kind.value,
            "description": self.description,
            "line_numbers": list(self.line_numbers),
        }


@dataclass
class RefactoringResult:
    """Result of a refactor call."""

    files: list[str] = field(default_factory=list)
    changes: list[RefactoringChange] = field(default_factory=list)
    backup_path: str | None = None
    dry_run: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "files": list(self.files),
            "changes": [c.to_dict() for c in self.changes],
            "backup_path": self.backup_path,
            "dry_run": self.dry_run,
        }
