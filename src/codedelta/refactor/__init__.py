"""Refactor operations module - rule engine and logic-preservation guard."""

from codedelta.refactor.models import (
    CodePatterns,
    RefactoringChange,
    RefactoringKind,
    RefactoringResult,
)
from codedelta.refactor.ops import RefactorOps

__all__ = [
    "RefactorOps",
    "CodePatterns",
    "RefactoringChange",
    "RefactoringKind",
    "RefactoringResult",
]
