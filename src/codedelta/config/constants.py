"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
These are the fixed vocabularies and thresholds the analysis is defined by.

For configurable values, see models.py (AnalysisConfig, RefactoringConfig).
"""

# =============================================================================
# Refactoring Rules
# =============================================================================

RULE_CONSISTENT_NAMING = "consistent-naming"
RULE_REMOVE_UNUSED_IMPORTS = "remove-unused-imports"
RULE_ORGANIZE_IMPORTS = "organize-imports"
RULE_FORMAT_CODE = "format-code"

DEFAULT_RULES: tuple[str, ...] = (
    RULE_CONSISTENT_NAMING,
    RULE_REMOVE_UNUSED_IMPORTS,
    RULE_ORGANIZE_IMPORTS,
    RULE_FORMAT_CODE,
)
"""Rules applied, in this order, when the caller names none."""

# =============================================================================
# Pattern Vocabulary
# =============================================================================
# Pattern hints are opaque strings. Rules only react to hints containing one
# of these phrases.

NAMING_CAMEL_CASE = "camelCase for variables and functions"
NAMING_PASCAL_CASE = "PascalCase for classes and types"
NAMING_UPPER_SNAKE = "UPPER_SNAKE_CASE for constants"

STYLE_EXPLICIT_TYPES = "Use explicit types"
STYLE_PREFER_CONST = "Prefer const over let"
STYLE_ARROW_FUNCTIONS = "Use arrow functions for callbacks"

# =============================================================================
# Analysis Thresholds
# =============================================================================

RENAME_CONFIDENCE_THRESHOLD = 0.7
"""Relationships at or below this similarity are never reported."""

LOGIC_CHANGE_CONFIDENCE = 0.9
"""Fixed confidence attached to every positional control-flow difference."""

COMPLEXITY_SCORE_MAX = 10.0

GUARD_MAX_LINE_DELTA_RATIO = 0.1
"""Max change in non-blank line count, as a fraction of the original."""
