"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CODEDELTA__SECTION__KEY)
3. Repo YAML (.codedelta/config.yaml)
4. Global YAML (~/.config/codedelta/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    CODEDELTA__<SECTION>__<KEY>=<VALUE>

Examples:
    CODEDELTA__LOGGING__LEVEL=DEBUG
    CODEDELTA__ANALYSIS__DEFAULT_DEPTH=comprehensive
    CODEDELTA__REFACTORING__CREATE_BACKUPS=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from codedelta.config.constants import (
    DEFAULT_RULES,
    GUARD_MAX_LINE_DELTA_RATIO,
    LOGIC_CHANGE_CONFIDENCE,
    RENAME_CONFIDENCE_THRESHOLD,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
Depth = Literal["basic", "detailed", "comprehensive"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        CODEDELTA__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG logs every rule application.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class AnalysisConfig(BaseModel):
    """Comparison and change-analysis configuration.

    Env vars:
        CODEDELTA__ANALYSIS__DEFAULT_DEPTH: basic, detailed or comprehensive
        CODEDELTA__ANALYSIS__ENABLE_METHOD_TRACKING: Track renamed methods
        CODEDELTA__ANALYSIS__ENABLE_LOGIC_ANALYSIS: Track control-flow changes
    """

    default_depth: Depth = Field(
        default="detailed",
        description="Depth used when a comparison does not name one. "
        "'basic' skips relationship inference.",
    )
    enable_method_tracking: bool = Field(
        default=True,
        description="Default for method tracking in analyze_changes.",
    )
    enable_logic_analysis: bool = Field(
        default=True,
        description="Default for control-flow analysis in analyze_changes.",
    )
    rename_threshold: float = Field(
        default=RENAME_CONFIDENCE_THRESHOLD,
        description="Minimum similarity (exclusive) for a rename to be reported. "
        f"Can be raised above {RENAME_CONFIDENCE_THRESHOLD}, never lowered.",
    )
    logic_change_confidence: float = Field(
        default=LOGIC_CHANGE_CONFIDENCE,
        description="Confidence attached to control-flow changes.",
    )

    @field_validator("rename_threshold", "logic_change_confidence")
    @classmethod
    def validate_unit_interval(cls, v: float) -> float:
        if not (0.0 <= v <= 1.0):
            raise ValueError(f"Must be within [0, 1], got {v}")
        return v

    @field_validator("rename_threshold")
    @classmethod
    def validate_rename_floor(cls, v: float) -> float:
        if v < RENAME_CONFIDENCE_THRESHOLD:
            raise ValueError(f"Must be at least {RENAME_CONFIDENCE_THRESHOLD}, got {v}")
        return v


class RefactoringConfig(BaseModel):
    """Refactoring configuration.

    Env vars:
        CODEDELTA__REFACTORING__PRESERVE_LOGIC: Run the logic-preservation guard
        CODEDELTA__REFACTORING__CREATE_BACKUPS: Snapshot targets before writing
        CODEDELTA__REFACTORING__STRICT_RULES: Fail on unknown rule names
    """

    preserve_logic: bool = Field(
        default=True,
        description="Reject rewrites that fail the logic-preservation guard.",
    )
    create_backups: bool = Field(
        default=True,
        description="Copy the target to <target>.backup.<timestamp> before refactoring. "
        "Backups are never cleaned up automatically.",
    )
    rules: list[str] = Field(
        default_factory=lambda: list(DEFAULT_RULES),
        description="Rules applied, in order, when a call names none.",
    )
    strict_rules: bool = Field(
        default=False,
        description="Fail the call on an unknown rule name instead of skipping it.",
    )
    max_line_delta_ratio: float = Field(
        default=GUARD_MAX_LINE_DELTA_RATIO,
        description="Guard tolerance on non-blank line count drift. "
        "RISK: Raising this lets destructive rewrites through.",
    )

    @field_validator("max_line_delta_ratio")
    @classmethod
    def validate_ratio(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"Ratio must be non-negative, got {v}")
        return v


class CodeDeltaConfig(BaseModel):
    """Root configuration for codedelta.

    All settings can be configured via:
    1. Environment variables: CODEDELTA__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    refactoring: RefactoringConfig = Field(default_factory=RefactoringConfig)
