"""Config module exports."""

from codedelta.config.loader import load_config
from codedelta.config.models import (
    AnalysisConfig,
    CodeDeltaConfig,
    LoggingConfig,
    RefactoringConfig,
)
from codedelta.config.user_config import write_default_config

__all__ = [
    "load_config",
    "write_default_config",
    "CodeDeltaConfig",
    "AnalysisConfig",
    "RefactoringConfig",
    "LoggingConfig",
]
