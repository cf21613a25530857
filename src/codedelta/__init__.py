"""codedelta - file comparison and guarded rule-based refactoring."""

from codedelta.compare.ops import CompareOps
from codedelta.config.loader import load_config
from codedelta.config.models import CodeDeltaConfig
from codedelta.refactor.ops import RefactorOps

__version__ = "0.1.0"

__all__ = ["CompareOps", "RefactorOps", "CodeDeltaConfig", "load_config", "__version__"]
