"""File operations module - input reading and code-file discovery."""

from codedelta.files.ops import PRUNED_DIRS, FileOps

__all__ = ["FileOps", "PRUNED_DIRS"]
