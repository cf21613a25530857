"""Mutation operations module - backups and all-or-nothing rewrites."""

from codedelta.mutation.backup import create_backup
from codedelta.mutation.ops import (
    FileDelta,
    FileRewrite,
    MutationDelta,
    MutationOps,
)

__all__ = ["MutationOps", "MutationDelta", "FileDelta", "FileRewrite", "create_backup"]
