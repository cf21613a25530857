"""Mutation operations - all-or-nothing file rewrites.

Every rewrite is validated before the first one is written, so a missing or
reshaped target fails the batch without touching any file.
"""

from __future__ import annotations

import hashlib
import uuid
from dataclasses import dataclass, field
from pathlib import Path

from codedelta.compare.diff import DiffTag, diff_lines
from codedelta.core.errors import InternalError
from codedelta.core.logging import get_logger
from codedelta.files.ops import FileOps, require_file

log = get_logger("mutation")


@dataclass
class FileRewrite:
    """New content for an existing file."""

    path: Path
    old_content: str
    new_content: str


@dataclass
class FileDelta:
    """Delta for a single file."""

    path: str
    old_hash: str
    new_hash: str
    insertions: int = 0
    deletions: int = 0


@dataclass
class MutationDelta:
    """Structured delta from a mutation."""

    mutation_id: str
    files_changed: int
    insertions: int
    deletions: int
    files: list[FileDelta] = field(default_factory=list)


class MutationOps:
    """Writes a batch of rewrites, validating all of them first."""

    def __init__(self, file_ops: FileOps | None = None) -> None:
        self._files = file_ops or FileOps()

    def apply(self, rewrites: list[FileRewrite], *, dry_run: bool = False) -> MutationDelta:
        """Apply rewrites.

        Args:
            rewrites: Files to rewrite
            dry_run: Compute the delta only, don't write

        Returns:
            MutationDelta with per-file hashes and line counts

        Raises:
            InputError: a target is missing or is a directory
            InternalError: the filesystem refused a write after validation
                passed; details list the files already written
        """
        mutation_id = str(uuid.uuid4())[:8]

        for rewrite in rewrites:
            require_file(rewrite.path)

        deltas = [_file_delta(rewrite) for rewrite in rewrites]

        if not dry_run:
            written: list[str] = []
            for rewrite in rewrites:
                try:
                    self._files.write_text(rewrite.path, rewrite.new_content)
                except OSError as e:
                    log.error(
                        "write_failed", path=str(rewrite.path), written=written, error=str(e)
                    )
                    raise InternalError.unexpected(
                        f"failed to write {rewrite.path}: {e}",
                        path=str(rewrite.path),
                        written=written,
                    ) from e
                written.append(str(rewrite.path))
            if rewrites:
                log.info("files_written", mutation_id=mutation_id, count=len(rewrites))

        return MutationDelta(
            mutation_id=mutation_id,
            files_changed=len(deltas),
            insertions=sum(d.insertions for d in deltas),
            deletions=sum(d.deletions for d in deltas),
            files=deltas,
        )


def _file_delta(rewrite: FileRewrite) -> FileDelta:
    insertions = 0
    deletions = 0
    for block in diff_lines(rewrite.old_content, rewrite.new_content):
        if block.tag is DiffTag.ADDED:
            insertions += len(block.lines)
        elif block.tag is DiffTag.REMOVED:
            deletions += len(block.lines)
    return FileDelta(
        path=str(rewrite.path),
        old_hash=_hash_content(rewrite.old_content),
        new_hash=_hash_content(rewrite.new_content),
        insertions=insertions,
        deletions=deletions,
    )


def _hash_content(content: str) -> str:
    """Hash content for delta tracking."""
    return hashlib.sha256(content.encode()).hexdigest()[:12]
