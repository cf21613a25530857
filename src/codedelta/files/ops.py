"""File operations - reading inputs and discovering code files.

Pure filesystem I/O. Missing paths and wrong path shapes surface as
InputError so callers get a typed failure instead of an OSError.
"""

from __future__ import annotations

import os
from pathlib import Path

from codedelta.core.errors import InputError
from codedelta.core.languages import is_code_file

# Never traversed when a directory is targeted.
PRUNED_DIRS: frozenset[str] = frozenset(
    (
        # VCS internals
        ".git",
        ".svn",
        ".hg",
        # Our own data
        ".codedelta",
        # Dependencies and caches
        "node_modules",
        "bower_components",
        "__pycache__",
        ".venv",
        "venv",
    )
)


def require_exists(path: Path) -> Path:
    if not path.exists():
        raise InputError.not_found(str(path))
    return path


def require_file(path: Path) -> Path:
    require_exists(path)
    if not path.is_file():
        raise InputError.invalid_shape(str(path), expected="file")
    return path


class FileOps:
    """Reads single inputs and lists the code files under a target."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read_text(self, path: Path) -> str:
        """Read a whole file.

        Raises:
            InputError: path missing (INPUT_NOT_FOUND), a directory
                (INPUT_INVALID_SHAPE), or not decodable in the configured
                encoding (INPUT_UNREADABLE)
        """
        require_file(path)
        # newline="" keeps \r\n intact so rewrites preserve line endings
        try:
            with path.open(encoding=self._encoding, newline="") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise InputError.unreadable(str(path), e.reason) from e

    def write_text(self, path: Path, content: str) -> None:
        with path.open("w", encoding=self._encoding, newline="") as f:
            f.write(content)

    def list_code_files(self, target: Path) -> list[Path]:
        """Files to refactor for a target.

        A file target is returned as-is regardless of extension. A directory
        is walked recursively, skipping PRUNED_DIRS, keeping only known code
        extensions. Results are sorted so processing order is deterministic.
        """
        require_exists(target)
        if target.is_file():
            return [target]

        found: list[Path] = []
        for dirpath, dirnames, filenames in os.walk(target):
            dirnames[:] = [d for d in dirnames if d not in PRUNED_DIRS]
            for name in filenames:
                if is_code_file(name):
                    found.append(Path(dirpath) / name)
        return sorted(found)
