"""Pre-mutation snapshots.

A backup is a sibling copy named ``<target>.backup.<timestamp>``, where the
timestamp is the UTC ISO-8601 instant with millisecond precision and every
``:`` and ``.`` replaced by ``-`` (e.g. ``2026-10-19T08-15-42-137Z``).
Backups are never removed here; restoring one is a manual step.
"""

from __future__ import annotations

import shutil
from datetime import datetime, timezone
from pathlib import Path

from codedelta.core.errors import InputError
from codedelta.core.logging import get_logger

log = get_logger("backup")


def backup_timestamp(now: datetime | None = None) -> str:
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    iso = now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
    return iso.replace(":", "-").replace(".", "-")


def backup_path_for(target: Path, now: datetime | None = None) -> Path:
    return target.with_name(f"{target.name}.backup.{backup_timestamp(now)}")


def create_backup(target: Path, *, now: datetime | None = None) -> Path:
    """Copy a file or a whole directory tree next to itself.

    Returns:
        Path of the backup copy

    Raises:
        InputError: target does not exist
        FileExistsError: a backup with the same timestamp already exists
    """
    if not target.exists():
        raise InputError.not_found(str(target))

    # "." and ".." have no name to suffix
    target = target.resolve()
    destination = backup_path_for(target, now)
    if target.is_dir():
        shutil.copytree(target, destination)
    else:
        if destination.exists():
            raise FileExistsError(f"Backup already exists: {destination}")
        shutil.copy2(target, destination)

    log.info("backup_created", target=str(target), backup=str(destination))
    return destination
