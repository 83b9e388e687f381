"""
backup.py - Backup Module

Creates a timestamped copy of an item next to it before it is renamed:
    <original>.backup.<YYYYMMDD_HHMMSS>

Timestamps have one second resolution. A second backup of the same path
within that second overwrites a file backup and fails for a directory.
"""

from pathlib import Path
from datetime import datetime
from typing import Optional
import shutil

from .errors import BackupError

BACKUP_MARKER = ".backup."
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def backup_path_for(path: Path, now: Optional[datetime] = None) -> Path:
    """
    Get backup path for an item

    Args:
        path: Item path
        now: Time used for the timestamp (defaults to current time)

    Returns:
        Backup path in the same directory
    """
    path = Path(path)
    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return path.parent / f"{path.name}{BACKUP_MARKER}{timestamp}"


def create_backup(path: Path, now: Optional[datetime] = None) -> Path:
    """
    Copy a file, or a directory recursively, to its backup path

    Args:
        path: Item to back up
        now: Time used for the timestamp

    Returns:
        Created backup path

    Raises:
        BackupError: Copy failed
    """
    path = Path(path)
    backup = backup_path_for(path, now)

    try:
        if path.is_dir() and not path.is_symlink():
            shutil.copytree(path, backup, symlinks=True)
        else:
            shutil.copy2(path, backup)
    except OSError as e:
        raise BackupError(path, str(e)) from e

    return backup
