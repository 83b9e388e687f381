"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Sequential execution in enumeration order
- Collision check right before each move (earlier renames are visible)
- Optional backup before each move
- Items that vanished since the scan are skipped
- Per-item failure reporting, no rollback
"""

from pathlib import Path
from typing import List, Optional, Callable
from dataclasses import dataclass, field
import os

from .backup import create_backup
from .errors import BackupError
from .models_fs import (
    Item, RenameOp, RenameOutcome, RenameConfig,
    OutcomeStatus, FailureReason,
)
from .plan_rename import target_exists
from .report import get_logger

logger = get_logger("exec")

ProgressCallback = Callable[[int, int, RenameOutcome], None]


@dataclass
class RenameResult:
    """Rename execution result"""
    outcomes: List[RenameOutcome] = field(default_factory=list)

    @property
    def success(self) -> List[RenameOutcome]:
        return [o for o in self.outcomes if o.status is OutcomeStatus.RENAMED]

    @property
    def failed(self) -> List[RenameOutcome]:
        return [o for o in self.outcomes if o.status is OutcomeStatus.FAILED]

    @property
    def skipped(self) -> List[RenameOutcome]:
        return [o for o in self.outcomes if o.status is OutcomeStatus.SKIPPED]

    @property
    def success_count(self) -> int:
        return len(self.success)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def add(self, outcome: RenameOutcome) -> RenameOutcome:
        self.outcomes.append(outcome)
        return outcome

    def tally(self) -> str:
        """Final one-line tally"""
        line = f"Done: {self.success_count} succeeded, {self.failed_count} failed"
        if self.skipped:
            line += f", {self.skipped_count} skipped"
        return line


def _failed(op: RenameOp, reason: FailureReason, detail: str = "") -> RenameOutcome:
    return RenameOutcome(op=op, status=OutcomeStatus.FAILED, reason=reason, detail=detail)


def _rename_item(item: Item, prefix: str, backup: bool) -> RenameOutcome:
    """Shared steps of rename_file and rename_directory"""
    label = item.kind.value
    op = RenameOp(item=item, dst=item.target_path(prefix))

    # Removed or renamed by someone else since the scan
    if not os.path.lexists(item.path):
        logger.warning(f"Skipping {label}, it no longer exists: {item.path}")
        return RenameOutcome(op=op, status=OutcomeStatus.SKIPPED, detail="source no longer exists")

    if target_exists(op.dst):
        logger.error(f"A {label} with the target name already exists: {op.dst}")
        return _failed(op, FailureReason.NAME_EXISTS, str(op.dst))

    backup_path: Optional[Path] = None
    if backup:
        try:
            backup_path = create_backup(item.path)
        except BackupError as e:
            logger.error(f"Failed to create {label} backup: {item.path} ({e.reason})")
            return _failed(op, FailureReason.BACKUP_FAILED, e.reason)
        logger.info(f"Created {label} backup: {backup_path}")

    try:
        os.rename(op.src, op.dst)
    except OSError as e:
        logger.error(f"Failed to rename {label}: {item.path} ({e})")
        outcome = _failed(op, FailureReason.MOVE_FAILED, str(e))
        outcome.backup_path = backup_path
        return outcome

    return RenameOutcome(op=op, status=OutcomeStatus.RENAMED, backup_path=backup_path)


def rename_file(item: Item, prefix: str, backup: bool = False) -> RenameOutcome:
    """
    Rename a single file

    Args:
        item: File item
        prefix: Prefix to prepend
        backup: Copy the file before renaming

    Returns:
        Outcome of the operation
    """
    return _rename_item(item, prefix, backup)


def rename_directory(item: Item, prefix: str, backup: bool = False) -> RenameOutcome:
    """
    Rename a single directory (backup copies the whole subtree)

    Args:
        item: Directory item
        prefix: Prefix to prepend
        backup: Copy the directory recursively before renaming

    Returns:
        Outcome of the operation
    """
    return _rename_item(item, prefix, backup)


def execute_rename(
    items: List[Item],
    config: RenameConfig,
    progress_callback: Optional[ProgressCallback] = None,
) -> RenameResult:
    """
    Execute prefix rename for all items, in order

    Args:
        items: Items to rename
        config: Run configuration (prefix, backup)
        progress_callback: Called after each item (current, total, outcome)

    Returns:
        Execution result
    """
    result = RenameResult()
    total = len(items)

    for i, item in enumerate(items):
        if item.is_dir:
            outcome = rename_directory(item, config.prefix, config.backup)
        else:
            outcome = rename_file(item, config.prefix, config.backup)
        result.add(outcome)

        if progress_callback:
            progress_callback(i + 1, total, outcome)

    return result
