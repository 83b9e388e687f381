"""
models_fs.py - Core Data Structure Definitions

Contains:
- RenameConfig: Immutable run configuration
- Item: File or directory inside the target directory
- RenameOp: Single prefix rename operation
- RenameOutcome: Result of one operation
- RenamePlan: Preview of a whole run
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List
from enum import Enum
import os


class ItemKind(Enum):
    """Item kind enumeration"""
    FILE = "file"
    DIRECTORY = "directory"

    @property
    def label(self) -> str:
        """Label used in printed lines, e.g. [file]"""
        return f"[{self.value}]"


class OutcomeStatus(Enum):
    """Per-item outcome"""
    RENAMED = "renamed"
    SKIPPED = "skipped"
    FAILED = "failed"


class FailureReason(Enum):
    """Why an item could not be renamed"""
    NAME_EXISTS = "target name already exists"
    BACKUP_FAILED = "backup creation failed"
    MOVE_FAILED = "move operation failed"


@dataclass(frozen=True)
class RenameConfig:
    """Run configuration, created once by the argument parser"""
    prefix: str
    directory: Path = Path(".")
    dry_run: bool = False
    backup: bool = False
    extension: Optional[str] = None    # Name suffix filter, e.g. ".txt"
    verbose: bool = False

    def describe(self) -> List[str]:
        """Lines echoed in verbose mode before processing"""
        return [
            f"Prefix: {self.prefix}",
            f"Directory: {self.directory}",
            f"Extension filter: {self.extension or 'none'}",
            f"Dry run: {str(self.dry_run).lower()}",
            f"Backup: {str(self.backup).lower()}",
        ]


@dataclass
class Item:
    """File or directory directly inside the target directory"""
    path: Path                      # Full path
    name: str                       # Base name
    kind: ItemKind

    @classmethod
    def from_entry(cls, entry: os.DirEntry) -> Optional["Item"]:
        """
        Create Item from a directory entry

        Symlinks and special files are not items, None is returned for them.
        """
        if entry.is_dir(follow_symlinks=False):
            kind = ItemKind.DIRECTORY
        elif entry.is_file(follow_symlinks=False):
            kind = ItemKind.FILE
        else:
            return None
        return cls(path=Path(entry.path), name=entry.name, kind=kind)

    @property
    def is_dir(self) -> bool:
        return self.kind is ItemKind.DIRECTORY

    def target_path(self, prefix: str) -> Path:
        """Path the item gets after prepending prefix"""
        return self.path.parent / f"{prefix}{self.name}"


@dataclass
class RenameOp:
    """Single rename operation"""
    item: Item
    dst: Path                       # Destination path
    conflict: bool = False          # Destination already exists on disk

    @property
    def src(self) -> Path:
        return self.item.path

    @property
    def new_name(self) -> str:
        return self.dst.name

    def describe(self) -> str:
        """e.g. '[file] a.txt -> new_a.txt'"""
        return f"{self.item.kind.label} {self.item.name} -> {self.new_name}"


@dataclass
class RenameOutcome:
    """Outcome of one rename operation"""
    op: RenameOp
    status: OutcomeStatus
    reason: Optional[FailureReason] = None
    detail: str = ""
    backup_path: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.RENAMED


@dataclass
class RenamePlan:
    """Preview of a prefix rename run"""
    ops: List[RenameOp] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        """Total number of previewed operations"""
        return len(self.ops)

    @property
    def conflicts(self) -> List[RenameOp]:
        return [op for op in self.ops if op.conflict]

    @property
    def conflict_count(self) -> int:
        """Number of operations whose destination already exists"""
        return len(self.conflicts)

    def add_op(self, item: Item, dst: Path, conflict: bool = False) -> RenameOp:
        """Add operation"""
        op = RenameOp(item=item, dst=dst, conflict=conflict)
        self.ops.append(op)
        return op

