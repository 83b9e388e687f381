"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Compute target names (prefix + original name)
- Conflict detection against entries already on disk
- Output RenamePlan (used for dry runs, nothing is modified)
"""

from pathlib import Path
from typing import List
import os

from .models_fs import Item, RenamePlan


def target_exists(path: Path) -> bool:
    """Whether path is taken on disk (a dangling symlink counts)"""
    return os.path.lexists(path)


def plan_prefix_rename(items: List[Item], prefix: str) -> RenamePlan:
    """
    Generate prefix rename plan

    Args:
        items: Items in processing order
        prefix: Prefix to prepend

    Returns:
        Rename plan, ops whose destination exists are flagged as conflicts
    """
    plan = RenamePlan()

    for item in items:
        dst = item.target_path(prefix)
        plan.add_op(item, dst, conflict=target_exists(dst))

    return plan
