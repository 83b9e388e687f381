"""
scan_files.py - Item Scanning Module

Lists the immediate children of the target directory (never recursive)
"""

from pathlib import Path
from typing import List, Optional
import os

from .errors import DirectoryNotFoundError
from .models_fs import Item, ItemKind


def matches_extension(item: Item, extension: Optional[str]) -> bool:
    """
    Check item against the extension filter

    With a filter only regular files whose name ends with it match,
    directories never do. Without a filter everything matches.

    Args:
        item: Item to check
        extension: Literal name ending (e.g., ".txt"), case-sensitive

    Returns:
        Whether the item is selected
    """
    if not extension:
        return True
    return item.kind is ItemKind.FILE and item.name.endswith(extension)


def sort_by_name(items: List[Item]) -> List[Item]:
    """Sort by name (for ensuring stable processing order)"""
    return sorted(items, key=lambda i: i.name)


def scan_directory(directory: Path, extension: Optional[str] = None) -> List[Item]:
    """
    Scan single directory (non-recursive)

    Hidden entries are included. Symlinks and special files are skipped.

    Args:
        directory: Target directory
        extension: Name ending filter (files only)

    Returns:
        Item list sorted by name
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise DirectoryNotFoundError(directory)

    results: List[Item] = []

    with os.scandir(directory) as entries:
        for entry in entries:
            item = Item.from_entry(entry)
            if item is None:
                continue
            if matches_extension(item, extension):
                results.append(item)

    return sort_by_name(results)
