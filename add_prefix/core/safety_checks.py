"""
safety_checks.py - Safety Check Module

Validates the configuration before any item is touched
"""

from pathlib import Path
from typing import Tuple, Optional
import os

from .errors import MissingPrefixError, DirectoryNotFoundError
from .models_fs import RenameConfig


def validate_config(config: RenameConfig) -> None:
    """
    Validate run configuration

    Only prefix presence and target directory are checked. A prefix
    containing path separators is accepted as is.

    Args:
        config: Parsed configuration

    Raises:
        MissingPrefixError: Prefix is empty
        DirectoryNotFoundError: Directory missing or not a directory
    """
    if not config.prefix:
        raise MissingPrefixError()

    if not Path(config.directory).is_dir():
        raise DirectoryNotFoundError(config.directory)


def check_writable(directory: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if the target directory is writable

    Args:
        directory: Validated target directory

    Returns:
        (is_writable, error_reason)
    """
    if not os.access(directory, os.W_OK):
        return False, f"Directory is not writable: {directory}"
    return True, None
