"""
errors.py - Exception Definitions

Fatal errors abort the run before any item is touched.
BackupError is per item and only skips the rename of that item.
"""

from pathlib import Path


class AddPrefixError(Exception):
    """Base class for all tool errors"""


class ArgumentError(AddPrefixError):
    """Invalid command line (unknown option, too many arguments, ...)"""


class MissingPrefixError(ArgumentError):
    """No prefix was given"""

    def __init__(self, message: str = "No prefix specified"):
        super().__init__(message)


class DirectoryNotFoundError(AddPrefixError):
    """Target directory does not exist or is not a directory"""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Directory does not exist: {self.path}")


class BackupError(AddPrefixError):
    """Backup copy of an item could not be created"""

    def __init__(self, path: Path, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        message = f"Failed to create backup of {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
