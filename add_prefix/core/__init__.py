"""
core - Prefix Rename Tool Core Module

Provides item scanning, preview planning, backup and rename execution.
"""

from .models_fs import (
    RenameConfig,
    Item,
    ItemKind,
    RenameOp,
    RenameOutcome,
    RenamePlan,
    OutcomeStatus,
    FailureReason,
)

from .errors import (
    AddPrefixError,
    ArgumentError,
    MissingPrefixError,
    DirectoryNotFoundError,
    BackupError,
)

from .scan_files import (
    scan_directory,
    matches_extension,
    sort_by_name,
)

from .plan_rename import (
    plan_prefix_rename,
    target_exists,
)

from .backup import (
    backup_path_for,
    create_backup,
)

from .exec_rename import (
    execute_rename,
    rename_file,
    rename_directory,
    RenameResult,
)

from .safety_checks import (
    validate_config,
    check_writable,
)

from .report import (
    configure_logging,
    get_logger,
    log,
    warning,
    error,
)

__all__ = [
    # Data models
    "RenameConfig",
    "Item",
    "ItemKind",
    "RenameOp",
    "RenameOutcome",
    "RenamePlan",
    "OutcomeStatus",
    "FailureReason",
    "RenameResult",

    # Errors
    "AddPrefixError",
    "ArgumentError",
    "MissingPrefixError",
    "DirectoryNotFoundError",
    "BackupError",

    # Scanning
    "scan_directory",
    "matches_extension",
    "sort_by_name",

    # Planning
    "plan_prefix_rename",
    "target_exists",

    # Backup
    "backup_path_for",
    "create_backup",

    # Execution
    "execute_rename",
    "rename_file",
    "rename_directory",

    # Safety checks
    "validate_config",
    "check_writable",

    # Logging
    "configure_logging",
    "get_logger",
    "log",
    "warning",
    "error",
]
