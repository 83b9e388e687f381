"""
Tests for configuration validation.
"""

import pytest

from add_prefix.core import (
    validate_config, check_writable, RenameConfig,
    MissingPrefixError, DirectoryNotFoundError, ArgumentError,
)
from add_prefix.core import safety_checks


def test_valid_config(temp_dir):
    validate_config(RenameConfig(prefix="new_", directory=temp_dir))


def test_empty_prefix(temp_dir):
    with pytest.raises(MissingPrefixError):
        validate_config(RenameConfig(prefix="", directory=temp_dir))


def test_missing_prefix_is_argument_error():
    assert issubclass(MissingPrefixError, ArgumentError)


def test_missing_directory(tmp_path):
    missing = tmp_path / "missing"

    with pytest.raises(DirectoryNotFoundError) as exc_info:
        validate_config(RenameConfig(prefix="new_", directory=missing))

    assert exc_info.value.path == missing
    assert str(missing) in str(exc_info.value)


def test_prefix_with_separator_is_accepted(temp_dir):
    validate_config(RenameConfig(prefix="sub/", directory=temp_dir))


def test_check_writable(temp_dir):
    assert check_writable(temp_dir) == (True, None)


def test_check_writable_read_only(temp_dir, monkeypatch):
    monkeypatch.setattr(safety_checks.os, "access", lambda path, mode: False)

    ok, reason = check_writable(temp_dir)

    assert ok is False
    assert reason == f"Directory is not writable: {temp_dir}"
