"""
conftest.py - Shared pytest fixtures for the add_prefix test suite
"""

import os
import sys

# Add project root to sys.path so 'add_prefix' can be imported without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import logging

import pytest

from add_prefix.core.report import LOGGER_NAME


@pytest.fixture
def temp_dir(tmp_path):
    """Empty target directory"""
    target = tmp_path / "target"
    target.mkdir()
    return target


@pytest.fixture
def populated_dir(temp_dir):
    """Target directory with two files and a directory holding one file"""
    (temp_dir / "a.txt").write_text("alpha")
    (temp_dir / "b.md").write_text("bravo")
    sub = temp_dir / "docs"
    sub.mkdir()
    (sub / "inner.txt").write_text("inner")
    return temp_dir


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers installed by configure_logging between tests"""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
