"""
cli - Command Line Interface for Prefix Rename Tool
"""

from .cli_entry import main, create_parser, parse_config

__all__ = ["main", "create_parser", "parse_config"]
