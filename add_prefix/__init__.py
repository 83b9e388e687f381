"""
add_prefix - Prefix Rename Tool

Renames files and directories in a single directory by prepending a prefix.
"""

PROG_NAME = "add-prefix"
__version__ = "1.0.0"
