#!/usr/bin/env python3
"""
Prefix Rename Tool - Main Entry

Usage:
    python main.py "new_" .                 # Rename every item in the current directory
    python main.py -d "test_" ./dir         # Preview only
    python main.py -b -e ".txt" "doc_" .    # Back up, .txt files only
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Main entry point"""
    from add_prefix.cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
