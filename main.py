"""CLI entry point for the markup cleaner (run from a source checkout)."""

import sys

from markup_cleaner.cli import main

if __name__ == "__main__":
    sys.exit(main())
