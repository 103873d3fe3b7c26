"""
Entry point for module execution (``python -m go_rewriter``).

This module delegates execution to the CLI handler in ``go_rewriter.cli.__main__``.
"""

import sys
from go_rewriter.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
