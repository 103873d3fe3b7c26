"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- A shared engine with default configuration.
- Console capture for CLI output assertions.
"""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'go_rewriter' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from go_rewriter.config import RuntimeConfig  # noqa: E402
from go_rewriter.core.engine import RewriteEngine  # noqa: E402
from go_rewriter.utils.console import reset_console, set_console  # noqa: E402


@pytest.fixture
def engine():
  """Engine with default settings (grouping on, no local prefix)."""
  return RewriteEngine(RuntimeConfig())


@pytest.fixture
def captured_console():
  """Routes console and logging output to an in-memory buffer."""
  buffer = io.StringIO()
  set_console(Console(file=buffer, width=200, force_terminal=False, color_system=None))
  yield buffer
  reset_console()
