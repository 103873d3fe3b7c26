"""
Unified Diff Rendering.

Produces `diff -u` style text for `go-rewriter fix --diff` and for test failure
messages.
"""

import difflib


def unified_diff(name: str, before: str, after: str) -> str:
  """
  Renders the difference between two versions of a file.

  Args:
      name: File label used in the ``---``/``+++`` headers.
      before: Original text.
      after: Rewritten text.

  Returns:
      str: The unified diff, or an empty string when the texts are equal.
  """
  if before == after:
    return ""
  lines = difflib.unified_diff(
    before.splitlines(keepends=True),
    after.splitlines(keepends=True),
    fromfile=f"{name}.orig",
    tofile=name,
  )
  return "".join(line if line.endswith("\n") else f"{line}\n" for line in lines)
