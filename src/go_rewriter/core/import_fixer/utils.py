"""
Utilities for the Import Fixer.

Contains static helpers for deriving package names from import paths and for
choosing where a new import should be inserted.
"""

import re

_VERSION_SEGMENT = re.compile(r"^v\d+$")
_NOT_IDENTIFIER = re.compile(r"[^\w]")


def assumed_name(path: str) -> str:
  """
  Infers the package name an import path binds when no alias is written.

  The last path element is used, with a few conventions applied: a trailing
  major-version element (``/v2``) defers to the element before it, a ``go-``
  prefix is dropped, and anything from the first non-identifier character on
  (``yaml.v2`` -> ``yaml``) is cut.

  Args:
      path: The import path (e.g. "k8s.io/utils/net").

  Returns:
      str: The assumed package name (e.g. "net").
  """
  parts = path.split("/")
  base = parts[-1]
  if _VERSION_SEGMENT.match(base) and len(parts) > 1:
    base = parts[-2]
  if base.startswith("go-"):
    base = base[3:]
  match = _NOT_IDENTIFIER.search(base)
  if match:
    base = base[: match.start()]
  return base


def shared_prefix(a: str, b: str) -> int:
  """
  Counts leading path elements two import paths have in common.

  Args:
      a: First import path.
      b: Second import path.

  Returns:
      int: Number of equal leading elements.
  """
  count = 0
  for left, right in zip(a.split("/"), b.split("/")):
    if left != right:
      break
    count += 1
  return count
