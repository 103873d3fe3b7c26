"""
Import Grouping Formatter.

A goimports-style cosmetic pass applied to already printed text. Inside every
blank-line separated group, specs are ordered by import class and a blank line is
inserted wherever the class changes:

1. Standard library (first path element has no dot, e.g. ``net``, ``net/http``).
2. Third party (``k8s.io/utils/net``).
3. Local packages (paths starting with the configured ``local_prefix``).

Existing groups are never merged, so hand-made layouts survive the pass.
"""

from typing import List, Optional

from go_rewriter.core.golang.nodes import ImportSpec, SyntaxTree
from go_rewriter.core.golang.parser import parse_source
from go_rewriter.core.golang.printer import print_tree

STDLIB_CLASS = 0
THIRD_PARTY_CLASS = 1
LOCAL_CLASS = 2


def import_class(path: str, local_prefix: Optional[str] = None) -> int:
  """
  Classifies an import path.

  Args:
      path: The import path.
      local_prefix: Optional prefix identifying the project's own packages.

  Returns:
      int: One of STDLIB_CLASS, THIRD_PARTY_CLASS, LOCAL_CLASS.
  """
  if local_prefix and (path == local_prefix or path.startswith(local_prefix.rstrip("/") + "/")):
    return LOCAL_CLASS
  first = path.split("/", 1)[0]
  if "." in first:
    return THIRD_PARTY_CLASS
  return STDLIB_CLASS


def regroup(tree: SyntaxTree, local_prefix: Optional[str] = None) -> SyntaxTree:
  """
  Splits mixed-class groups of every import declaration in place.

  Args:
      tree: Parsed file.
      local_prefix: Optional local package prefix.

  Returns:
      SyntaxTree: The same tree, for chaining.
  """
  for decl in tree.imports:
    new_groups: List[List[ImportSpec]] = []
    for group in decl.groups:
      ordered = sorted(group, key=lambda s: (import_class(s.path, local_prefix), s.sort_key))
      current: List[ImportSpec] = []
      for spec in ordered:
        if current and import_class(current[-1].path, local_prefix) != import_class(spec.path, local_prefix):
          new_groups.append(current)
          current = []
        current.append(spec)
      if current:
        new_groups.append(current)
    if len(new_groups) > 1:
      decl.parenthesized = True
    decl.groups = new_groups
  return tree


def format_imports(text: str, local_prefix: Optional[str] = None, description: str = "<input>") -> str:
  """
  Re-parses printed text, regroups its imports and prints it again.

  Args:
      text: Canonical Go source produced by the printer.
      local_prefix: Optional local package prefix.
      description: Label for diagnostics.

  Returns:
      str: The regrouped source.

  Raises:
      SyntaxError: If the text cannot be re-parsed.
      ValueError: If the regrouped tree cannot be printed.
  """
  tree = parse_source(text, description)
  return print_tree(regroup(tree, local_prefix))
