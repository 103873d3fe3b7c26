"""
Import Reconciler.

Brings the import declarations back in line with a rewritten body:

1.  **Injection**: every target path touched by a rewrite is imported under the
    rule's canonical alias.
2.  **Alias Canonicalization**: an existing import of the target path under a
    different alias is renamed in place and every selector using the old alias
    is repointed. Duplicate imports of the path collapse into one entry.
3.  **Pruning**: a source path whose calls were rewritten is dropped once no
    selector in the file refers to it anymore.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Optional

from go_rewriter.core.golang.nodes import SyntaxTree
from go_rewriter.core.import_fixer.table import ImportTable
from go_rewriter.core.rules import RuleSet
from go_rewriter.core.scanners import iter_selectors
from go_rewriter.core.tracer import TraceLogger

if TYPE_CHECKING:
  from go_rewriter.core.matcher import PatternMatcher

logger = logging.getLogger(__name__)


class ImportState(Enum):
  """Reconciliation state of a target path before it reaches Present."""

  NEEDS_ADD = "needs_add"
  WRONG_ALIAS = "already_present_wrong_alias"
  CORRECT_ALIAS = "already_present_correct_alias"


class ImportReconciler:
  """
  Updates the import block of a mutated tree so it is minimal and correct.
  """

  def __init__(self, rules: RuleSet, matcher: "PatternMatcher", tracer: Optional[TraceLogger] = None):
    """
    Args:
        rules: The active rule table (supplies canonical aliases).
        matcher: Answers whether a namespace is still referenced.
        tracer: Optional event sink.
    """
    self.rules = rules
    self.matcher = matcher
    self.tracer = tracer

  def reconcile(
    self,
    tree: SyntaxTree,
    targets: Iterable[str],
    sources: Iterable[str],
    table: Optional[ImportTable] = None,
  ) -> None:
    """
    Applies injection, canonicalization and pruning for one rewrite pass.

    Args:
        tree: The rewritten tree (mutated in place).
        targets: Import paths the rewritten calls now depend on.
        sources: Import paths whose calls were rewritten away.
        table: Import table over `tree`; built on demand if omitted.
    """
    table = table or ImportTable(tree)

    for path in sorted(set(targets)):
      alias = self.rules.canonical_alias(path)
      self.ensure_target(tree, table, path, alias)

    for path in sorted(set(sources)):
      self.prune_source(tree, table, path)

  @staticmethod
  def state(table: ImportTable, path: str, alias: Optional[str]) -> ImportState:
    specs = table.find_all(path)
    if not specs:
      return ImportState.NEEDS_ADD
    if len(specs) == 1 and specs[0].name == alias:
      return ImportState.CORRECT_ALIAS
    return ImportState.WRONG_ALIAS

  def ensure_target(self, tree: SyntaxTree, table: ImportTable, path: str, alias: Optional[str]) -> None:
    """
    Drives `path` to the Present(alias) state.
    """
    state = self.state(table, path, alias)

    if state == ImportState.NEEDS_ADD:
      table.add(path, alias)
      self._record("add", path, f"as {alias}")
      return

    if state == ImportState.CORRECT_ALIAS:
      return

    specs = table.find_all(path)
    keep = next((spec for spec in specs if spec.name == alias), specs[0])
    for spec in specs:
      old_name = table.local_name(spec)
      if spec is not keep:
        table.remove(spec)
        self._record("merge", path, f"dropped duplicate {spec}")
      if old_name and old_name != alias:
        count = repoint(tree, old_name, alias)
        self._record("rename", path, f"{old_name} -> {alias} ({count} references)")
    table.rename(keep, alias)

  def prune_source(self, tree: SyntaxTree, table: ImportTable, path: str) -> None:
    """
    Removes imports of `path` that no selector refers to anymore.

    Blank and dot imports are never removed.
    """
    for spec in list(table.find_all(path)):
      name = table.local_name(spec)
      if name is None:
        continue
      if not self.matcher.is_referenced(tree, name):
        table.remove(spec)
        self._record("remove", path, "no remaining references")

  def _record(self, action: str, path: str, detail: str) -> None:
    logger.debug("import %s %s: %s", action, path, detail)
    if self.tracer:
      self.tracer.log_import(action, path, detail)


def repoint(tree: SyntaxTree, old_name: str, new_name: str) -> int:
  """
  Renames the qualifier of every ``old_name.X`` selector in the body.

  Args:
      tree: The tree to mutate.
      old_name: The alias being replaced.
      new_name: The canonical alias.

  Returns:
      int: Number of selectors updated.
  """
  qualifiers: List[int] = [
    selector.qualifier_index
    for selector in iter_selectors(tree.body)
    if tree.body[selector.qualifier_index].value == old_name
  ]
  for index in qualifiers:
    tree.body[index].value = new_name
  return len(qualifiers)

