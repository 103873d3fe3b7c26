"""
Pattern Matcher.

Identifies call expressions whose callee is ``<namespace>.<Function>`` for the
namespace/function pairs of the active `RuleSet`. The namespace is resolved
through the file's import table, so ``import stdnet "net"`` makes
``stdnet.ParseIP(...)`` a match while ``net.ParseIP(...)`` is not.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from go_rewriter.core.golang.nodes import SyntaxTree
from go_rewriter.core.import_fixer.table import ImportTable
from go_rewriter.core.rules import RewriteRule, RuleSet
from go_rewriter.core.scanners import count_references, iter_selectors

logger = logging.getLogger(__name__)


@dataclass
class CallSite:
  """
  A matched call expression.

  Attributes:
      rule: The rule the call matched.
      qualifier_index: Arena index of the namespace identifier token.
      name_index: Arena index of the function name token.
      line: Source line of the call (1-based).
      column: Source column of the call (1-based).
  """

  rule: RewriteRule
  qualifier_index: int
  name_index: int
  line: int
  column: int


class PatternMatcher:
  """
  Finds rewrite sites and answers "is this namespace still referenced".
  """

  def __init__(self, rules: RuleSet):
    self.rules = rules

  def blocked_rules(self, table: ImportTable) -> Dict[RewriteRule, str]:
    """
    Determines which rules cannot be applied to this file.

    A rule is blocked when its target path is dot-imported (the qualified call
    could not be written without a second import of the same path), or when its
    canonical alias is already bound to a different import path.

    Args:
        table: The file's import table.

    Returns:
        Dict mapping blocked rules to a human readable reason.
    """
    blocked = {}
    for rule in self.rules:
      if any(spec.name == "." for spec in table.find_all(rule.to_path)):
        blocked[rule] = f"'{rule.to_path}' is dot-imported"
        continue
      owner = table.bound_path(rule.to_alias)
      if owner is not None and owner != rule.to_path:
        blocked[rule] = f"alias '{rule.to_alias}' is already bound to '{owner}'"
    return blocked

  def find_call_sites(self, tree: SyntaxTree, table: Optional[ImportTable] = None) -> List[CallSite]:
    """
    Scans the body for calls matching any applicable rule.

    Args:
        tree: The parsed file.
        table: Import table for the file; built on demand if omitted.

    Returns:
        List[CallSite]: Matches in source order.
    """
    table = table or ImportTable(tree)
    blocked = self.blocked_rules(table)
    for rule, reason in blocked.items():
      logger.warning("%s: skipping %s -> %s, %s", tree.description, rule.source_api, rule.target_api, reason)

    namespaces: Dict[str, str] = {}
    for path in self.rules.source_paths:
      for spec in table.find_all(path):
        name = table.local_name(spec)
        if name:
          namespaces[name] = path

    sites: List[CallSite] = []
    if not namespaces:
      return sites

    tokens = tree.body
    for selector in iter_selectors(tokens):
      if not selector.is_call:
        continue
      qualifier = tokens[selector.qualifier_index]
      path = namespaces.get(qualifier.value)
      if path is None:
        continue
      rule = self.rules.lookup(path, tokens[selector.name_index].value)
      if rule is None or rule in blocked:
        continue
      sites.append(
        CallSite(
          rule=rule,
          qualifier_index=selector.qualifier_index,
          name_index=selector.name_index,
          line=qualifier.line,
          column=qualifier.column,
        )
      )
    return sites

  @staticmethod
  def is_referenced(tree: SyntaxTree, name: str) -> bool:
    """Re-runs the reference count over the (rewritten) body for one local name."""
    return count_references(tree.body, name) > 0
