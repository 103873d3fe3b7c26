"""
Call Site Rewriter.

Mutates matched call expressions in place: ``net.ParseIP(x)`` becomes
``netutils.ParseIPSloppy(x)``. Only the two identifier tokens of the callee are
touched; argument lists, comments and whitespace are left as they are.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set

from go_rewriter.core.golang.nodes import SyntaxTree
from go_rewriter.core.matcher import CallSite
from go_rewriter.core.rules import RewriteRule
from go_rewriter.core.tracer import TraceLogger


@dataclass
class RewriteOutcome:
  """
  Record of a rewrite pass.

  Attributes:
      changed: True if at least one call site was rewritten.
      applied: Rules that fired, in first-application order, without repeats.
      targets: Import paths the rewritten calls now depend on.
      sources: Import paths whose calls were rewritten away.
  """

  changed: bool = False
  applied: List[RewriteRule] = field(default_factory=list)
  targets: Set[str] = field(default_factory=set)
  sources: Set[str] = field(default_factory=set)


class Rewriter:
  """
  Applies call site matches to the body arena.
  """

  def __init__(self, tracer: Optional[TraceLogger] = None):
    self.tracer = tracer

  def apply(self, tree: SyntaxTree, sites: List[CallSite]) -> RewriteOutcome:
    """
    Rewrites every site's callee to the rule's ``to_alias.to_function``.

    Args:
        tree: The tree owning the arena the sites index into.
        sites: Matches produced by the PatternMatcher for this tree.

    Returns:
        RewriteOutcome: The changed flag and the touched namespaces.
    """
    outcome = RewriteOutcome()
    for site in sites:
      rule = site.rule
      qualifier = tree.body[site.qualifier_index]
      name = tree.body[site.name_index]
      before = f"{qualifier.value}.{name.value}"

      qualifier.value = rule.to_alias
      name.value = rule.to_function

      outcome.changed = True
      outcome.targets.add(rule.to_path)
      outcome.sources.add(rule.from_namespace)
      if rule not in outcome.applied:
        outcome.applied.append(rule)

      if self.tracer:
        self.tracer.log_match(before, rule.target_api, f"{tree.description}:{site.line}:{site.column}")
    return outcome
