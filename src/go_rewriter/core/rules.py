"""
Rewrite Rule Definitions.

A rewrite rule maps a deprecated qualified call (`net.ParseIP`) onto its
replacement (`netutils.ParseIPSloppy` from `k8s.io/utils/net`). Rules are plain
data: the matcher and rewriter never branch on specific rule contents, so new
migrations are added by extending a `RuleSet` table.
"""

import re
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

_GO_IDENTIFIER = re.compile(r"^[^\W\d]\w*$")


class RewriteRule(BaseModel):
  """
  A single (source namespace, function) -> (target path, alias, function) mapping.
  """

  model_config = ConfigDict(frozen=True)

  from_namespace: str = Field(..., description="Import path of the deprecated package (e.g. 'net').")
  from_function: str = Field(..., description="Deprecated function name (e.g. 'ParseIP').")
  to_path: str = Field(..., description="Import path of the replacement package.")
  to_alias: str = Field(..., description="Canonical local name the replacement must be imported under.")
  to_function: str = Field(..., description="Replacement function name.")

  @field_validator("from_function", "to_alias", "to_function")
  @classmethod
  def validate_identifier(cls, v: str) -> str:
    """
    Ensures names used in selector expressions are valid Go identifiers.

    Raises:
        ValueError: If the value is not an identifier or is the blank identifier.
    """
    if not _GO_IDENTIFIER.match(v) or v == "_":
      raise ValueError(f"'{v}' is not a valid Go identifier")
    return v

  @field_validator("from_namespace", "to_path")
  @classmethod
  def validate_path(cls, v: str) -> str:
    if not v or '"' in v or any(c.isspace() for c in v):
      raise ValueError(f"'{v}' is not a valid import path")
    return v

  @property
  def key(self) -> Tuple[str, str]:
    return (self.from_namespace, self.from_function)

  @property
  def source_api(self) -> str:
    return f"{self.from_namespace}.{self.from_function}"

  @property
  def target_api(self) -> str:
    return f"{self.to_alias}.{self.to_function}"


class RuleSet:
  """
  Ordered, read-only collection of rewrite rules.

  Instances are immutable after construction and may be shared between
  pipelines running in parallel.
  """

  def __init__(self, rules: Iterable[RewriteRule]):
    """
    Builds the table.

    Args:
        rules: Rules in priority order.

    Raises:
        ValueError: On duplicate source keys, or when two rules import the same
            target path under different aliases.
    """
    self._rules: Tuple[RewriteRule, ...] = tuple(rules)
    self._by_key: Dict[Tuple[str, str], RewriteRule] = {}
    aliases: Dict[str, str] = {}

    for rule in self._rules:
      if rule.key in self._by_key:
        raise ValueError(f"Duplicate rewrite rule for {rule.source_api}")
      self._by_key[rule.key] = rule

      known = aliases.setdefault(rule.to_path, rule.to_alias)
      if known != rule.to_alias:
        raise ValueError(f"Conflicting aliases for '{rule.to_path}': '{known}' and '{rule.to_alias}'")

  def __iter__(self) -> Iterator[RewriteRule]:
    return iter(self._rules)

  def __len__(self) -> int:
    return len(self._rules)

  def lookup(self, namespace: str, function: str) -> Optional[RewriteRule]:
    """
    Finds the rule for a source (namespace path, function) pair.

    Returns:
        The rule, or None when no rule applies.
    """
    return self._by_key.get((namespace, function))

  @property
  def source_paths(self) -> List[str]:
    return list(dict.fromkeys(rule.from_namespace for rule in self._rules))

  def canonical_alias(self, path: str) -> Optional[str]:
    for rule in self._rules:
      if rule.to_path == path:
        return rule.to_alias
    return None


SLOPPY_PARSER_RULES = RuleSet(
  [
    RewriteRule(
      from_namespace="net",
      from_function="ParseIP",
      to_path="k8s.io/utils/net",
      to_alias="netutils",
      to_function="ParseIPSloppy",
    ),
    RewriteRule(
      from_namespace="net",
      from_function="ParseCIDR",
      to_path="k8s.io/utils/net",
      to_alias="netutils",
      to_function="ParseCIDRSloppy",
    ),
  ]
)
