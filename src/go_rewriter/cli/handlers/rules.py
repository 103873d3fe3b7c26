"""
Rules Command Handler.

Prints the active rewrite table.
"""

from rich.table import Table

from go_rewriter.core.rules import SLOPPY_PARSER_RULES, RuleSet
from go_rewriter.utils.console import console


def handle_rules(rules: RuleSet = SLOPPY_PARSER_RULES) -> int:
  """
  Renders the rule table.

  Args:
      rules: The rule set to display.

  Returns:
      int: Exit code (always 0).
  """
  table = Table(title="Rewrite Rules")
  table.add_column("Deprecated Call", style="red")
  table.add_column("Replacement", style="green")
  table.add_column("Import", style="cyan")

  for rule in rules:
    table.add_row(rule.source_api, rule.target_api, f'{rule.to_alias} "{rule.to_path}"')

  console.print(table)
  return 0
