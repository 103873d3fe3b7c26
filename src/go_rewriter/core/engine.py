"""
Orchestration Engine for Go Source Rewrites.

This module provides the `RewriteEngine`, the driver for the per-file pipeline:

1.  **Parse**: Go text -> `SyntaxTree` (preamble, import declarations, body arena).
2.  **Match**: `PatternMatcher` collects call sites for the active `RuleSet`.
3.  **Rewrite**: `Rewriter` mutates the matched callees in place.
4.  **Reconcile**: `ImportReconciler` injects, canonicalizes and prunes imports.
5.  **Print**: the tree is serialized into canonical text.
6.  **Group**: the optional goimports-style pass splits mixed import groups.

The pipeline is all-or-nothing: any stage failure surfaces as a `RewriteError`
subclass (`ParseError`, `PrintError`, `FormatError`) and no partial output is
produced. Engines hold no per-file state and can be shared across threads.
"""

import logging
from typing import Optional, Tuple

from go_rewriter.config import RuntimeConfig
from go_rewriter.core.conversion_result import ConversionResult
from go_rewriter.core.errors import FormatError, ParseError, PrintError, RewriteError
from go_rewriter.core.golang.grouping import format_imports
from go_rewriter.core.golang.nodes import SyntaxTree
from go_rewriter.core.golang.parser import parse_source
from go_rewriter.core.golang.printer import print_tree
from go_rewriter.core.import_fixer import ImportReconciler, ImportTable
from go_rewriter.core.matcher import PatternMatcher
from go_rewriter.core.rewriter import RewriteOutcome, Rewriter
from go_rewriter.core.rules import SLOPPY_PARSER_RULES, RuleSet
from go_rewriter.core.tracer import TraceLogger

logger = logging.getLogger(__name__)


class RewriteEngine:
  """
  The main rewrite unit.

  Encapsulates the configuration and rule table needed to rewrite one file at a
  time. Every call builds a fresh tree, so a single engine may serve many files.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None, rules: RuleSet = SLOPPY_PARSER_RULES):
    """
    Initializes the Engine.

    Args:
        config (RuntimeConfig, optional): Runtime settings. Defaults are used if None.
        rules (RuleSet): The read-only rewrite table.
    """
    self.config = config or RuntimeConfig()
    self.rules = rules
    self.matcher = PatternMatcher(rules)

  def parse(self, code: str, description: str = "<input>") -> SyntaxTree:
    """
    Parses Go source into a SyntaxTree.

    Raises:
        ParseError: If the input is malformed.
    """
    try:
      return parse_source(code, description)
    except SyntaxError as e:
      raise ParseError(description, e) from e

  def to_source(self, tree: SyntaxTree) -> str:
    """
    Converts a tree back to text.

    Raises:
        PrintError: If the tree cannot be serialized.
    """
    try:
      return print_tree(tree)
    except Exception as e:
      raise PrintError(tree.description, e) from e

  def group_imports(self, text: str, description: str = "<input>") -> str:
    """
    Runs the import grouping post-pass if enabled by the configuration.

    Raises:
        FormatError: If the printed text cannot be re-parsed or re-printed.
    """
    if not self.config.group_imports:
      return text
    try:
      return format_imports(text, self.config.local_prefix, description)
    except (SyntaxError, ValueError) as e:
      raise FormatError(description, e) from e

  def format(self, code: str, description: str = "<input>") -> str:
    """
    Normalizes a file without rewriting any call: parse, print, group.

    Args:
        code (str): Go source.
        description (str): Label used in diagnostics.

    Returns:
        str: Canonical text.
    """
    return self.group_imports(self.to_source(self.parse(code, description)), description)

  def process(
    self,
    code: str,
    description: str = "<input>",
    tracer: Optional[TraceLogger] = None,
  ) -> Tuple[str, RewriteOutcome]:
    """
    Executes the full pipeline and raises on failure.

    Args:
        code (str): The input Go source.
        description (str): Filename or label used in diagnostics.
        tracer (TraceLogger, optional): Event sink for this run.

    Returns:
        Tuple[str, RewriteOutcome]: Output text and the rewrite record.

    Raises:
        RewriteError: ParseError, PrintError or FormatError.
    """
    tracer = tracer or TraceLogger()

    tracer.start_phase("Parse", description)
    tree = self.parse(code, description)
    table = ImportTable(tree)
    tracer.end_phase()

    tracer.start_phase("Match", f"{len(self.rules)} rules")
    sites = self.matcher.find_call_sites(tree, table)
    tracer.end_phase()
    logger.debug("%s: %d call sites matched", description, len(sites))

    tracer.start_phase("Rewrite", f"{len(sites)} call sites")
    outcome = Rewriter(tracer).apply(tree, sites)
    tracer.end_phase()

    if outcome.changed:
      tracer.start_phase("Reconcile Imports", ", ".join(sorted(outcome.targets)))
      ImportReconciler(self.rules, self.matcher, tracer).reconcile(tree, outcome.targets, outcome.sources, table)
      tracer.end_phase()

    tracer.start_phase("Print", "SyntaxTree -> Text")
    text = self.to_source(tree)
    text = self.group_imports(text, description)
    tracer.end_phase()

    return text, outcome

  def run(self, code: str, description: str = "<input>") -> ConversionResult:
    """
    Executes the pipeline and captures failures in the result.

    Args:
        code (str): The input Go source.
        description (str): Filename or label used in diagnostics.

    Returns:
        ConversionResult: Rewritten code on success; the untouched input and
        the error message on failure.
    """
    tracer = TraceLogger()
    root = tracer.start_phase("Rewrite Pipeline", description)
    try:
      text, outcome = self.process(code, description, tracer)
    except RewriteError as e:
      tracer.log_warning(str(e))
      tracer.unwind(root)
      logger.debug("%s", e)
      return ConversionResult(
        description=description,
        code=code,
        errors=[str(e)],
        success=False,
        trace_events=tracer.export(),
      )

    tracer.end_phase()
    return ConversionResult(
      description=description,
      code=text,
      changed=outcome.changed,
      applied=[rule.source_api for rule in outcome.applied],
      success=True,
      trace_events=tracer.export(),
    )
