"""
Go Source Printer.

Serializes a `SyntaxTree` back into text. The printer is a pure function of the
tree: the preamble and body are emitted verbatim from their tokens, while import
declarations are rendered in the canonical gofmt layout:

.. code-block:: go

    import (
    	"net"

    	netutils "k8s.io/utils/net"
    )

Within each blank-line separated group, specs are sorted by path (then name) and
exact duplicates are dropped. Trailing line comments on consecutive lines are
aligned into one column.
"""

from typing import List, Sequence

from go_rewriter.core.golang.nodes import ImportDecl, ImportSpec, SyntaxTree
from go_rewriter.core.golang.tokens import Token


def print_tree(tree: SyntaxTree) -> str:
  """
  Renders the whole file.

  Args:
      tree: The (possibly mutated) syntax tree.

  Returns:
      str: Canonical Go source, using the tree's line terminator.

  Raises:
      ValueError: If an import spec cannot be represented.
  """
  parts = [_join(tree.preamble)]
  for decl in tree.imports:
    rendered = render_import_decl(decl, tree.newline)
    if rendered:
      parts.append(decl.leading)
      parts.append(rendered)
  parts.append(_join(tree.body))
  return "".join(parts)


def render_import_decl(decl: ImportDecl, newline: str = "\n") -> str:
  """
  Renders a single import declaration.

  An unparenthesized declaration holding exactly one spec keeps the short form.
  Any other shape is printed parenthesized. An empty unparenthesized
  declaration renders as the empty string.

  Args:
      decl: The declaration node.
      newline: Line terminator placed between the rendered lines.

  Returns:
      str: The declaration text without leading or trailing newlines.
  """
  specs = decl.specs
  if not decl.parenthesized and len(specs) == 1 and not decl.has_comments():
    spec = specs[0]
    line = f"import {_render_spec(spec)}"
    if spec.comment:
      line += f" {spec.comment}"
    return line

  if not decl.parenthesized and not specs and not decl.has_comments():
    return ""

  if not specs and not decl.has_comments():
    return "import ()"

  lines = [f"import ( {decl.comment}" if decl.comment else "import ("]
  for index, group in enumerate(decl.groups):
    if index:
      lines.append("")
    lines.extend(_render_group(sort_specs(group)))
  lines.extend(f"\t{comment}" for comment in decl.footer)
  lines.append(")")
  return newline.join(lines)


def sort_specs(specs: Sequence[ImportSpec]) -> List[ImportSpec]:
  """
  Sorts a group of specs by (path, name), dropping exact duplicates.

  Args:
      specs: Specs of a single group.

  Returns:
      List[ImportSpec]: New ordered list; spec objects are shared, not copied.
  """
  seen = set()
  result = []
  for spec in sorted(specs, key=lambda s: s.sort_key):
    if spec.sort_key in seen:
      continue
    seen.add(spec.sort_key)
    result.append(spec)
  return result


def _render_group(specs: List[ImportSpec]) -> List[str]:
  lines: List[str] = []
  run: List[ImportSpec] = []

  def flush() -> None:
    width = max(len(_render_spec(s)) for s in run)
    for spec in run:
      text = _render_spec(spec)
      lines.append(f"\t{text}{' ' * (width - len(text) + 1)}{spec.comment}")
    run.clear()

  for spec in specs:
    if run and (spec.doc or not spec.comment):
      flush()
    lines.extend(f"\t{doc}" for doc in spec.doc)
    if spec.comment:
      run.append(spec)
    else:
      lines.append(f"\t{_render_spec(spec)}")
  if run:
    flush()
  return lines


def _render_spec(spec: ImportSpec) -> str:
  if '"' in spec.path or "\n" in spec.path:
    raise ValueError(f"Cannot print import path {spec.path!r}")
  if spec.name is not None and (not spec.name or any(c.isspace() for c in spec.name)):
    raise ValueError(f"Cannot print import name {spec.name!r} for {spec.path!r}")
  return str(spec)


def _join(tokens: List[Token]) -> str:
  return "".join(token.value for token in tokens)
