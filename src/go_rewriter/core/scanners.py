"""
Token Scanners for Qualified Identifier Detection.

This module walks the token arena of a `SyntaxTree` body and reports selector
expressions of the form ``X.Sel`` where ``X`` is a bare identifier. These are the
only places a Go file can refer to an imported package, so they drive both call
site matching and the "is this import still used" check performed by the import
reconciler.

Matching is purely lexical: a local variable that shadows a package name is
indistinguishable from the package itself.
"""

from dataclasses import dataclass
from typing import Iterator, List

from go_rewriter.core.golang.tokens import Token, TokenType


@dataclass(frozen=True)
class Selector:
  """
  A qualified identifier ``X.Sel`` located in the body arena.

  Attributes:
      qualifier_index: Arena index of the ``X`` identifier token.
      name_index: Arena index of the ``Sel`` identifier token.
      is_call: True if the selector is immediately invoked (``X.Sel(``).
  """

  qualifier_index: int
  name_index: int
  is_call: bool


def iter_selectors(tokens: List[Token]) -> Iterator[Selector]:
  """
  Yields qualified identifiers in source order (pre-order, left to right).

  A selector whose qualifier is itself preceded by a dot (``a.net.ParseIP``) is a
  field access on another expression and is skipped; the outer ``a.net`` pair is
  reported instead.

  Args:
    tokens: The body token arena.

  Yields:
    Selector: Each qualified identifier found.
  """
  significant = [i for i, token in enumerate(tokens) if not token.is_trivia]
  count = len(significant)

  for pos in range(count - 2):
    head = tokens[significant[pos]]
    if head.kind != TokenType.IDENTIFIER:
      continue
    if tokens[significant[pos + 1]].kind != TokenType.DOT:
      continue
    if tokens[significant[pos + 2]].kind != TokenType.IDENTIFIER:
      continue
    if pos > 0 and tokens[significant[pos - 1]].kind == TokenType.DOT:
      continue

    is_call = pos + 3 < count and tokens[significant[pos + 3]].kind == TokenType.LPAREN
    yield Selector(significant[pos], significant[pos + 2], is_call)


def count_references(tokens: List[Token], name: str) -> int:
  """
  Counts selector expressions qualified by `name`.

  Args:
    tokens: The body token arena.
    name: The local package name (e.g. ``net``).

  Returns:
    int: Number of ``name.<anything>`` occurrences.
  """
  return sum(1 for selector in iter_selectors(tokens) if tokens[selector.qualifier_index].value == name)
