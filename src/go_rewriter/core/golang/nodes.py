"""
Go Syntax Tree Nodes.

Defines the concrete syntax tree the rewrite pipeline operates on. Only the
import declarations are modelled structurally; everything after them is kept as
a token arena (`SyntaxTree.body`) whose entries are addressed by stable indices.
Passes mutate token values in place so every later pass observes the same state.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from go_rewriter.core.golang.tokens import Token


@dataclass(eq=False)
class ImportSpec:
  """
  A single import line.

  Attributes:
      path: The unquoted import path (e.g. "k8s.io/utils/net").
      name: The explicit local name, `_`, `.` or None when implicit.
      doc: Comment lines written directly above the spec.
      comment: Trailing line comment on the same line, if any.
  """

  path: str
  name: Optional[str] = None
  doc: List[str] = field(default_factory=list)
  comment: Optional[str] = None

  def __str__(self) -> str:
    quoted = f'"{self.path}"'
    return f"{self.name} {quoted}" if self.name else quoted

  @property
  def sort_key(self):
    return (self.path, self.name or "")


@dataclass(eq=False)
class ImportDecl:
  """
  An `import` declaration, either `import "p"` or `import ( ... )`.

  Attributes:
      leading: Raw text between the previous element and the `import` keyword.
      parenthesized: True for the grouped form.
      groups: Blank-line separated runs of specs.
      footer: Comments dangling before the closing parenthesis.
      comment: Line comment written after the opening parenthesis.
  """

  leading: str = "\n\n"
  parenthesized: bool = False
  groups: List[List[ImportSpec]] = field(default_factory=list)
  footer: List[str] = field(default_factory=list)
  comment: Optional[str] = None

  @property
  def specs(self) -> List[ImportSpec]:
    return [spec for group in self.groups for spec in group]

  def is_empty(self) -> bool:
    return not any(self.groups)

  def has_comments(self) -> bool:
    return bool(self.comment or self.footer)

  def remove(self, spec: ImportSpec) -> None:
    for group in self.groups:
      if spec in group:
        group.remove(spec)
    self.groups = [group for group in self.groups if group]


@dataclass
class SyntaxTree:
  """
  Root node for a single Go source file.

  Attributes:
      description: Filename or label used for diagnostics.
      preamble: Tokens up to and including the package clause.
      imports: The file's import declarations in source order.
      body: Token arena for everything after the import declarations.
      newline: Line terminator of the source (LF or CRLF).
  """

  description: str
  preamble: List[Token] = field(default_factory=list)
  imports: List[ImportDecl] = field(default_factory=list)
  body: List[Token] = field(default_factory=list)
  newline: str = "\n"

  def import_specs(self) -> Iterator[ImportSpec]:
    for decl in self.imports:
      yield from decl.specs
