"""
Go Parser Implementation.

This module provides the `GoParser`, a recursive descent parser that converts the
token stream from `GoLexer` into a `SyntaxTree`.

Capabilities:
- Parses the package clause (kept verbatim as the preamble).
- Parses single (`import "fmt"`) and grouped (`import ( ... )`) declarations,
  including named, blank (`_`) and dot imports, doc comments, trailing line
  comments and blank-line separated groups.
- Keeps the remainder of the file as a loss-less token arena, verified for
  balanced brackets.
"""

from typing import List, Optional

from go_rewriter.core.golang.nodes import ImportDecl, ImportSpec, SyntaxTree
from go_rewriter.core.golang.tokens import GoLexer, Token, TokenType

_CLOSERS = {
  TokenType.RPAREN: TokenType.LPAREN,
  TokenType.RBRACE: TokenType.LBRACE,
  TokenType.RBRACKET: TokenType.LBRACKET,
}
_OPENERS = set(_CLOSERS.values())


class GoParser:
  """
  Recursive descent parser for the import section of a Go file.
  """

  def __init__(self, code: str, description: str = "<input>"):
    """
    Initialize the parser.

    Args:
        code: The raw Go source string.
        description: Filename or label carried by the resulting tree.

    Raises:
        SyntaxError: If the source cannot be tokenized.
    """
    self.description = description
    self.lexer = GoLexer()
    self.tokens = list(self.lexer.tokenize(code))
    self.pos = 0
    first_break = code.find("\n")
    self.newline = "\r\n" if first_break > 0 and code[first_break - 1] == "\r" else "\n"

  def parse(self) -> SyntaxTree:
    """
    Parses the entire file.

    Returns:
        The populated SyntaxTree.

    Raises:
        SyntaxError: On a missing package clause, malformed imports or
            unbalanced brackets.
    """
    tree = SyntaxTree(description=self.description, newline=self.newline)

    self._parse_package_clause()
    tree.preamble = self.tokens[: self.pos]

    while True:
      start = self.pos
      self._skip_trivia()
      token = self._peek()
      if token is None or token.kind != TokenType.IDENTIFIER or token.value != "import":
        self.pos = start
        break
      leading = "".join(t.value for t in self.tokens[start : self.pos])
      self._consume()
      tree.imports.append(self._parse_import_decl(leading))

    tree.body = self.tokens[self.pos :]
    self._check_brackets(tree.body)
    return tree

  # --- Recursive Descent Implementation ---

  def _peek(self, offset: int = 0) -> Optional[Token]:
    """Looks ahead at the pending token."""
    if self.pos + offset < len(self.tokens):
      return self.tokens[self.pos + offset]
    return None

  def _consume(self, kind: Optional[TokenType] = None) -> Token:
    """
    Consumes the current token.

    Args:
        kind: If provided, enforces that the current token matches this type.

    Raises:
        SyntaxError: If end of file or type mismatch.
    """
    token = self._peek()
    if not token:
      raise SyntaxError("Unexpected End of File.")

    if kind and token.kind != kind:
      raise SyntaxError(f"Expected {kind.name}, got {token.kind.name} ('{token.value}') at line {token.line}")

    self.pos += 1
    return token

  def _skip_trivia(self, newlines: bool = True) -> None:
    while True:
      token = self._peek()
      if token is None or not token.is_trivia:
        return
      if token.kind == TokenType.NEWLINE and not newlines:
        return
      if token.kind == TokenType.COMMENT and not newlines:
        return
      self.pos += 1

  def _parse_package_clause(self) -> None:
    self._skip_trivia()
    keyword = self._consume(TokenType.IDENTIFIER)
    if keyword.value != "package":
      raise SyntaxError(f"Expected 'package' clause, got '{keyword.value}' at line {keyword.line}")
    self._skip_trivia(newlines=False)
    self._consume(TokenType.IDENTIFIER)
    mark = self.pos
    self._skip_trivia(newlines=False)
    token = self._peek()
    if token is not None and token.kind == TokenType.SEMICOLON:
      self._consume()
    else:
      self.pos = mark

  def _parse_import_decl(self, leading: str) -> ImportDecl:
    """Parses the declaration following an `import` keyword."""
    decl = ImportDecl(leading=leading)
    self._skip_trivia()

    token = self._peek()
    if token is not None and token.kind == TokenType.LPAREN:
      self._consume()
      decl.parenthesized = True
      self._parse_group_body(decl)
      self._end_declaration()
      return decl

    spec = self._parse_spec()
    # A comment on the same line belongs to the spec
    mark = self.pos
    self._skip_trivia(newlines=False)
    token = self._peek()
    if token is not None and token.kind == TokenType.COMMENT and "\n" not in token.value:
      spec.comment = self._consume().value
    else:
      self.pos = mark
    decl.groups = [[spec]]
    self._end_declaration()
    return decl

  def _end_declaration(self) -> None:
    """
    Checks what follows a declaration on its last line.

    Only a comment, a newline or a `;` may follow. A `;` is turned into a line
    break (dropping the blanks after it) so whatever comes next starts on its
    own line once the declaration is re-rendered.

    Raises:
        SyntaxError: If anything else shares the line.
    """
    offset = 0
    while True:
      token = self._peek(offset)
      if token is None or token.kind == TokenType.NEWLINE:
        return
      if token.kind == TokenType.WHITESPACE:
        offset += 1
        continue
      if token.kind == TokenType.COMMENT:
        if token.value.startswith("//") or "\n" in token.value:
          return
        offset += 1
        continue
      if token.kind == TokenType.SEMICOLON:
        index = self.pos + offset
        start = index
        while start > self.pos and self.tokens[start - 1].kind == TokenType.WHITESPACE:
          start -= 1
        end = index + 1
        while end < len(self.tokens) and self.tokens[end].kind == TokenType.WHITESPACE:
          end += 1
        after = self._peek(end - self.pos)
        if after is None or after.kind == TokenType.NEWLINE:
          # Keeps a carriage return before the line break
          self.tokens[start : index + 1] = []
        elif after.kind == TokenType.COMMENT and after.value.startswith("//"):
          self.tokens[start:end] = [Token(TokenType.WHITESPACE, " ", token.line, token.column)]
        else:
          self.tokens[start:end] = [Token(TokenType.NEWLINE, self.newline, token.line, token.column)]
        return
      raise SyntaxError(f"Expected ';' or newline after import declaration, got '{token.value}' at line {token.line}")

  def _parse_group_body(self, decl: ImportDecl) -> None:
    """Parses specs up to the closing parenthesis of a grouped declaration."""
    groups: List[List[ImportSpec]] = [[]]
    pending_doc: List[str] = []
    last_spec: Optional[ImportSpec] = None
    on_spec_line = False
    on_open_line = True
    separated = True
    break_pending = False
    newlines = 0

    while True:
      token = self._peek()
      if token is None:
        raise SyntaxError("Unterminated import declaration.")

      if token.kind == TokenType.WHITESPACE:
        self._consume()
        continue

      if token.kind == TokenType.SEMICOLON:
        self._consume()
        separated = True
        continue

      if token.kind == TokenType.NEWLINE:
        self._consume()
        newlines += 1
        on_spec_line = False
        on_open_line = False
        separated = True
        continue

      if token.kind == TokenType.RPAREN:
        self._consume()
        break

      if newlines >= 2 and groups[-1] and not pending_doc:
        break_pending = True

      if token.kind == TokenType.COMMENT:
        self._consume()
        if "\n" in token.value:
          separated = True
        if on_open_line and last_spec is None and "\n" not in token.value and decl.comment is None:
          decl.comment = token.value
        elif last_spec is not None and on_spec_line and "\n" not in token.value:
          last_spec.comment = token.value
        else:
          pending_doc.append(token.value)
        newlines = 0
        continue

      if not separated:
        raise SyntaxError(f"Expected ';' or newline between import specs at line {token.line}, col {token.column}")

      spec = self._parse_spec()
      separated = False
      spec.doc = pending_doc
      pending_doc = []
      if break_pending:
        groups.append([])
        break_pending = False
      groups[-1].append(spec)
      last_spec = spec
      on_spec_line = True
      newlines = 0

    decl.groups = [group for group in groups if group]
    decl.footer = pending_doc

  def _parse_spec(self) -> ImportSpec:
    """Parses `[name] "path"`."""
    name = None
    token = self._peek()
    if token is not None and token.kind in (TokenType.IDENTIFIER, TokenType.DOT):
      name = self._consume().value
      self._skip_trivia(newlines=False)

    path_token = self._consume(TokenType.STRING)
    return ImportSpec(path=path_token.value[1:-1], name=name)

  @staticmethod
  def _check_brackets(tokens: List[Token]) -> None:
    stack: List[Token] = []
    for token in tokens:
      if token.kind in _OPENERS:
        stack.append(token)
      elif token.kind in _CLOSERS:
        if not stack or stack[-1].kind != _CLOSERS[token.kind]:
          raise SyntaxError(f"Unbalanced '{token.value}' at line {token.line}, col {token.column}")
        stack.pop()
    if stack:
      token = stack[-1]
      raise SyntaxError(f"Unclosed '{token.value}' at line {token.line}, col {token.column}")


def parse_source(code: str, description: str = "<input>") -> SyntaxTree:
  """
  Convenience wrapper around `GoParser`.

  Args:
      code: Go source text.
      description: Label used in diagnostics.

  Returns:
      The parsed tree.
  """
  return GoParser(code, description).parse()
