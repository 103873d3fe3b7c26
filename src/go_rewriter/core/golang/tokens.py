"""
Go Tokenizer Definition.

Provides a Regex-based Lexer (`GoLexer`) that decomposes raw Go source into a
loss-less stream of typed `Token` objects. Whitespace, newlines and comments are
emitted as tokens too, so concatenating every token value reproduces the input
byte for byte.

The lexer only distinguishes what the rewriter needs: identifiers, string
literals (used by import paths), the selector dot, brackets and comments.
Everything else is classified as an `OPERATOR` or `NUMBER` run.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generator


class TokenType(Enum):
  """Enumeration of Go token types."""

  # Trivia
  WHITESPACE = auto()  # spaces, tabs, carriage returns
  NEWLINE = auto()  # \n
  COMMENT = auto()  # // line or /* block */

  # Literals
  STRING = auto()  # "interpreted" or `raw`
  RUNE = auto()  # 'x'
  NUMBER = auto()  # 42, 0x1F, 1.5e-3

  # Names
  IDENTIFIER = auto()  # net, ParseIP, import, func

  # Punctuation
  DOT = auto()  # .
  ELLIPSIS = auto()  # ...
  LPAREN = auto()  # (
  RPAREN = auto()  # )
  LBRACE = auto()  # {
  RBRACE = auto()  # }
  LBRACKET = auto()  # [
  RBRACKET = auto()  # ]
  SEMICOLON = auto()  # ;
  OPERATOR = auto()  # := + - * & | ...


TRIVIA = frozenset({TokenType.WHITESPACE, TokenType.NEWLINE, TokenType.COMMENT})


@dataclass
class Token:
  """
  Represents a lexical unit.

  Attributes:
      kind: The type of token (e.g., IDENTIFIER, STRING).
      value: The raw string value. Mutable: the rewriter edits it in place.
      line: Line number in source (1-based).
      column: Column number in source (1-based).
  """

  kind: TokenType
  value: str
  line: int
  column: int

  @property
  def is_trivia(self) -> bool:
    return self.kind in TRIVIA


class GoLexer:
  """
  Regex-based Lexer for Go source files.
  """

  # Compiled Regex Patterns (Order matters for priority)
  PATTERNS = [
    (TokenType.NEWLINE, r"\n"),
    (TokenType.WHITESPACE, r"[ \t\r\f\v]+"),
    (TokenType.COMMENT, r"//[^\r\n]*"),
    (TokenType.COMMENT, r"/\*.*?\*/"),
    (TokenType.STRING, r'"(?:[^"\\\n]|\\.)*"'),
    (TokenType.STRING, r"`[^`]*`"),
    (TokenType.RUNE, r"'(?:[^'\\\n]|\\.)+'"),
    # Must come before DOT so that `.5` is a number, not a selector
    (TokenType.NUMBER, r"(?:\d|\.\d)(?:[eEpP][+-]|[\w.])*"),
    (TokenType.ELLIPSIS, r"\.\.\."),
    (TokenType.DOT, r"\."),
    (TokenType.IDENTIFIER, r"[^\W\d]\w*"),
    (TokenType.LPAREN, r"\("),
    (TokenType.RPAREN, r"\)"),
    (TokenType.LBRACE, r"\{"),
    (TokenType.RBRACE, r"\}"),
    (TokenType.LBRACKET, r"\["),
    (TokenType.RBRACKET, r"\]"),
    (TokenType.SEMICOLON, r";"),
    (TokenType.OPERATOR, r"<<=|>>=|&\^=|&&|\|\||<-|\+\+|--|==|!=|<=|>=|:=|<<|>>|&\^|[-+*/%&|^]=|[-+*/%&|^<>=!:,~]"),
  ]

  def __init__(self) -> None:
    """Initializes the lexer with compiled patterns."""
    self.regex_pairs = [(kind, re.compile(pattern, re.DOTALL)) for kind, pattern in self.PATTERNS]

  def tokenize(self, text: str) -> Generator[Token, None, None]:
    """
    Tokenizes the input string.

    Args:
        text: Raw Go source code.

    Yields:
        Token objects, trivia included.

    Raises:
        SyntaxError: If an unterminated literal/comment or an unrecognized
            character is encountered.
    """
    pos = 0
    line_num = 1
    line_start = 0
    length = len(text)

    while pos < length:
      # Otherwise `/*` would silently lex as two operators
      if text.startswith("/*", pos) and text.find("*/", pos + 2) < 0:
        raise SyntaxError(f"Unterminated comment at line {line_num}, col {pos - line_start + 1}")

      for kind, regex in self.regex_pairs:
        match = regex.match(text, pos)
        if match:
          val = match.group(0)
          yield Token(kind, val, line_num, pos - line_start + 1)

          newlines = val.count("\n")
          if newlines:
            line_num += newlines
            line_start = pos + val.rfind("\n") + 1
          pos += len(val)
          break
      else:
        column = pos - line_start + 1
        snippet = text[pos : min(pos + 10, length)]
        if snippet.startswith(("/*", '"', "`", "'")):
          raise SyntaxError(f"Unterminated literal or comment at line {line_num}, col {column}: '{snippet}...'")
        raise SyntaxError(f"Illegal character at line {line_num}, col {column}: '{snippet}...'")
