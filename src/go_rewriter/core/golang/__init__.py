"""
Go Frontend.

Concrete-syntax components used by the rewrite engine: the lexer, the parser that
models import declarations, the canonical printer and the import grouping pass.
"""

from go_rewriter.core.golang.grouping import format_imports, import_class, regroup
from go_rewriter.core.golang.nodes import ImportDecl, ImportSpec, SyntaxTree
from go_rewriter.core.golang.parser import GoParser, parse_source
from go_rewriter.core.golang.printer import print_tree, render_import_decl
from go_rewriter.core.golang.tokens import GoLexer, Token, TokenType

__all__ = [
  "GoLexer",
  "GoParser",
  "ImportDecl",
  "ImportSpec",
  "SyntaxTree",
  "Token",
  "TokenType",
  "format_imports",
  "import_class",
  "parse_source",
  "print_tree",
  "regroup",
  "render_import_decl",
]
