"""
Core Package.

Contains the rewrite pipeline:
- Go frontend (lexer, parser, printer, import grouping)
- Rewrite rules, pattern matcher and rewriter
- Import table and reconciler
- Orchestrating engine and trace logger
"""
