"""
Tests for the Go Parser.

Verifies:
1. Package clause and import declaration extraction.
2. Single vs. parenthesized declarations, named/blank/dot imports.
3. Blank-line groups, doc comments, trailing comments.
4. Body preservation and bracket validation.
"""

import pytest

from go_rewriter.core.golang.parser import GoParser, parse_source


def body_text(tree):
  return "".join(t.value for t in tree.body)


def test_parse_single_import():
  tree = parse_source('package main\n\nimport "net"\n\nfunc f() {}\n')

  assert "".join(t.value for t in tree.preamble) == "package main"
  assert len(tree.imports) == 1
  decl = tree.imports[0]
  assert decl.leading == "\n\n"
  assert decl.parenthesized is False
  assert [(s.path, s.name) for s in decl.specs] == [("net", None)]
  assert body_text(tree) == "\n\nfunc f() {}\n"


def test_parse_grouped_imports_with_blank_line_groups():
  code = 'package main\n\nimport (\n\t"fmt"\n\t"net"\n\n\tutilnet "k8s.io/utils/net"\n)\n'
  decl = parse_source(code).imports[0]

  assert decl.parenthesized is True
  assert [[s.path for s in g] for g in decl.groups] == [["fmt", "net"], ["k8s.io/utils/net"]]
  assert decl.groups[1][0].name == "utilnet"


def test_parse_blank_and_dot_imports():
  code = 'package p\n\nimport (\n\t_ "embed"\n\t. "math"\n)\n'
  specs = parse_source(code).imports[0].specs
  assert [(s.name, s.path) for s in specs] == [("_", "embed"), (".", "math")]


def test_parse_comments_in_group():
  code = (
    "package p\n\n"
    "import (\n"
    "\t// Doc for fmt\n"
    '\t"fmt" // trailing\n'
    '\t"os"\n'
    "\t// dangling\n"
    ")\n"
  )
  decl = parse_source(code).imports[0]
  fmt_spec, os_spec = decl.specs

  assert fmt_spec.doc == ["// Doc for fmt"]
  assert fmt_spec.comment == "// trailing"
  assert os_spec.doc == []
  assert os_spec.comment is None
  assert decl.footer == ["// dangling"]


def test_parse_single_import_trailing_comment():
  tree = parse_source('package p\n\nimport "net" // needed\n\nvar x int\n')
  assert tree.imports[0].specs[0].comment == "// needed"
  assert body_text(tree) == "\n\nvar x int\n"


def test_parse_multiple_declarations():
  code = 'package p\n\nimport "fmt"\nimport n "net"\n\nfunc f() {}\n'
  tree = parse_source(code)
  assert len(tree.imports) == 2
  assert tree.imports[1].leading == "\n"
  assert tree.imports[1].specs[0].name == "n"


def test_parse_without_imports():
  tree = parse_source("// Package p does things.\npackage p\n\nfunc f() {}\n")
  assert tree.imports == []
  assert "".join(t.value for t in tree.preamble) == "// Package p does things.\npackage p"


def test_parse_keeps_description():
  tree = GoParser("package p\n", "pkg/p.go").parse()
  assert tree.description == "pkg/p.go"


def test_parse_missing_package_clause():
  with pytest.raises(SyntaxError, match="package"):
    parse_source('import "net"\n')


def test_parse_empty_input():
  with pytest.raises(SyntaxError):
    parse_source("")


def test_parse_unterminated_import_group():
  with pytest.raises(SyntaxError, match="Unterminated import"):
    parse_source('package p\n\nimport (\n\t"net"\n')


def test_parse_malformed_import_spec():
  with pytest.raises(SyntaxError):
    parse_source("package p\n\nimport (\n\tnet\n)\n")


def test_parse_unbalanced_body():
  with pytest.raises(SyntaxError, match="Unclosed"):
    parse_source("package p\n\nfunc f() {\n\tg()\n")


def test_parse_unexpected_closer():
  with pytest.raises(SyntaxError, match="Unbalanced"):
    parse_source("package p\n\nfunc f() }\n")


def test_parse_semicolon_between_declarations_becomes_line_break():
  tree = parse_source('package p\n\nimport "fmt"; import "os"\n\nvar x int\n')
  assert [d.specs[0].path for d in tree.imports] == ["fmt", "os"]
  assert tree.imports[1].leading == "\n"
  assert body_text(tree) == "\n\nvar x int\n"


def test_parse_trailing_semicolon_is_dropped():
  tree = parse_source('package p;\n\nimport "fmt";\n\nvar x int\n')
  assert "".join(t.value for t in tree.preamble) == "package p;"
  assert body_text(tree) == "\n\nvar x int\n"


def test_parse_semicolon_before_line_comment():
  tree = parse_source('package p\n\nimport "fmt"; // printing\n')
  assert tree.imports[0].specs[0].comment is None
  assert body_text(tree) == " // printing\n"


def test_parse_declarations_sharing_a_line_without_separator():
  with pytest.raises(SyntaxError, match="Expected ';' or newline after import declaration"):
    parse_source('package p\n\nimport "fmt" import "os"\n')


def test_parse_group_specs_without_separator():
  with pytest.raises(SyntaxError, match="Expected ';' or newline between import specs"):
    parse_source('package p\n\nimport (\n\t"fmt" "os"\n)\n')


def test_parse_group_specs_separated_by_semicolons():
  decl = parse_source('package p\n\nimport ("fmt"; "os")\n').imports[0]
  assert [s.path for s in decl.specs] == ["fmt", "os"]


def test_parse_comment_on_open_line_belongs_to_declaration():
  decl = parse_source('package p\n\nimport ( // deps\n\t"net"\n)\n').imports[0]
  assert decl.comment == "// deps"
  assert decl.specs[0].doc == []


def test_parse_detects_crlf_line_endings():
  tree = parse_source('package p\r\n\r\nimport "net" // c\r\n\r\nvar x int\r\n')
  assert tree.newline == "\r\n"
  assert tree.imports[0].leading == "\r\n\r\n"
  assert tree.imports[0].specs[0].comment == "// c"
  assert body_text(tree) == "\r\n\r\nvar x int\r\n"


def test_parse_defaults_to_lf_line_endings():
  assert parse_source('package p\n\nimport "net"\n').newline == "\n"
