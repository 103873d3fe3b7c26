"""
Tests for the Go Printer.

Verifies:
1. Round-trip of canonical input.
2. gofmt layout for grouped declarations (sorting, groups, comments).
3. Rendering of mutated trees (added/removed specs, parenthesization).
4. Rejection of unprintable specs.
"""

import pytest

from go_rewriter.core.golang.nodes import ImportDecl, ImportSpec
from go_rewriter.core.golang.parser import parse_source
from go_rewriter.core.golang.printer import print_tree, render_import_decl, sort_specs

CANONICAL = """package main

import (
	"fmt"
	"net"

	netutils "k8s.io/utils/net"
)

func f() {
	fmt.Println(netutils.ParseIPSloppy("::1"), net.IPv4len)
}
"""


def test_print_canonical_roundtrip():
  assert print_tree(parse_source(CANONICAL)) == CANONICAL


def test_print_is_idempotent_on_unsorted_input():
  code = 'package p\n\nimport (\n\t"os"\n\t"fmt"\n)\n'
  once = print_tree(parse_source(code))
  assert once == 'package p\n\nimport (\n\t"fmt"\n\t"os"\n)\n'
  assert print_tree(parse_source(once)) == once


def test_render_single_declaration():
  decl = ImportDecl(groups=[[ImportSpec(path="net")]])
  assert render_import_decl(decl) == 'import "net"'

  decl = ImportDecl(groups=[[ImportSpec(path="k8s.io/utils/net", name="netutils", comment="// sloppy")]])
  assert render_import_decl(decl) == 'import netutils "k8s.io/utils/net" // sloppy'


def test_render_unparenthesized_with_two_specs_gets_parens():
  decl = ImportDecl(groups=[[ImportSpec(path="os"), ImportSpec(path="fmt")]])
  assert render_import_decl(decl) == 'import (\n\t"fmt"\n\t"os"\n)'


def test_render_empty_declarations():
  assert render_import_decl(ImportDecl(parenthesized=False)) == ""
  assert render_import_decl(ImportDecl(parenthesized=True)) == "import ()"


def test_render_aligns_trailing_comments():
  decl = ImportDecl(
    parenthesized=True,
    groups=[
      [
        ImportSpec(path="os"),
        ImportSpec(path="k8s.io/utils/net", name="netutils", comment="// ip helpers"),
        ImportSpec(path="fmt", comment="// printing"),
      ]
    ],
  )
  pad = " " * (len('netutils "k8s.io/utils/net"') - len('"fmt"') + 1)
  assert render_import_decl(decl) == (
    "import (\n"
    f'\t"fmt"{pad}// printing\n'
    '\tnetutils "k8s.io/utils/net" // ip helpers\n'
    '\t"os"\n'
    ")"
  )


def test_render_doc_comment_breaks_alignment_run():
  decl = ImportDecl(
    parenthesized=True,
    groups=[
      [
        ImportSpec(path="fmt", comment="// a"),
        ImportSpec(path="net/netip", doc=["// modern"], comment="// b"),
      ]
    ],
  )
  assert render_import_decl(decl) == 'import (\n\t"fmt" // a\n\t// modern\n\t"net/netip" // b\n)'


def test_render_doc_comments_and_footer():
  decl = ImportDecl(
    parenthesized=True,
    groups=[[ImportSpec(path="net", doc=["// stdlib"])]],
    footer=["// end"],
  )
  assert render_import_decl(decl) == 'import (\n\t// stdlib\n\t"net"\n\t// end\n)'


def test_sort_specs_drops_exact_duplicates():
  first = ImportSpec(path="net")
  specs = [ImportSpec(path="os"), first, ImportSpec(path="net"), ImportSpec(path="net", name="stdnet")]
  ordered = sort_specs(specs)
  assert [(s.path, s.name) for s in ordered] == [("net", None), ("net", "stdnet"), ("os", None)]
  assert ordered[0] is first


def test_print_removed_declaration_drops_leading():
  tree = parse_source('package p\n\nimport "net"\n\nfunc f() {}\n')
  tree.imports[0].groups = []
  assert print_tree(tree) == "package p\n\nfunc f() {}\n"


def test_print_rejects_bad_path():
  tree = parse_source('package p\n\nimport "net"\n')
  tree.imports[0].specs[0].path = 'bad"path'
  with pytest.raises(ValueError, match="Cannot print import path"):
    print_tree(tree)


def test_render_declaration_comment_on_open_line():
  decl = ImportDecl(parenthesized=True, comment="// deps", groups=[[ImportSpec(path="net")]])
  assert render_import_decl(decl) == 'import ( // deps\n\t"net"\n)'


def test_render_declaration_comment_without_specs():
  decl = ImportDecl(parenthesized=True, comment="// deps")
  assert render_import_decl(decl) == "import ( // deps\n)"


def test_print_open_line_comment_is_stable():
  code = 'package p\n\nimport ( // deps\n\t"fmt"\n\t"net"\n)\n'
  assert print_tree(parse_source(code)) == code


def test_print_keeps_crlf_line_endings():
  code = (
    "package p\r\n\r\n"
    'import (\r\n\t"os"\r\n\t"fmt" // printing\r\n\r\n\tnetutils "k8s.io/utils/net"\r\n)\r\n\r\n'
    "var x int\r\n"
  )
  out = print_tree(parse_source(code))
  assert out == (
    "package p\r\n\r\n"
    'import (\r\n\t"fmt" // printing\r\n\t"os"\r\n\r\n\tnetutils "k8s.io/utils/net"\r\n)\r\n\r\n'
    "var x int\r\n"
  )
  assert out.count("\n") == out.count("\r\n")
  assert print_tree(parse_source(out)) == out
