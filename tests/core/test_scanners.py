"""
Tests for selector scanning over the body token arena.
"""

from go_rewriter.core.golang.parser import parse_source
from go_rewriter.core.scanners import count_references, iter_selectors


def selectors(body_code):
  tree = parse_source("package p\n\n" + body_code)
  tokens = tree.body
  return [(tokens[s.qualifier_index].value, tokens[s.name_index].value, s.is_call) for s in iter_selectors(tokens)]


def test_finds_calls_and_non_calls():
  found = selectors('func f() {\n\tip := net.ParseIP("::1")\n\tvar a net.Addr\n}\n')
  assert found == [("net", "ParseIP", True), ("net", "Addr", False)]


def test_call_with_whitespace_and_comments():
  found = selectors("var x = net. /* c */ ParseIP (s)\n")
  assert found == [("net", "ParseIP", True)]


def test_skips_nested_field_access():
  found = selectors("var x = cfg.net.ParseIP(s)\n")
  assert found == [("cfg", "net", False)]


def test_ignores_strings_and_comments():
  found = selectors('// net.ParseIP(x)\nvar s = "net.ParseIP(x)"\n')
  assert found == []


def test_ignores_float_literals():
  found = selectors("var x = 1.5\n")
  assert found == []


def test_count_references():
  tree = parse_source("package p\n\nvar a = net.IPv4len + net.IPv6len + utilnet.X\n")
  assert count_references(tree.body, "net") == 2
  assert count_references(tree.body, "utilnet") == 1
  assert count_references(tree.body, "netutils") == 0
