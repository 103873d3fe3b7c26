"""
Tests for the PatternMatcher.
"""

import logging

from go_rewriter.core.golang.parser import parse_source
from go_rewriter.core.import_fixer.table import ImportTable
from go_rewriter.core.matcher import PatternMatcher
from go_rewriter.core.rules import SLOPPY_PARSER_RULES


def sites_for(code):
  tree = parse_source(code, "test.go")
  return tree, PatternMatcher(SLOPPY_PARSER_RULES).find_call_sites(tree)


def test_matches_both_rules_in_order():
  code = 'package p\n\nimport "net"\n\nfunc f() {\n\ta := net.ParseCIDR("x")\n\tb := net.ParseIP("y")\n}\n'
  _, sites = sites_for(code)
  assert [s.rule.source_api for s in sites] == ["net.ParseCIDR", "net.ParseIP"]
  assert (sites[0].line, sites[0].column) == (6, 7)


def test_requires_import_of_source_namespace():
  code = 'package p\n\nfunc f() {\n\tnet.ParseIP("x")\n}\n'
  _, sites = sites_for(code)
  assert sites == []


def test_resolves_aliased_source_import():
  code = 'package p\n\nimport stdnet "net"\n\nfunc f() {\n\tstdnet.ParseIP("x")\n\tnet.ParseIP("y")\n}\n'
  tree, sites = sites_for(code)
  assert len(sites) == 1
  assert tree.body[sites[0].qualifier_index].value == "stdnet"


def test_ignores_blank_and_dot_source_imports():
  code = 'package p\n\nimport (\n\t_ "net"\n\t. "net"\n)\n\nfunc f() {\n\tnet.ParseIP("x")\n\tParseIP("y")\n}\n'
  _, sites = sites_for(code)
  assert sites == []


def test_ignores_non_calls_and_other_functions():
  code = 'package p\n\nimport "net"\n\nvar fn = net.ParseIP\nvar m, _ = net.ParseMAC("x")\n'
  _, sites = sites_for(code)
  assert sites == []


def test_blocked_when_target_dot_imported(caplog):
  code = 'package p\n\nimport (\n\t"net"\n\n\t. "k8s.io/utils/net"\n)\n\nvar ip = net.ParseIP("x")\n'
  with caplog.at_level(logging.WARNING):
    _, sites = sites_for(code)
  assert sites == []
  assert "is dot-imported" in caplog.text


def test_blocked_when_alias_bound_elsewhere():
  code = 'package p\n\nimport (\n\t"net"\n\n\tnetutils "example.com/netutils"\n)\n\nvar ip = net.ParseIP("x")\n'
  tree = parse_source(code)
  matcher = PatternMatcher(SLOPPY_PARSER_RULES)
  blocked = matcher.blocked_rules(ImportTable(tree))
  assert len(blocked) == 2
  assert all("already bound to 'example.com/netutils'" in reason for reason in blocked.values())
  assert matcher.find_call_sites(tree) == []


def test_not_blocked_when_alias_bound_to_target():
  code = 'package p\n\nimport (\n\t"net"\n\n\tnetutils "k8s.io/utils/net"\n)\n\nvar ip = net.ParseIP("x")\n'
  _, sites = sites_for(code)
  assert len(sites) == 1


def test_is_referenced():
  tree = parse_source('package p\n\nvar a = net.IPv4len\n')
  assert PatternMatcher.is_referenced(tree, "net")
  assert not PatternMatcher.is_referenced(tree, "netutils")
