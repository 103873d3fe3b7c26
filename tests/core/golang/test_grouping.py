"""
Tests for the goimports-style grouping pass.
"""

import pytest

from go_rewriter.core.golang.grouping import (
  LOCAL_CLASS,
  STDLIB_CLASS,
  THIRD_PARTY_CLASS,
  format_imports,
  import_class,
)


@pytest.mark.parametrize(
  "path, local_prefix, expected",
  [
    ("net", None, STDLIB_CLASS),
    ("net/http", None, STDLIB_CLASS),
    ("k8s.io/utils/net", None, THIRD_PARTY_CLASS),
    ("github.com/google/go-cmp/cmp", None, THIRD_PARTY_CLASS),
    ("k8s.io/kubernetes/pkg/proxy", "k8s.io/kubernetes", LOCAL_CLASS),
    ("k8s.io/kubernetes", "k8s.io/kubernetes", LOCAL_CLASS),
    ("k8s.io/kubernetes-extra/pkg", "k8s.io/kubernetes", THIRD_PARTY_CLASS),
    ("k8s.io/utils/net", "k8s.io/kubernetes", THIRD_PARTY_CLASS),
  ],
)
def test_import_class(path, local_prefix, expected):
  assert import_class(path, local_prefix) == expected


def test_mixed_group_is_split():
  code = 'package p\n\nimport (\n\tnetutils "k8s.io/utils/net"\n\t"net"\n\t"fmt"\n)\n'
  expected = 'package p\n\nimport (\n\t"fmt"\n\t"net"\n\n\tnetutils "k8s.io/utils/net"\n)\n'
  assert format_imports(code) == expected


def test_local_prefix_gets_own_group():
  code = (
    "package p\n\n"
    "import (\n"
    '\t"k8s.io/kubernetes/pkg/proxy"\n'
    '\tnetutils "k8s.io/utils/net"\n'
    '\t"net"\n'
    ")\n"
  )
  expected = (
    "package p\n\n"
    "import (\n"
    '\t"net"\n\n'
    '\tnetutils "k8s.io/utils/net"\n\n'
    '\t"k8s.io/kubernetes/pkg/proxy"\n'
    ")\n"
  )
  assert format_imports(code, local_prefix="k8s.io/kubernetes") == expected


def test_existing_groups_are_not_merged():
  code = 'package p\n\nimport (\n\t"os"\n\n\t"fmt"\n)\n'
  assert format_imports(code) == code


def test_single_spec_declaration_is_untouched():
  code = 'package p\n\nimport "net"\n\nvar _ = net.IPv4len\n'
  assert format_imports(code) == code


def test_grouping_is_idempotent():
  code = 'package p\n\nimport (\n\t"k8s.io/utils/net"\n\t"os"\n)\n'
  once = format_imports(code)
  assert format_imports(once) == once


def test_unparsable_text_raises():
  with pytest.raises(SyntaxError):
    format_imports("not go")
