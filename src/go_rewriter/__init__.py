"""
go-rewriter Package.

A source-to-source rewriter for Go that replaces deprecated qualified calls with
their designated replacements and keeps the import block consistent. The bundled
rule table migrates the standard library IP parsers to their Kubernetes
"sloppy" counterparts:

* ``net.ParseIP`` -> ``netutils.ParseIPSloppy``
* ``net.ParseCIDR`` -> ``netutils.ParseCIDRSloppy``

where ``netutils`` is ``k8s.io/utils/net``.

Usage
-----

Simple String Rewrite
^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import go_rewriter
    code = 'package main\\n\\nimport "net"\\n\\nvar ip = net.ParseIP("::1")\\n'
    print(go_rewriter.rewrite(code))

Advanced Usage (Engine)
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from go_rewriter import RewriteEngine, RuntimeConfig

    engine = RewriteEngine(RuntimeConfig(local_prefix="k8s.io/kubernetes"))
    res = engine.run(code, "pkg/proxy/util.go")

    if res.success:
        print(res.code, res.changed, res.applied)
    else:
        print(f"Errors: {res.errors}")
"""

from typing import Optional

from go_rewriter.config import RuntimeConfig
from go_rewriter.core.conversion_result import ConversionResult
from go_rewriter.core.engine import RewriteEngine
from go_rewriter.core.errors import FormatError, ParseError, PrintError, RewriteError
from go_rewriter.core.rules import SLOPPY_PARSER_RULES, RewriteRule, RuleSet

__version__ = "0.1.0"


def rewrite(code: str, description: str = "<input>", config: Optional[RuntimeConfig] = None) -> str:
  """
  Rewrites a string of Go code with the bundled rule table.

  This is a high-level convenience wrapper around `RewriteEngine`. For batch
  processing use the `go-rewriter` CLI or the engine directly.

  Args:
      code (str): The Go source to rewrite.
      description (str): Label used in error messages.
      config (RuntimeConfig, optional): Runtime settings.

  Returns:
      str: The rewritten source code.

  Raises:
      RewriteError: If the input cannot be parsed or the result cannot be printed.
  """
  text, _ = RewriteEngine(config).process(code, description)
  return text


__all__ = [
  "ConversionResult",
  "FormatError",
  "ParseError",
  "PrintError",
  "RewriteEngine",
  "RewriteError",
  "RewriteRule",
  "RuleSet",
  "RuntimeConfig",
  "SLOPPY_PARSER_RULES",
  "rewrite",
  "__version__",
]
