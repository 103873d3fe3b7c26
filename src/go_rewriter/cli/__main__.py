"""
Main Entry Point for go-rewriter CLI.

This module handles argument parsing and dispatches to the command handlers in
`go_rewriter.cli.handlers`.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from go_rewriter import __version__
from go_rewriter.cli.handlers.fix import handle_fix
from go_rewriter.cli.handlers.rules import handle_rules
from go_rewriter.utils.console import set_verbose


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="go-rewriter: rewrite deprecated Go calls and fix imports")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline debug messages")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: FIX ---
  cmd_fix = subparsers.add_parser("fix", help="Rewrite a Go file or every Go file under a directory")
  cmd_fix.add_argument("path", type=Path, help="Input Go file or directory")
  cmd_fix.add_argument("-w", "--write", action="store_true", help="Write results back to the source files")
  cmd_fix.add_argument("-d", "--diff", action="store_true", help="Print unified diffs of the changes")
  cmd_fix.add_argument("--check", action="store_true", help="Exit with status 1 if any file would change")
  cmd_fix.add_argument(
    "--no-group-imports",
    dest="group_imports",
    action="store_false",
    default=None,
    help="Skip the import grouping pass (Overrides config)",
  )
  cmd_fix.add_argument("--local", dest="local_prefix", default=None, help="Import prefix grouped after third party")
  cmd_fix.add_argument(
    "--json-trace", type=Path, default=None, help="Dump the execution trace of every file to a JSON file."
  )

  # --- Command: RULES ---
  subparsers.add_parser("rules", help="Show the rewrite rule table")

  args = parser.parse_args(argv)
  set_verbose(args.verbose)

  if args.command == "fix":
    return handle_fix(
      args.path,
      write=args.write,
      show_diff=args.diff,
      check=args.check,
      group_imports=args.group_imports,
      local_prefix=args.local_prefix,
      json_trace_path=args.json_trace,
    )

  elif args.command == "rules":
    return handle_rules()

  return 1


if __name__ == "__main__":
  raise SystemExit(main())
