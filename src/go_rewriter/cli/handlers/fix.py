"""
Fix Command Handler.

This module implements the logic for the `go-rewriter fix` command.
It orchestrates:
1. Configuration loading (pyproject.toml + CLI overrides).
2. File discovery (single file or recursive directory walk).
3. The per-file rewrite pipeline via the Engine.
4. Output: rewritten text, unified diffs, in-place writes and trace logging.

Each file is independent: a failure is reported and the walk continues.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.table import Table

from go_rewriter.config import RuntimeConfig
from go_rewriter.core.conversion_result import ConversionResult
from go_rewriter.core.engine import RewriteEngine
from go_rewriter.utils.console import console, log_error, log_info, log_success, log_warning
from go_rewriter.utils.diff import unified_diff


def handle_fix(
  input_path: Path,
  write: bool = False,
  show_diff: bool = False,
  check: bool = False,
  group_imports: Optional[bool] = None,
  local_prefix: Optional[str] = None,
  json_trace_path: Optional[Path] = None,
) -> int:
  """
  Handles the 'fix' command execution.

  Args:
      input_path: Go file or directory to process.
      write: If True, rewritten files are saved in place.
      show_diff: If True, unified diffs are printed for changed files.
      check: If True, exit with 1 when any file would change.
      group_imports: Override for the import grouping pass.
      local_prefix: Override for the local import group prefix.
      json_trace_path: Optional path to dump execution traces as JSON.

  Returns:
      int: Exit code (0 for success, 1 for failure or pending changes in check mode).
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  config = RuntimeConfig.load(
    group_imports=group_imports,
    local_prefix=local_prefix,
    search_path=input_path if input_path.is_dir() else input_path.parent,
  )
  engine = RewriteEngine(config)

  files = collect_files(input_path, config)
  if not files:
    log_warning(f"No {'/'.join(config.extensions)} files found in {input_path}")
    return 0

  if input_path.is_dir():
    log_info(f"Processing {len(files)} files from [path]{input_path}[/path]...")

  print_code = input_path.is_file() and not (write or show_diff or check)
  results: Dict[str, ConversionResult] = {}
  originals: Dict[str, str] = {}

  for path in files:
    try:
      with open(path, "rt", encoding="utf-8") as f:
        code = f.read()
    except (OSError, UnicodeDecodeError) as e:
      log_error(f"Failed to read {path}: {e}")
      results[str(path)] = ConversionResult(description=str(path), success=False, errors=[f"read error: {e}"])
      originals[str(path)] = ""
      continue

    result = engine.run(code, str(path))
    results[str(path)] = result
    originals[str(path)] = code

    if not result.success:
      for error in result.errors:
        log_error(error)
      continue

    if show_diff:
      sys.stdout.write(unified_diff(str(path), code, result.code))
    if print_code:
      sys.stdout.write(result.code)
    if write and result.code != code:
      with open(path, "wt", encoding="utf-8") as f:
        f.write(result.code)
      log_success(f"Rewrote [path]{path}[/path] ({', '.join(result.applied) or 'formatting'})")

  if json_trace_path:
    _dump_traces(json_trace_path, results)

  if input_path.is_dir():
    _print_batch_summary(results, originals)

  failed = any(not r.success for r in results.values())
  pending = check and any(r.success and r.code != originals[name] for name, r in results.items())
  if pending:
    for name, r in results.items():
      if r.success and r.code != originals[name]:
        log_warning(f"Would rewrite [path]{name}[/path]")
  return 1 if failed or pending else 0


def collect_files(root: Path, config: RuntimeConfig) -> List[Path]:
  """
  Lists the files the driver should process.

  Args:
      root: A file or directory.
      config: Supplies extensions and excluded directory names.

  Returns:
      List[Path]: Sorted file paths. A single file is returned as-is.
  """
  if root.is_file():
    return [root]

  excluded = set(config.exclude_dirs)
  found = []
  for path in root.rglob("*"):
    if not path.is_file() or path.suffix not in config.extensions:
      continue
    if excluded.intersection(path.relative_to(root).parts[:-1]):
      continue
    found.append(path)
  return sorted(found)


def _dump_traces(json_trace_path: Path, results: Dict[str, ConversionResult]) -> None:
  payload: List[Dict[str, Any]] = [{"file": name, "events": r.trace_events} for name, r in results.items()]
  json_trace_path.parent.mkdir(parents=True, exist_ok=True)
  with open(json_trace_path, "wt", encoding="utf-8") as f:
    json.dump(payload, f, indent=2)
  log_info(f"Trace saved to [path]{json_trace_path}[/path]")


def _print_batch_summary(results: Dict[str, ConversionResult], originals: Dict[str, str]) -> None:
  """
  Renders a summary table of rewrite results to the console.

  Args:
      results: Dictionary mapping filenames to rewrite results.
      originals: Dictionary mapping filenames to their input text.
  """
  total = len(results)
  failures = {name: r for name, r in results.items() if not r.success}
  changed = [name for name, r in results.items() if r.success and r.code != originals[name]]

  if not failures:
    log_success(f"Batch Complete: {len(changed)}/{total} files rewritten.")
    return

  table = Table(title="Rewrite Report")
  table.add_column("File", style="cyan")
  table.add_column("Issues", style="red")

  for filename, res in failures.items():
    table.add_row(filename, "; ".join(res.errors) if res.errors else "Unknown Error")

  console.print(table)
  console.print(f"\n[bold]Summary:[/bold] {total - len(failures)} Processed, {len(failures)} Failed.")
