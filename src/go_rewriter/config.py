"""
Runtime Configuration Store.

Settings are read from the ``[tool.go_rewriter]`` table of the nearest
``pyproject.toml`` and overridden by explicit (CLI) arguments:

.. code-block:: toml

    [tool.go_rewriter]
    group_imports = true
    local_prefix = "k8s.io/kubernetes"
    exclude_dirs = ["vendor", "third_party"]
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the rewrite engine and driver.
  """

  group_imports: bool = Field(True, description="Run the goimports-style grouping pass after printing.")
  local_prefix: Optional[str] = Field(
    None, description="Import path prefix placed in its own trailing group (like goimports -local)."
  )
  extensions: List[str] = Field(default_factory=lambda: [".go"], description="File suffixes processed by the driver.")
  exclude_dirs: List[str] = Field(
    default_factory=lambda: ["vendor", "testdata", ".git"],
    description="Directory names skipped when walking a tree.",
  )

  @field_validator("extensions")
  @classmethod
  def validate_extensions(cls, v: List[str]) -> List[str]:
    """
    Normalizes suffixes to the ``.ext`` form.

    Args:
        v (List[str]): Raw suffix list (e.g. ["go", ".go"]).

    Returns:
        List[str]: Deduplicated suffixes with a leading dot.

    Raises:
        ValueError: If the list is empty.
    """
    cleaned = [s.strip() if s.strip().startswith(".") else f".{s.strip()}" for s in v if s.strip()]
    if not cleaned:
      raise ValueError("At least one file extension is required.")
    return list(dict.fromkeys(cleaned))

  @field_validator("local_prefix")
  @classmethod
  def validate_local_prefix(cls, v: Optional[str]) -> Optional[str]:
    if v is None:
      return None
    v_clean = v.strip().rstrip("/")
    return v_clean or None

  @classmethod
  def load(
    cls,
    group_imports: Optional[bool] = None,
    local_prefix: Optional[str] = None,
    exclude_dirs: Optional[List[str]] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        group_imports (Optional[bool]): Override for the grouping pass.
        local_prefix (Optional[str]): Override for the local import prefix.
        exclude_dirs (Optional[List[str]]): Override for skipped directories.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    settings: Dict[str, Any] = dict(toml_config)
    if group_imports is not None:
      settings["group_imports"] = group_imports
    if local_prefix is not None:
      settings["local_prefix"] = local_prefix
    if exclude_dirs is not None:
      settings["exclude_dirs"] = exclude_dirs

    known = set(cls.model_fields)
    unknown = sorted(set(settings) - known)
    if unknown:
      logger.warning("Ignoring unknown [tool.go_rewriter] keys: %s", ", ".join(unknown))

    return cls(**{k: v for k, v in settings.items() if k in known})


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the start directory and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Could not read %s: %s", toml_path, e)
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("go_rewriter", {}), parent

  return {}, None
