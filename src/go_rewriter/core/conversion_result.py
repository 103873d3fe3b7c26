"""
Data structures representing the output of the rewrite pipeline.

This module defines the `ConversionResult` Pydantic model, which encapsulates
the rewritten code, the rules that fired, any errors encountered, and the
execution trace logs.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class ConversionResult(BaseModel):
  """
  Container for the results of a single-file rewrite.
  """

  description: str = Field(default="<input>", description="Filename or label of the input.")
  code: str = Field(default="", description="The rewritten source, or the untouched input on failure.")
  changed: bool = Field(default=False, description="True if at least one call site was rewritten.")
  applied: List[str] = Field(default_factory=list, description="Source APIs of the rules that fired.")
  errors: List[str] = Field(default_factory=list, description="List of error messages encountered.")
  success: bool = Field(
    default=True,
    description="True if the pipeline completed without fatal errors.",
  )
  trace_events: List[Dict[str, Any]] = Field(default_factory=list, description="Execution trace log data.")

  @property
  def has_errors(self) -> bool:
    """
    Check if the result contains any error messages.

    Returns:
        True if one or more errors are present.
    """
    return len(self.errors) > 0
