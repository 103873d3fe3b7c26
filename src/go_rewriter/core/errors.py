"""
Pipeline Error Types.

Every stage of the per-file pipeline fails with one of these exceptions. They
carry the file description and the underlying cause so the driver can report
the failure and move on to the next file. None of them is retried.
"""

from typing import Optional


class RewriteError(Exception):
  """
  Base class for per-file pipeline failures.

  Attributes:
      description: Filename or label of the input.
      cause: The underlying exception, if any.
  """

  stage = "rewrite"

  def __init__(self, description: str, cause: Optional[BaseException] = None):
    self.description = description
    self.cause = cause
    detail = f": {cause}" if cause is not None else ""
    super().__init__(f"{self.stage} error in {description}{detail}")


class ParseError(RewriteError):
  """Malformed input syntax. No rewrite is attempted."""

  stage = "parse"


class PrintError(RewriteError):
  """A mutated tree could not be serialized. Signals an internal invariant violation."""

  stage = "print"


class FormatError(RewriteError):
  """The import grouping post-pass failed."""

  stage = "format"
