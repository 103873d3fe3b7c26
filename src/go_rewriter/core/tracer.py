"""
Rewrite Trace Logger.

This module provides the infrastructure to record the step-by-step execution
of a rewrite run. It captures:
1. Lifecycle Phases (Parsing, Matching, Rewriting, Reconciling, Printing).
2. Call Site Rewrites (`net.ParseIP` -> `netutils.ParseIPSloppy` at file:line:col).
3. Import Actions (added, renamed, merged, removed).

The output is a structured list of Event Log dictionaries suitable for JSON
serialization. Each engine run owns its own logger, so parallel runs never share
event state.
"""

import time
import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TraceEventType(str, Enum):
  PHASE_START = "phase_start"
  PHASE_END = "phase_end"
  CALL_REWRITE = "call_rewrite"
  IMPORT_ACTION = "import_action"
  WARNING = "warning"


@dataclass
class TraceEvent:
  id: str
  type: TraceEventType
  timestamp: float
  description: str
  parent_id: Optional[str] = None
  metadata: Dict[str, Any] = field(default_factory=dict)


class TraceLogger:
  """
  Records rewrite events for diagnostics and `--json-trace` output.
  """

  def __init__(self):
    self._events: List[TraceEvent] = []
    self._active_phases: List[str] = []  # Stack of phase IDs

  def start_phase(self, name: str, description: str = "") -> str:
    """Starts a nested phase (e.g., 'Rewrite'). Returns Phase ID."""
    phase_id = str(uuid.uuid4())
    parent = self._active_phases[-1] if self._active_phases else None

    self._events.append(
      TraceEvent(
        id=phase_id,
        type=TraceEventType.PHASE_START,
        timestamp=time.time(),
        description=name,
        parent_id=parent,
        metadata={"detail": description},
      )
    )
    self._active_phases.append(phase_id)
    return phase_id

  def end_phase(self):
    """Ends the current active phase."""
    if not self._active_phases:
      return

    phase_id = self._active_phases.pop()
    self._events.append(
      TraceEvent(
        id=str(uuid.uuid4()),
        type=TraceEventType.PHASE_END,
        timestamp=time.time(),
        description="End Phase",
        parent_id=phase_id,
      )
    )

  def unwind(self, phase_id: str):
    """Ends every phase down to and including `phase_id`."""
    while phase_id in self._active_phases:
      self.end_phase()

  def log_match(self, source_api: str, target_api: str, location: str):
    """Logs a rewritten call site."""
    self._log_simple(
      TraceEventType.CALL_REWRITE,
      f"Rewrote {source_api} -> {target_api}",
      {"source": source_api, "target": target_api, "location": location},
    )

  def log_import(self, action: str, path: str, detail: str = ""):
    """Logs an import table change (add, rename, merge, remove)."""
    self._log_simple(TraceEventType.IMPORT_ACTION, f"{action} {path}", {"action": action, "path": path, "detail": detail})

  def log_warning(self, message: str):
    self._log_simple(TraceEventType.WARNING, message, {"level": "warning"})

  def _log_simple(self, evt_type: TraceEventType, desc: str, meta: Dict[str, Any]):
    parent = self._active_phases[-1] if self._active_phases else None
    self._events.append(
      TraceEvent(
        id=str(uuid.uuid4()), type=evt_type, timestamp=time.time(), description=desc, parent_id=parent, metadata=meta
      )
    )

  def export(self) -> List[Dict[str, Any]]:
    """Returns list of dicts for JSON serialization."""
    return [asdict(e) for e in self._events]
