"""Application-level query result representation."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class QueryStatus(str, Enum):
  SUCCESS = 'success'
  ERROR = 'error'


@dataclass
class QueryResult:
  status: QueryStatus
  target: str
  rows: List[Dict[str, Any]] = field(default_factory=list)
  metadata: Dict[str, Any] = field(default_factory=dict)
  execution_time: float = 0.0
  timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
  error: Optional[str] = None

  @property
  def row_count(self) -> int:
    return len(self.rows)
