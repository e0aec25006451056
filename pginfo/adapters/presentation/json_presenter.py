"""JSON presenter implementation."""
from __future__ import annotations

import json

from pginfo.application.queries.query_result import QueryResult
from pginfo.ports.input.result_presenter import ResultPresenter


class JsonPresenter(ResultPresenter):
  def present(self, result: QueryResult) -> str:
    payload = {
      'status': result.status.value,
      'target': result.target,
      'scope': result.metadata,
      'row_count': result.row_count,
      'rows': result.rows,
      'execution_time': result.execution_time,
      'timestamp': result.timestamp.isoformat(),
      'error': result.error,
    }
    # catalog rows may hold values json cannot encode natively (oid lists, decimals)
    return json.dumps(payload, ensure_ascii=False, indent=2, default=str)

  def present_error(self, error: Exception) -> str:
    return json.dumps({'status': 'error', 'error': str(error)}, ensure_ascii=False, indent=2)
