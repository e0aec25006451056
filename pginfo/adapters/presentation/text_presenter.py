"""Plain text presenter listing one row per block."""
from __future__ import annotations

from pginfo.application.queries.query_result import QueryResult
from pginfo.ports.input.result_presenter import ResultPresenter


class TextPresenter(ResultPresenter):
  def present(self, result: QueryResult) -> str:
    scope = ', '.join(f'{key}={value}' for key, value in result.metadata.items())
    lines = [
      '=' * 60,
      f'{result.target.upper()} ({scope})',
      '=' * 60,
    ]

    if result.error:
      lines.append(f'ERROR: {result.error}')
      return '\n'.join(lines)

    for row in result.rows:
      width = max((len(key) for key in row), default=0)
      for key, value in row.items():
        if value is not None:
          lines.append(f'{key.ljust(width)} : {value}')
      lines.append('-' * 60)

    lines.append(f'{result.row_count} rows in {result.execution_time:.2f}s')
    return '\n'.join(lines)

  def present_error(self, error: Exception) -> str:
    return f'ERROR: {error}'
