"""Markdown presenter for report-style outputs."""
from __future__ import annotations

from typing import Any

from pginfo.application.queries.query_result import QueryResult
from pginfo.ports.input.result_presenter import ResultPresenter


class MarkdownPresenter(ResultPresenter):
  def present(self, result: QueryResult) -> str:
    lines = [
      f'# {result.target}',
      '',
      f'**Status:** {result.status.value}',
      f'**Rows:** {result.row_count}',
      f'**Execution time:** {result.execution_time:.2f}s',
    ]
    for key, value in result.metadata.items():
      lines.append(f'- **{key}**: {value}')
    lines.append('')

    if result.error:
      lines.append(f'**Error:** {result.error}')
      return '\n'.join(lines)

    if result.rows:
      columns = list(result.rows[0].keys())
      lines.append('| ' + ' | '.join(columns) + ' |')
      lines.append('|' + ' --- |' * len(columns))
      for row in result.rows:
        lines.append('| ' + ' | '.join(_cell(row.get(column)) for column in columns) + ' |')

    return '\n'.join(lines)

  def present_error(self, error: Exception) -> str:
    return f'# Error\n\n{error}'


def _cell(value: Any) -> str:
  if value is None:
    return ''
  return str(value).replace('|', '\\|').replace('\n', ' ')
