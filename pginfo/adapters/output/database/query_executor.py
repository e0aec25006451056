"""SQLAlchemy-powered executor for catalog statements."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

from pginfo.ports.output.connection_pool import ConnectionPool

PG_MSG_DB_QUERY_ERROR = 'DB query error'
PG_MSG_DB_CONN_ERROR = 'DB connection error'

_statements: Dict[str, TextClause] = {}


class QueryExecutor:
  """Runs one statement per pooled connection.

  Failures are reported in two channels: a connection that cannot be checked
  out is logged with ``PG_MSG_DB_CONN_ERROR``, a statement that fails on a live
  connection is logged with ``PG_MSG_DB_QUERY_ERROR``. Either way the original
  exception reaches the caller unchanged, and a checked out connection goes
  back to the pool exactly once.
  """

  def __init__(self, pool: ConnectionPool, logger: logging.Logger) -> None:
    self._pool = pool
    self._logger = logger

  async def execute(
    self,
    statement: str,
    parameters: Optional[Mapping[str, Any]] = None,
    name: str = '',
  ) -> List[Dict[str, Any]]:
    clause = _prepare(statement, name)

    try:
      connection = await self._pool.connect()
    except Exception as exc:
      self._logger.error(PG_MSG_DB_CONN_ERROR, exc_info=exc)
      raise

    try:
      result = await connection.execute(clause, dict(parameters or {}))
      rows = [dict(row) for row in result.mappings()]
    except Exception as exc:
      self._logger.error(PG_MSG_DB_QUERY_ERROR, exc_info=exc)
      raise
    finally:
      await connection.close()

    self._logger.debug('Statement %s returned %d rows', name or '<unnamed>', len(rows))
    return rows


def _prepare(statement: str, name: str) -> TextClause:
  # unnamed statements are not cached
  if not name:
    return text(statement)
  clause = _statements.get(name)
  if clause is None or clause.text != statement:
    clause = _statements[name] = text(statement)
  return clause
