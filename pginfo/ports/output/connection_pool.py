"""Output port for the pooled database connections the catalog services read from."""
from __future__ import annotations

from typing import Any, Awaitable, Iterable, Mapping, Optional, Protocol


class QueryRows(Protocol):
  """Buffered result of one statement."""

  def mappings(self) -> Iterable[Mapping[str, Any]]:
    ...


class PooledConnection(Protocol):
  """A connection checked out of the pool.

  ``close`` hands the connection back to the pool rather than closing the
  underlying socket, as with SQLAlchemy's ``AsyncConnection``.
  """

  async def execute(self, statement: Any, parameters: Optional[Mapping[str, Any]] = None) -> QueryRows:
    ...

  async def close(self) -> None:
    ...


class ConnectionPool(Protocol):
  """Source of pooled connections, satisfied by SQLAlchemy's ``AsyncEngine``."""

  def connect(self) -> Awaitable[PooledConnection]:
    ...

  async def dispose(self) -> None:
    ...
