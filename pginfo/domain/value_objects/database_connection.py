"""Value object for database connection metadata."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import make_url

ASYNC_DRIVER = 'postgresql+asyncpg'


@dataclass(frozen=True)
class DatabaseConnection:
  """Immutable representation of a PostgreSQL connection string."""

  url: str
  host: Optional[str]
  port: Optional[int]
  database: Optional[str]
  username: Optional[str] = None
  password: Optional[str] = None

  @staticmethod
  def from_url(url: str) -> 'DatabaseConnection':
    """Parse ``url``, switching plain ``postgresql://`` URLs to the asyncpg driver."""
    if not url:
      raise ValueError('Database URL is required')

    parsed = make_url(url)
    if parsed.get_backend_name() != 'postgresql':
      raise ValueError(f'Only PostgreSQL URLs are supported, got {parsed.get_backend_name()!r}')
    if parsed.get_driver_name() != 'asyncpg':
      parsed = parsed.set(drivername=ASYNC_DRIVER)

    return DatabaseConnection(
      url=parsed.render_as_string(hide_password=False),
      host=parsed.host,
      port=parsed.port,
      database=parsed.database,
      username=parsed.username,
      password=parsed.password,
    )
