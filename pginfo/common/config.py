"""Application-level configuration utilities."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from pginfo.domain.value_objects.database_connection import DatabaseConnection


@dataclass(frozen=True)
class Settings:
  """Immutable application settings loaded from environment variables."""

  database_url: str
  database_name: Optional[str] = None
  pool_size: int = 5
  log_level: str = 'WARNING'


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Load settings from environment variables once per process."""
  env_path = Path(__file__).resolve().parents[2] / '.env'
  if env_path.exists():
    load_dotenv(env_path)
  else:
    load_dotenv()

  from os import getenv

  database_url = getenv('DATABASE_URL')
  if not database_url:
    raise ValueError('DATABASE_URL must be set in environment or .env file')

  database_name = getenv('PGINFO_DATABASE') or None
  if not database_name and not DatabaseConnection.from_url(database_url).database:
    raise ValueError('PGINFO_DATABASE must be set when DATABASE_URL names no database')

  pool_size = getenv('PGINFO_POOL_SIZE', '5')
  if not pool_size.isdigit() or int(pool_size) < 1:
    raise ValueError('PGINFO_POOL_SIZE must be a positive integer')

  return Settings(
    database_url=database_url,
    database_name=database_name,
    pool_size=int(pool_size),
    log_level=getenv('PGINFO_LOG_LEVEL', 'WARNING').upper(),
  )
