"""Simple dependency wiring helpers."""
from __future__ import annotations

from sqlalchemy.ext.asyncio import create_async_engine

from pginfo.application.handlers.catalog_query_handler import CatalogQueryHandler
from pginfo.application.services.catalog_service import CatalogService
from pginfo.common.config import Settings
from pginfo.domain.value_objects.database_connection import DatabaseConnection


def create_catalog_service(settings: Settings) -> CatalogService:
  """Build a ``CatalogService`` over a new async engine.

  The database name falls back to the one in the URL.
  """
  connection = DatabaseConnection.from_url(settings.database_url)
  engine = create_async_engine(connection.url, pool_size=settings.pool_size, pool_pre_ping=True)
  return CatalogService(engine, settings.database_name or connection.database)


def create_catalog_query_handler(settings: Settings) -> CatalogQueryHandler:
  return CatalogQueryHandler(create_catalog_service(settings))
