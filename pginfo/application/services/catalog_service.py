"""Database-wide catalog queries and the entry point to schema scoped services."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from pginfo.adapters.output.database import statements
from pginfo.adapters.output.database.query_executor import QueryExecutor
from pginfo.application.errors import InvalidArgumentError, InvalidCatalogError
from pginfo.application.services.schema_service import SchemaService
from pginfo.domain.entities.catalog_rows import Domain, Schema, TypeDescriptor
from pginfo.ports.output.connection_pool import ConnectionPool


class CatalogService:
  """Reads catalog metadata for one database.

  The service owns the connection pool; the schema and table services it hands
  out share the pool and executor by reference.
  """

  def __init__(
    self,
    pool: ConnectionPool,
    database_name: str,
    logger: Optional[logging.Logger] = None,
  ) -> None:
    if not database_name or not database_name.strip():
      raise InvalidArgumentError('database_name is required', argument='database_name')

    self._pool = pool
    self._database_name = database_name
    self._logger = logger or logging.getLogger(__name__)
    self._executor = QueryExecutor(pool, self._logger)

  @property
  def database_name(self) -> str:
    return self._database_name

  @property
  def logger(self) -> logging.Logger:
    return self._logger

  @property
  def executor(self) -> QueryExecutor:
    return self._executor

  async def query(
    self,
    statement: str,
    parameters: Optional[Mapping[str, Any]] = None,
    name: str = '',
  ) -> List[Dict[str, Any]]:
    """Run an arbitrary read-only statement with bound parameters."""
    return await self._executor.execute(statement, parameters, name)

  async def list_schemas(self) -> List[Schema]:
    """Return user schemas, without ``information_schema`` and ``pg_*`` namespaces."""
    return await self._executor.execute(
      statements.SELECT_SCHEMATA,
      {'database_name': self._database_name},
      'schemata',
    )

  async def list_all_schemas(self) -> List[Schema]:
    return await self._executor.execute(
      statements.SELECT_ALL_SCHEMATA,
      {'database_name': self._database_name},
      'allSchemata',
    )

  async def list_type_descriptors(
    self,
    catalog_name: str = statements.DEFAULT_TYPE_CATALOG,
  ) -> List[TypeDescriptor]:
    """Return the ``pg_type`` rows of ``catalog_name``.

    The catalog name has to be interpolated into the statement as an
    identifier, so it is accepted only when it is ``pg_catalog`` or names an
    existing namespace other than ``information_schema``.

    Raises:
      InvalidCatalogError: before the descriptor query runs, when the name is
        not acceptable.
    """
    if catalog_name != statements.DEFAULT_TYPE_CATALOG:
      if catalog_name == statements.INFORMATION_SCHEMA:
        raise InvalidCatalogError(catalog_name)
      existing = {row.get('schema_name') for row in await self.list_all_schemas()}
      if catalog_name not in existing:
        raise InvalidCatalogError(catalog_name)

    return await self._executor.execute(
      statements.select_type_descriptors(catalog_name),
      {},
      f'types:{catalog_name}',
    )

  async def list_domains(self) -> List[Domain]:
    return await self._executor.execute(
      statements.SELECT_DOMAINS,
      {'database_name': self._database_name},
      'domains',
    )

  def schema(self, schema_name: str) -> SchemaService:
    return SchemaService(self, schema_name)

  async def disconnect(self) -> None:
    """Dispose of the pool. Services created from this one become unusable."""
    await self._pool.dispose()
