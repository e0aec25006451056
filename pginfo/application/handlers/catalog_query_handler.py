"""Application handler that turns catalog commands into query results."""
from __future__ import annotations

import time
from typing import Any, Dict, List

from pginfo.application.commands.catalog_query_command import CatalogQueryCommand, CatalogTarget
from pginfo.application.queries.query_result import QueryResult, QueryStatus
from pginfo.application.services.catalog_service import CatalogService


class CatalogQueryHandler:
  """Dispatches catalog commands to the catalog services."""

  def __init__(self, catalog: CatalogService):
    self._catalog = catalog

  async def handle(self, command: CatalogQueryCommand) -> QueryResult:
    start = time.perf_counter()
    metadata = self._scope(command)
    try:
      rows = await self._fetch(command)
    except Exception as exc:  # noqa: BLE001
      return QueryResult(
        status=QueryStatus.ERROR,
        target=command.target.value,
        metadata=metadata,
        execution_time=time.perf_counter() - start,
        error=str(exc) or type(exc).__name__,
      )

    return QueryResult(
      status=QueryStatus.SUCCESS,
      target=command.target.value,
      rows=[dict(row) for row in rows],
      metadata=metadata,
      execution_time=time.perf_counter() - start,
    )

  async def close(self) -> None:
    await self._catalog.disconnect()

  async def _fetch(self, command: CatalogQueryCommand) -> List[Any]:
    target = command.target
    if target == CatalogTarget.SCHEMAS:
      if command.include_system_schemas:
        return await self._catalog.list_all_schemas()
      return await self._catalog.list_schemas()
    if target == CatalogTarget.DOMAINS:
      return await self._catalog.list_domains()
    if target == CatalogTarget.TYPE_DESCRIPTORS:
      return await self._catalog.list_type_descriptors(command.catalog_name)

    schema = self._catalog.schema(command.schema_name)
    if target == CatalogTarget.TABLES:
      return await schema.list_tables()
    if target == CatalogTarget.USER_DEFINED_TYPES:
      return await schema.list_user_defined_types()
    if target == CatalogTarget.ATTRIBUTES:
      return await schema.list_attributes()
    if target == CatalogTarget.ARRAY_COLUMNS:
      return await schema.list_array_columns()
    if command.table_name:
      return await schema.table(command.table_name).list_columns()
    return await schema.list_columns()

  def _scope(self, command: CatalogQueryCommand) -> Dict[str, Any]:
    scope: Dict[str, Any] = {'database': self._catalog.database_name}
    if command.target == CatalogTarget.TYPE_DESCRIPTORS:
      scope['catalog'] = command.catalog_name
    if command.schema_name:
      scope['schema'] = command.schema_name
    if command.table_name:
      scope['table'] = command.table_name
    return scope
