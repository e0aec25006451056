"""Catalog queries narrowed to one table."""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from pginfo.adapters.output.database import statements
from pginfo.domain.entities.catalog_rows import Column
from pginfo.domain.services.array_dimension_enricher import enrich_array_dimensions

if TYPE_CHECKING:
  from pginfo.application.services.catalog_service import CatalogService
  from pginfo.application.services.schema_service import SchemaService


class TableService:
  def __init__(self, catalog: CatalogService, schema: SchemaService, table_name: str) -> None:
    self._catalog = catalog
    self._schema = schema
    self._table_name = table_name

  @property
  def schema(self) -> SchemaService:
    return self._schema

  @property
  def table_name(self) -> str:
    return self._table_name

  async def list_columns(self) -> List[Column]:
    """Return this table's columns ordered by name, with array dimensions."""
    params = {
      'database_name': self._catalog.database_name,
      'schema_name': self._schema.schema_name,
      'table_name': self._table_name,
    }
    columns = await self._catalog.executor.execute(statements.SELECT_COLUMNS_BY_TABLE, params, 'columnsByTable')
    # array dimensions are read schema wide; the join keeps this table's rows
    probes = await self._schema.list_array_columns()
    enrich_array_dimensions(columns, probes)
    return columns
