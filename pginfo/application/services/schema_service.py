"""Catalog queries narrowed to one schema."""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from pginfo.adapters.output.database import statements
from pginfo.application.services.table_service import TableService
from pginfo.domain.entities.catalog_rows import ArrayColumnProbe, Attribute, Column, Table, UserDefinedType
from pginfo.domain.services.array_dimension_enricher import enrich_array_dimensions
from pginfo.domain.value_objects.catalog_enums import TableType

if TYPE_CHECKING:
  from pginfo.application.services.catalog_service import CatalogService


class SchemaService:
  """Schema scoped view of a ``CatalogService``.

  The schema name is not checked; an unknown schema yields empty results.
  """

  def __init__(self, catalog: CatalogService, schema_name: str) -> None:
    self._catalog = catalog
    self._schema_name = schema_name

  @property
  def catalog(self) -> CatalogService:
    return self._catalog

  @property
  def database_name(self) -> str:
    return self._catalog.database_name

  @property
  def schema_name(self) -> str:
    return self._schema_name

  def _scope(self) -> dict:
    return {'database_name': self.database_name, 'schema_name': self._schema_name}

  async def list_tables(self) -> List[Table]:
    """Return base tables with their comments."""
    params = {**self._scope(), 'table_type': TableType.BASE_TABLE.value}
    return await self._catalog.executor.execute(statements.SELECT_TABLES, params, 'tables')

  async def list_user_defined_types(self) -> List[UserDefinedType]:
    return await self._catalog.executor.execute(
      statements.SELECT_USER_DEFINED_TYPES,
      self._scope(),
      'userDefinedTypes',
    )

  async def list_attributes(self) -> List[Attribute]:
    """Return the attributes of the composite types in this schema."""
    return await self._catalog.executor.execute(statements.SELECT_ATTRIBUTES, self._scope(), 'attributes')

  async def list_array_columns(self) -> List[ArrayColumnProbe]:
    return await self._catalog.executor.execute(
      statements.SELECT_ARRAY_COLUMNS,
      {'schema_name': self._schema_name},
      'arrayColumns',
    )

  async def list_columns(self) -> List[Column]:
    """Return the columns of every table in this schema.

    Array columns get ``array_dimension`` from a second statement run
    after the column query; the two are not read from the same snapshot.
    """
    columns = await self._catalog.executor.execute(statements.SELECT_COLUMNS, self._scope(), 'columns')
    probes = await self.list_array_columns()
    enrich_array_dimensions(columns, probes)
    return columns

  def table(self, table_name: str) -> TableService:
    return TableService(self._catalog, self, table_name)
