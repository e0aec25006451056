"""Command object representing a catalog metadata request."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pginfo.adapters.output.database.statements import DEFAULT_TYPE_CATALOG


class CatalogTarget(str, Enum):
  SCHEMAS = 'schemas'
  DOMAINS = 'domains'
  TYPE_DESCRIPTORS = 'types'
  TABLES = 'tables'
  USER_DEFINED_TYPES = 'user-defined-types'
  ATTRIBUTES = 'attributes'
  COLUMNS = 'columns'
  ARRAY_COLUMNS = 'array-columns'

  @property
  def is_schema_scoped(self) -> bool:
    return self in _SCHEMA_SCOPED


_SCHEMA_SCOPED = frozenset({
  CatalogTarget.TABLES,
  CatalogTarget.USER_DEFINED_TYPES,
  CatalogTarget.ATTRIBUTES,
  CatalogTarget.COLUMNS,
  CatalogTarget.ARRAY_COLUMNS,
})


@dataclass(frozen=True)
class CatalogQueryCommand:
  target: CatalogTarget
  schema_name: Optional[str] = None
  table_name: Optional[str] = None
  catalog_name: str = DEFAULT_TYPE_CATALOG
  include_system_schemas: bool = False

  def __post_init__(self) -> None:
    if self.target.is_schema_scoped and not self.schema_name:
      raise ValueError(f'schema_name is required for {self.target.value}')
    if self.table_name and self.target != CatalogTarget.COLUMNS:
      raise ValueError('table_name is only supported for columns')
    if not self.catalog_name:
      raise ValueError('catalog_name must not be empty')
