"""Catalog statements issued by the catalog services.

Values are always bound parameters. The only identifier interpolated into
statement text is the type descriptor catalog, which is checked against the
existing namespaces first (see ``CatalogService.list_type_descriptors``).
"""
from __future__ import annotations

DEFAULT_TYPE_CATALOG = 'pg_catalog'
INFORMATION_SCHEMA = 'information_schema'

SELECT_SCHEMATA = """
  SELECT
    *
  FROM information_schema.schemata
  WHERE catalog_name = :database_name
    AND schema_name <> 'information_schema'
    AND schema_name NOT LIKE 'pg\\_%'
  ORDER BY schema_name
"""

SELECT_ALL_SCHEMATA = """
  SELECT
    *
  FROM information_schema.schemata
  WHERE catalog_name = :database_name
  ORDER BY schema_name
"""

SELECT_DOMAINS = """
  SELECT
    *
  FROM information_schema.domains
  WHERE domain_catalog = :database_name
  ORDER BY domain_catalog, domain_schema, domain_name
"""

SELECT_TABLES = """
  SELECT
    t.*,
    pg_catalog.obj_description(c.oid, 'pg_class') AS table_comment
  FROM information_schema.tables t
  LEFT JOIN pg_catalog.pg_namespace n ON n.nspname = t.table_schema
  LEFT JOIN pg_catalog.pg_class c ON c.relnamespace = n.oid AND c.relname = t.table_name
  WHERE t.table_catalog = :database_name
    AND t.table_schema = :schema_name
    AND t.table_type = :table_type
  ORDER BY t.table_schema, t.table_name
"""

SELECT_USER_DEFINED_TYPES = """
  SELECT
    *
  FROM information_schema.user_defined_types
  WHERE user_defined_type_catalog = :database_name
    AND user_defined_type_schema = :schema_name
  ORDER BY user_defined_type_name
"""

SELECT_ATTRIBUTES = """
  SELECT
    *
  FROM information_schema.attributes
  WHERE udt_catalog = :database_name
    AND udt_schema = :schema_name
  ORDER BY udt_name, attribute_name
"""

SELECT_ARRAY_COLUMNS = """
  SELECT
    c.relname AS table_name,
    a.attname AS column_name,
    a.attndims AS array_dimension
  FROM pg_catalog.pg_attribute a
  JOIN pg_catalog.pg_class c ON c.oid = a.attrelid
  JOIN pg_catalog.pg_namespace n ON n.oid = c.relnamespace
  WHERE n.nspname = :schema_name
    AND a.attnum > 0
    AND a.attndims > 0
    AND NOT a.attisdropped
  ORDER BY c.relname, a.attname
"""

_SELECT_COLUMNS_BASE = """
  SELECT
    col.*,
    pg_catalog.col_description(c.oid, col.ordinal_position::int) AS column_comment
  FROM information_schema.columns col
  LEFT JOIN pg_catalog.pg_namespace n ON n.nspname = col.table_schema
  LEFT JOIN pg_catalog.pg_class c ON c.relnamespace = n.oid AND c.relname = col.table_name
  WHERE col.table_catalog = :database_name
    AND col.table_schema = :schema_name
"""

SELECT_COLUMNS = _SELECT_COLUMNS_BASE + """
  ORDER BY col.table_schema, col.table_name, col.column_name
"""

SELECT_COLUMNS_BY_TABLE = _SELECT_COLUMNS_BASE + """
    AND col.table_name = :table_name
  ORDER BY col.table_schema, col.table_name, col.column_name
"""


def select_type_descriptors(catalog_name: str) -> str:
  """Build the ``pg_type`` statement for an already verified catalog name."""
  return f"""
  SELECT
    *
  FROM {quote_identifier(catalog_name)}.pg_type
  ORDER BY typname
"""


def quote_identifier(name: str) -> str:
  return '"' + name.replace('"', '""') + '"'
