"""Row shapes returned by the catalog services.

Each record mirrors one row of a PostgreSQL catalog view, field for field.
Every field is nullable because the catalog reports NULL wherever the current
role lacks privileges on the described object.
"""
from __future__ import annotations

from typing import List, Optional, TypedDict


# @see https://www.postgresql.org/docs/current/infoschema-schemata.html
class Schema(TypedDict, total=False):
  catalog_name: Optional[str]
  schema_name: Optional[str]
  schema_owner: Optional[str]
  default_character_set_catalog: Optional[str]
  default_character_set_schema: Optional[str]
  default_character_set_name: Optional[str]
  sql_path: Optional[str]


# @see https://www.postgresql.org/docs/current/infoschema-tables.html
class Table(TypedDict, total=False):
  table_catalog: Optional[str]
  table_schema: Optional[str]
  table_name: Optional[str]
  table_type: Optional[str]
  self_referencing_column_name: Optional[str]
  reference_generation: Optional[str]
  user_defined_type_catalog: Optional[str]
  user_defined_type_schema: Optional[str]
  user_defined_type_name: Optional[str]
  is_insertable_into: Optional[str]
  is_typed: Optional[str]
  commit_action: Optional[str]

  # from pg_description
  table_comment: Optional[str]


# @see https://www.postgresql.org/docs/current/infoschema-columns.html
class Column(TypedDict, total=False):
  table_catalog: Optional[str]
  table_schema: Optional[str]
  table_name: Optional[str]
  column_name: Optional[str]
  ordinal_position: Optional[int]
  column_default: Optional[str]
  is_nullable: Optional[str]
  data_type: Optional[str]
  character_maximum_length: Optional[int]
  character_octet_length: Optional[int]
  numeric_precision: Optional[int]
  numeric_precision_radix: Optional[int]
  numeric_scale: Optional[int]
  datetime_precision: Optional[int]
  interval_type: Optional[str]
  interval_precision: Optional[int]
  character_set_catalog: Optional[str]
  character_set_schema: Optional[str]
  character_set_name: Optional[str]
  collation_catalog: Optional[str]
  collation_schema: Optional[str]
  collation_name: Optional[str]
  domain_catalog: Optional[str]
  domain_schema: Optional[str]
  domain_name: Optional[str]
  udt_catalog: Optional[str]
  udt_schema: Optional[str]
  udt_name: Optional[str]
  scope_catalog: Optional[str]
  scope_schema: Optional[str]
  scope_name: Optional[str]
  maximum_cardinality: Optional[int]
  dtd_identifier: Optional[str]
  is_self_referencing: Optional[str]
  is_identity: Optional[str]
  identity_generation: Optional[str]
  identity_start: Optional[str]
  identity_increment: Optional[str]
  identity_maximum: Optional[str]
  identity_minimum: Optional[str]
  identity_cycle: Optional[str]
  is_generated: Optional[str]
  generation_expression: Optional[str]
  is_updatable: Optional[str]

  # from pg_description
  column_comment: Optional[str]
  # from pg_attribute.attndims, set by enrich_array_dimensions
  array_dimension: Optional[int]


# @see https://www.postgresql.org/docs/current/infoschema-domains.html
class Domain(TypedDict, total=False):
  domain_catalog: Optional[str]
  domain_schema: Optional[str]
  domain_name: Optional[str]
  data_type: Optional[str]
  character_maximum_length: Optional[int]
  character_octet_length: Optional[int]
  character_set_catalog: Optional[str]
  character_set_schema: Optional[str]
  character_set_name: Optional[str]
  collation_catalog: Optional[str]
  collation_schema: Optional[str]
  collation_name: Optional[str]
  numeric_precision: Optional[int]
  numeric_precision_radix: Optional[int]
  numeric_scale: Optional[int]
  datetime_precision: Optional[int]
  interval_type: Optional[str]
  interval_precision: Optional[int]
  domain_default: Optional[str]
  udt_catalog: Optional[str]
  udt_schema: Optional[str]
  udt_name: Optional[str]
  scope_catalog: Optional[str]
  scope_schema: Optional[str]
  scope_name: Optional[str]
  maximum_cardinality: Optional[int]
  dtd_identifier: Optional[str]


# @see https://www.postgresql.org/docs/current/infoschema-user-defined-types.html
class UserDefinedType(TypedDict, total=False):
  user_defined_type_catalog: Optional[str]
  user_defined_type_schema: Optional[str]
  user_defined_type_name: Optional[str]
  user_defined_type_category: Optional[str]
  is_instantiable: Optional[str]
  is_final: Optional[str]
  ordering_form: Optional[str]
  ordering_category: Optional[str]
  ordering_routine_catalog: Optional[str]
  ordering_routine_schema: Optional[str]
  ordering_routine_name: Optional[str]
  reference_type: Optional[str]
  data_type: Optional[str]
  character_maximum_length: Optional[int]
  character_octet_length: Optional[int]
  character_set_catalog: Optional[str]
  character_set_schema: Optional[str]
  character_set_name: Optional[str]
  collation_catalog: Optional[str]
  collation_schema: Optional[str]
  collation_name: Optional[str]
  numeric_precision: Optional[int]
  numeric_precision_radix: Optional[int]
  numeric_scale: Optional[int]
  datetime_precision: Optional[int]
  interval_type: Optional[str]
  interval_precision: Optional[int]
  source_dtd_identifier: Optional[str]
  ref_dtd_identifier: Optional[str]


# @see https://www.postgresql.org/docs/current/infoschema-attributes.html
class Attribute(TypedDict, total=False):
  udt_catalog: Optional[str]
  udt_schema: Optional[str]
  udt_name: Optional[str]
  attribute_name: Optional[str]
  ordinal_position: Optional[int]
  attribute_default: Optional[str]
  is_nullable: Optional[str]
  data_type: Optional[str]
  character_maximum_length: Optional[int]
  character_octet_length: Optional[int]
  character_set_catalog: Optional[str]
  character_set_schema: Optional[str]
  character_set_name: Optional[str]
  collation_catalog: Optional[str]
  collation_schema: Optional[str]
  collation_name: Optional[str]
  numeric_precision: Optional[int]
  numeric_precision_radix: Optional[int]
  numeric_scale: Optional[int]
  datetime_precision: Optional[int]
  interval_type: Optional[str]
  interval_precision: Optional[int]
  attribute_udt_catalog: Optional[str]
  attribute_udt_schema: Optional[str]
  attribute_udt_name: Optional[str]
  scope_catalog: Optional[str]
  scope_schema: Optional[str]
  scope_name: Optional[str]
  maximum_cardinality: Optional[int]
  dtd_identifier: Optional[str]
  is_derived_reference_attribute: Optional[str]


# @see https://www.postgresql.org/docs/current/catalog-pg-type.html
class TypeDescriptor(TypedDict, total=False):
  oid: Optional[int]
  typname: Optional[str]
  typnamespace: Optional[int]
  typowner: Optional[int]
  typlen: Optional[int]
  typbyval: Optional[bool]
  typtype: Optional[str]
  typcategory: Optional[str]
  typispreferred: Optional[bool]
  typisdefined: Optional[bool]
  typdelim: Optional[str]
  typrelid: Optional[int]
  typsubscript: Optional[str]
  typelem: Optional[int]
  typarray: Optional[int]
  typinput: Optional[str]
  typoutput: Optional[str]
  typreceive: Optional[str]
  typsend: Optional[str]
  typmodin: Optional[str]
  typmodout: Optional[str]
  typanalyze: Optional[str]
  typalign: Optional[str]
  typstorage: Optional[str]
  typnotnull: Optional[bool]
  typbasetype: Optional[int]
  typtypmod: Optional[int]
  typndims: Optional[int]
  typcollation: Optional[int]
  typdefaultbin: Optional[str]
  typdefault: Optional[str]
  typacl: Optional[List[str]]


class ArrayColumnProbe(TypedDict, total=False):
  """Array columns of a schema as reported by ``pg_attribute``."""
  table_name: Optional[str]
  column_name: Optional[str]
  array_dimension: Optional[int]
