"""Enumerations for well-known values found in catalog rows."""
from __future__ import annotations

from enum import Enum


class TableType(str, Enum):
  BASE_TABLE = 'BASE TABLE'
  VIEW = 'VIEW'
  FOREIGN = 'FOREIGN'
  LOCAL_TEMPORARY = 'LOCAL TEMPORARY'


class YesOrNo(str, Enum):
  YES = 'YES'
  NO = 'NO'


class AlwaysOrNever(str, Enum):
  ALWAYS = 'ALWAYS'
  NEVER = 'NEVER'


class DataType(str, Enum):
  """Values of ``data_type`` reported by the information schema."""
  CHAR = 'char'
  ANYARRAY = 'anyarray'
  ARRAY = 'ARRAY'
  BIGINT = 'bigint'
  BIT = 'bit'
  BIT_VARYING = 'bit varying'
  BOOLEAN = 'boolean'
  BYTEA = 'bytea'
  CHARACTER = 'character'
  CHARACTER_VARYING = 'character varying'
  DATE = 'date'
  DOUBLE_PRECISION = 'double precision'
  INET = 'inet'
  INTEGER = 'integer'
  INTERVAL = 'interval'
  JSON = 'json'
  JSONB = 'jsonb'
  MONEY = 'money'
  NAME = 'name'
  NUMERIC = 'numeric'
  OID = 'oid'
  PG_DEPENDENCIES = 'pg_dependencies'
  PG_LSN = 'pg_lsn'
  PG_MCV_LIST = 'pg_mcv_list'
  PG_NDISTINCT = 'pg_ndistinct'
  PG_NODE_TREE = 'pg_node_tree'
  REAL = 'real'
  REGPROC = 'regproc'
  REGTYPE = 'regtype'
  SMALLINT = 'smallint'
  TEXT = 'text'
  TIME_WITH_TIME_ZONE = 'time with time zone'
  TIME_WITHOUT_TIME_ZONE = 'time without time zone'
  TIMESTAMP_WITH_TIME_ZONE = 'timestamp with time zone'
  TIMESTAMP_WITHOUT_TIME_ZONE = 'timestamp without time zone'
  USER_DEFINED = 'USER-DEFINED'
  UUID = 'uuid'
  XID = 'xid'
  XML = 'xml'

  # aliases
  TSZ = 'timestamp with time zone'
  TS = 'timestamp without time zone'


class UdtName(str, Enum):
  """Built-in type names found in ``udt_name``; array types carry a leading underscore."""
  ANYARRAY = 'anyarray'
  BOOL = 'bool'
  BPCHAR = 'bpchar'
  BYTEA = 'bytea'
  CHAR = 'char'
  DATE = 'date'
  FLOAT4 = 'float4'
  FLOAT8 = 'float8'
  INET = 'inet'
  INT2 = 'int2'
  INT2VECTOR = 'int2vector'
  INT4 = 'int4'
  INT8 = 'int8'
  INTERVAL = 'interval'
  JSON = 'json'
  JSONB = 'jsonb'
  NAME = 'name'
  NUMERIC = 'numeric'
  OID = 'oid'
  OIDVECTOR = 'oidvector'
  PG_DEPENDENCIES = 'pg_dependencies'
  PG_LSN = 'pg_lsn'
  PG_MCV_LIST = 'pg_mcv_list'
  PG_NDISTINCT = 'pg_ndistinct'
  PG_NODE_TREE = 'pg_node_tree'
  REGPROC = 'regproc'
  REGTYPE = 'regtype'
  TEXT = 'text'
  TIMESTAMP = 'timestamp'
  TIMESTAMPTZ = 'timestamptz'
  UUID = 'uuid'
  VARCHAR = 'varchar'
  XID = 'xid'
  ACLITEM_ARRAY = '_aclitem'
  BOOL_ARRAY = '_bool'
  CHAR_ARRAY = '_char'
  FLOAT4_ARRAY = '_float4'
  FLOAT8_ARRAY = '_float8'
  INT2_ARRAY = '_int2'
  INT4_ARRAY = '_int4'
  NAME_ARRAY = '_name'
  OID_ARRAY = '_oid'
  REGTYPE_ARRAY = '_regtype'
  TEXT_ARRAY = '_text'
  VARCHAR_ARRAY = '_varchar'

  @property
  def is_array(self) -> bool:
    return self.value.startswith('_')
