from __future__ import annotations

import asyncio

import pytest

from pginfo.adapters.output.database.query_executor import PG_MSG_DB_CONN_ERROR, PG_MSG_DB_QUERY_ERROR
from pginfo.application.services.catalog_service import CatalogService
from pginfo.application.services.table_service import TableService

COLUMNS = [
  {'table_catalog': 'demo', 'table_schema': 'public', 'table_name': 'options', 'column_name': 'int_arr_dim2',
   'data_type': 'ARRAY', 'udt_name': '_int4', 'column_comment': None},
  {'table_catalog': 'demo', 'table_schema': 'public', 'table_name': 'options', 'column_name': 'uuid',
   'data_type': 'uuid', 'udt_name': 'uuid', 'column_comment': 'primary key'},
  {'table_catalog': 'demo', 'table_schema': 'public', 'table_name': 'options', 'column_name': 'varchar_arr_dim1',
   'data_type': 'ARRAY', 'udt_name': '_varchar', 'column_comment': None},
  {'table_catalog': 'demo', 'table_schema': 'public', 'table_name': 'users', 'column_name': 'id',
   'data_type': 'integer', 'udt_name': 'int4', 'column_comment': None},
  {'table_catalog': 'demo', 'table_schema': 'public', 'table_name': 'users', 'column_name': 'tags',
   'data_type': 'ARRAY', 'udt_name': '_text', 'column_comment': None},
  {'table_catalog': 'demo', 'table_schema': 'sales', 'table_name': 'orders', 'column_name': 'id',
   'data_type': 'integer', 'udt_name': 'int4', 'column_comment': None},
]

ARRAY_COLUMNS = [
  {'schema': 'public', 'table_name': 'options', 'column_name': 'int_arr_dim2', 'array_dimension': 2},
  {'schema': 'public', 'table_name': 'options', 'column_name': 'varchar_arr_dim1', 'array_dimension': 1},
  {'schema': 'public', 'table_name': 'users', 'column_name': 'tags', 'array_dimension': 1},
]


def _columns(params):
  return [
    dict(row) for row in COLUMNS
    if row['table_catalog'] == params['database_name']
    and row['table_schema'] == params['schema_name']
    and row['table_name'] == params.get('table_name', row['table_name'])
  ]


def _array_columns(params):
  return [
    {key: value for key, value in row.items() if key != 'schema'}
    for row in ARRAY_COLUMNS if row['schema'] == params['schema_name']
  ]


@pytest.fixture
def pool(make_pool):
  return make_pool([
    ('pg_attribute', _array_columns),
    ('information_schema.columns', _columns),
    ('information_schema.tables', [{'table_name': 'options', 'table_comment': None},
                                   {'table_name': 'users', 'table_comment': 'application users'}]),
    ('information_schema.user_defined_types', [{'user_defined_type_name': 'address'}]),
    ('information_schema.attributes', [{'udt_name': 'address', 'attribute_name': 'city'}]),
  ])


@pytest.fixture
def catalog(pool, logger):
  return CatalogService(pool, 'demo', logger)


@pytest.mark.asyncio
async def test_list_tables_is_scoped_to_schema(catalog, pool):
  rows = await catalog.schema('public').list_tables()

  assert [row['table_name'] for row in rows] == ['options', 'users']
  assert rows[1]['table_comment'] == 'application users'
  sql, params = pool.executed[0]
  assert 't.table_type = :table_type' in sql
  assert 'obj_description' in sql
  assert params == {'database_name': 'demo', 'schema_name': 'public', 'table_type': 'BASE TABLE'}


@pytest.mark.asyncio
async def test_list_user_defined_types_and_attributes(catalog, pool):
  schema = catalog.schema('public')

  udts = await schema.list_user_defined_types()
  attributes = await schema.list_attributes()

  assert udts == [{'user_defined_type_name': 'address'}]
  assert attributes == [{'udt_name': 'address', 'attribute_name': 'city'}]
  assert 'ORDER BY udt_name, attribute_name' in pool.statements_matching('information_schema.attributes')[0][0]
  for _, params in pool.executed:
    assert params == {'database_name': 'demo', 'schema_name': 'public'}


@pytest.mark.asyncio
async def test_list_array_columns_binds_schema_only(catalog, pool):
  rows = await catalog.schema('public').list_array_columns()

  assert len(rows) == 3
  sql, params = pool.executed[0]
  assert 'a.attnum > 0' in sql
  assert 'a.attndims > 0' in sql
  assert params == {'schema_name': 'public'}


@pytest.mark.asyncio
async def test_schema_columns_are_enriched_with_array_dimensions(catalog, pool):
  rows = await catalog.schema('public').list_columns()

  by_key = {(row['table_name'], row['column_name']): row for row in rows}
  assert len(rows) == 5
  assert by_key[('options', 'int_arr_dim2')]['array_dimension'] == 2
  assert by_key[('options', 'varchar_arr_dim1')]['array_dimension'] == 1
  assert by_key[('users', 'tags')]['array_dimension'] == 1
  assert 'array_dimension' not in by_key[('users', 'id')]
  assert by_key[('options', 'uuid')]['column_comment'] == 'primary key'
  assert pool.checkouts == pool.releases == 2


@pytest.mark.asyncio
async def test_table_columns_contain_id(catalog):
  rows = await catalog.schema('public').table('users').list_columns()

  assert rows
  assert any(row['column_name'] == 'id' for row in rows)


@pytest.mark.asyncio
async def test_table_columns_use_schema_wide_array_query(catalog, pool):
  rows = await catalog.schema('public').table('options').list_columns()

  assert [row['column_name'] for row in rows] == ['int_arr_dim2', 'uuid', 'varchar_arr_dim1']
  assert [row.get('array_dimension') for row in rows] == [2, None, 1]
  _, probe_params = pool.statements_matching('pg_attribute')[0]
  _, column_params = pool.statements_matching('information_schema.columns')[0]
  assert probe_params == {'schema_name': 'public'}
  assert column_params == {'database_name': 'demo', 'schema_name': 'public', 'table_name': 'options'}


@pytest.mark.asyncio
async def test_table_services_do_not_interfere(catalog):
  schema = catalog.schema('public')
  users = schema.table('users')
  options = schema.table('options')

  options_rows = await options.list_columns()
  users_rows = await users.list_columns()

  assert {row['table_name'] for row in users_rows} == {'users'}
  assert {row['table_name'] for row in options_rows} == {'options'}
  assert users.table_name == 'users'
  assert options.table_name == 'options'


@pytest.mark.asyncio
async def test_unknown_schema_yields_no_rows(catalog, logger):
  schema = catalog.schema('nope')

  assert await schema.list_columns() == []
  assert await schema.table('users').list_columns() == []
  logger.error.assert_not_called()


def test_table_factory_keeps_back_references(catalog):
  schema = catalog.schema('public')

  table = schema.table('users')

  assert isinstance(table, TableService)
  assert table.schema is schema


@pytest.mark.asyncio
async def test_failed_array_query_fails_the_call_and_releases_both_connections(make_pool, logger):
  pool = make_pool([
    ('pg_attribute', RuntimeError('permission denied for table pg_attribute')),
    ('information_schema.columns', _columns),
  ])
  catalog = CatalogService(pool, 'demo', logger)

  with pytest.raises(RuntimeError, match='permission denied'):
    await catalog.schema('public').list_columns()

  assert pool.checkouts == pool.releases == 2
  logger.error.assert_called_once()
  assert logger.error.call_args.args[0] == PG_MSG_DB_QUERY_ERROR


@pytest.mark.asyncio
async def test_failed_column_query_skips_array_query(make_pool, logger):
  pool = make_pool([
    ('pg_attribute', _array_columns),
    ('information_schema.columns', RuntimeError('canceling statement due to statement timeout')),
  ])
  catalog = CatalogService(pool, 'demo', logger)

  with pytest.raises(RuntimeError, match='statement timeout'):
    await catalog.schema('public').list_columns()

  assert pool.statements_matching('pg_attribute') == []
  assert pool.checkouts == pool.releases == 1
  logger.error.assert_called_once()
  assert logger.error.call_args.args[0] == PG_MSG_DB_QUERY_ERROR


@pytest.mark.asyncio
@pytest.mark.parametrize('table_name', [None, 'users'])
async def test_connection_failure_on_column_paths_is_logged_once(make_pool, logger, table_name):
  error = ConnectionRefusedError('connection refused')
  pool = make_pool([('pg_attribute', _array_columns), ('information_schema.columns', _columns)], connect_error=error)
  schema = CatalogService(pool, 'demo', logger).schema('public')
  service = schema.table(table_name) if table_name else schema

  with pytest.raises(ConnectionRefusedError) as excinfo:
    await service.list_columns()
  in_use = pool.checkouts - pool.releases
  await asyncio.sleep(0)

  assert excinfo.value is error
  assert in_use == 0
  assert pool.executed == []
  assert logger.error.call_count == 1
  assert logger.error.call_args.args[0] == PG_MSG_DB_CONN_ERROR
  assert logger.error.call_args.kwargs['exc_info'] is error
