"""CLI adapter for browsing catalog metadata."""
from __future__ import annotations

import asyncio
from typing import Any, Mapping, Optional

import click

from pginfo.adapters.output.database.statements import DEFAULT_TYPE_CATALOG
from pginfo.application.commands.catalog_query_command import CatalogQueryCommand, CatalogTarget
from pginfo.application.handlers.catalog_query_handler import CatalogQueryHandler
from pginfo.application.queries.query_result import QueryResult, QueryStatus
from pginfo.ports.input.result_presenter import ResultPresenter


class CLIAdapter:
  def __init__(self, handler: CatalogQueryHandler, presenters: Mapping[str, ResultPresenter]):
    self._handler = handler
    self._presenters = presenters

  def run(self, args: Optional[list] = None) -> None:
    cli = self.build()
    cli(args=args)

  def build(self) -> click.Group:
    cli = click.Group(help='Browse PostgreSQL catalog metadata.')
    output_option = click.option(
      '--format', 'output_format',
      type=click.Choice(sorted(self._presenters)),
      default='text',
      show_default=True,
      help='Output format',
    )

    @cli.command('schemas')
    @click.option('--all', 'include_system', is_flag=True, help='Include information_schema and pg_* schemas')
    @output_option
    def schemas(include_system: bool, output_format: str) -> None:
      """List the schemas of the database."""
      self._dispatch(output_format, target=CatalogTarget.SCHEMAS, include_system_schemas=include_system)

    @cli.command('domains')
    @output_option
    def domains(output_format: str) -> None:
      """List the domains of the database."""
      self._dispatch(output_format, target=CatalogTarget.DOMAINS)

    @cli.command('types')
    @click.option('--catalog', 'catalog_name', default=DEFAULT_TYPE_CATALOG, show_default=True,
                  help='Schema holding the pg_type catalog')
    @output_option
    def types(catalog_name: str, output_format: str) -> None:
      """List low-level type descriptors from pg_type."""
      self._dispatch(output_format, target=CatalogTarget.TYPE_DESCRIPTORS, catalog_name=catalog_name)

    @cli.command('tables')
    @click.argument('schema')
    @output_option
    def tables(schema: str, output_format: str) -> None:
      """List the base tables of SCHEMA."""
      self._dispatch(output_format, target=CatalogTarget.TABLES, schema_name=schema)

    @cli.command('user-defined-types')
    @click.argument('schema')
    @output_option
    def user_defined_types(schema: str, output_format: str) -> None:
      """List the user-defined types of SCHEMA."""
      self._dispatch(output_format, target=CatalogTarget.USER_DEFINED_TYPES, schema_name=schema)

    @cli.command('attributes')
    @click.argument('schema')
    @output_option
    def attributes(schema: str, output_format: str) -> None:
      """List the attributes of the composite types in SCHEMA."""
      self._dispatch(output_format, target=CatalogTarget.ATTRIBUTES, schema_name=schema)

    @cli.command('columns')
    @click.argument('schema')
    @click.option('--table', 'table_name', default=None, help='Only list the columns of this table')
    @output_option
    def columns(schema: str, table_name: Optional[str], output_format: str) -> None:
      """List the columns of SCHEMA, with array dimensions."""
      self._dispatch(output_format, target=CatalogTarget.COLUMNS, schema_name=schema, table_name=table_name)

    @cli.command('array-columns')
    @click.argument('schema')
    @output_option
    def array_columns(schema: str, output_format: str) -> None:
      """List the array columns of SCHEMA and their dimensions."""
      self._dispatch(output_format, target=CatalogTarget.ARRAY_COLUMNS, schema_name=schema)

    return cli

  def _dispatch(self, output_format: str, **fields: Any) -> None:
    presenter = self._presenters[output_format]
    try:
      command = CatalogQueryCommand(**fields)
    except ValueError as exc:
      click.echo(presenter.present_error(exc), err=True)
      raise click.exceptions.Exit(2)

    result = asyncio.run(self._execute(command))
    click.echo(presenter.present(result))
    if result.status == QueryStatus.ERROR:
      raise click.exceptions.Exit(1)

  async def _execute(self, command: CatalogQueryCommand) -> QueryResult:
    try:
      return await self._handler.handle(command)
    finally:
      await self._handler.close()
