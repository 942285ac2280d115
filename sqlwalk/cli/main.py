"""Command line interface for sqlwalk."""

import click
import json
import sys
from pathlib import Path
from typing import Union

from ..catalog import CATALOG, examples_for, get_example
from ..catalog.runner import describe_table, execute, list_tables, run_walkthrough
from ..config.logging_config import setup_logging
from ..config.settings import DATABASE_NAMES, SqlWalkConfig
from ..data.loader import build_database
from ..data.validators import SchemaValidator
from ..database.manager import ConnectionManager
from ..errors import SqlWalkError


DATABASE_CHOICE = click.Choice(DATABASE_NAMES)


def _fail(error: Union[str, Exception]) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True), help='Path to JSON configuration file')
@click.option('--data-dir', type=click.Path(file_okay=False), help='Directory holding animals.sqlite and sales.sqlite')
@click.option('--log-level', default=None, help='Logging level')
@click.option('--log-file', type=click.Path(), help='Log file path')
@click.option('--quiet', '-q', is_flag=True, help='No log output on the console (a --log-file still records)')
@click.pass_context
def cli(ctx, config, data_dir, log_level, log_file, quiet):
    """sqlwalk: an SQL walkthrough over two local sample databases"""
    ctx.ensure_object(dict)

    try:
        if config:
            with open(config) as f:
                config_data = json.load(f)
            walk_config = SqlWalkConfig.from_dict(config_data)
        else:
            walk_config = SqlWalkConfig.from_env()
    except (TypeError, ValueError) as e:
        _fail(f"Invalid configuration: {e}")

    if data_dir:
        walk_config.database.data_dir = Path(data_dir)
    if log_level:
        walk_config.log_level = log_level.upper()
    if log_file:
        walk_config.log_file = Path(log_file)

    try:
        walk_config.validate()
    except ValueError as e:
        _fail(e)

    setup_logging(walk_config.log_level, walk_config.log_file, quiet=quiet)

    ctx.obj['config'] = walk_config
    ctx.obj['manager'] = ConnectionManager(walk_config.database)


@cli.command()
@click.option('--database', '-d', 'databases', multiple=True, type=DATABASE_CHOICE,
              help='Only run examples for this database (repeatable)')
@click.option('--example', '-e', 'names', multiple=True, help='Only run this example (repeatable)')
@click.option('--max-rows', type=int, help='Rows to display per result')
@click.option('--keep-going', is_flag=True, help='Report query errors and continue')
@click.option('--output', '-o', type=click.Path(), help='Write all results to a JSON file')
@click.pass_context
def run(ctx, databases, names, max_rows, keep_going, output):
    """Run the walkthrough, printing each query and its result."""
    config = ctx.obj['config']
    max_rows = max_rows or config.max_display_rows

    runs = []
    failures = 0
    try:
        for example_run in run_walkthrough(ctx.obj['manager'], databases, names,
                                           stop_on_error=not keep_going):
            example = example_run.example
            click.echo(f"\n== {example.name} ({example.database}) ==")
            click.echo(example.explanation)
            click.echo(f"\n{example.sql}\n")

            if example_run.skipped:
                click.echo("Skipped: needs SQLite 3.39 or newer")
            elif example_run.error:
                failures += 1
                click.echo(f"Error: {example_run.error}", err=True)
            else:
                click.echo(example_run.result.render(max_rows))
                for mismatch in example_run.mismatches:
                    click.echo(f"Note: {mismatch}")

            runs.append(example_run)
    except (SqlWalkError, KeyError, ValueError) as e:
        _fail(e)

    if output:
        with open(output, 'w') as f:
            json.dump([r.to_dict() for r in runs], f, indent=2, default=str)
        click.echo(f"\nResults saved to: {output}")

    click.echo(f"\nRan {len(runs)} examples, {failures} failed")
    if failures:
        sys.exit(1)


@cli.command(name='list')
@click.option('--database', '-d', type=DATABASE_CHOICE, help='Only list examples for this database')
def list_examples(database):
    """List the walkthrough examples in order."""
    examples = examples_for(database) if database else CATALOG
    for example in examples:
        tables = ", ".join(example.tables)
        click.echo(f"{example.name:<28} {example.database:<8} {tables}")


@cli.command()
@click.argument('name')
def show(name):
    """Show one example's explanation and SQL."""
    try:
        example = get_example(name)
    except KeyError:
        _fail(f"Unknown example: {name}")

    click.echo(f"{example.name} ({example.database})")
    click.echo(f"Tables: {', '.join(example.tables)}")
    click.echo(f"\n{example.explanation}\n")
    click.echo(example.sql)
    if example.expected_row_count is not None:
        click.echo(f"\nExpected rows: {example.expected_row_count}")


@cli.command()
@click.argument('database')
@click.argument('sql')
@click.option('--max-rows', type=int, help='Rows to display')
@click.pass_context
def query(ctx, database, sql, max_rows):
    """Run an ad hoc query against DATABASE (a name or a file path)."""
    config = ctx.obj['config']
    try:
        with ctx.obj['manager'].session(database) as handle:
            result = execute(handle, sql)
    except SqlWalkError as e:
        _fail(e)

    click.echo(result.render(max_rows or config.max_display_rows))


@cli.command()
@click.argument('database')
@click.pass_context
def tables(ctx, database):
    """List the tables of DATABASE."""
    try:
        with ctx.obj['manager'].session(database) as handle:
            names = list_tables(handle)
            report = SchemaValidator().table_report(handle, database) if database in DATABASE_NAMES else {}
    except SqlWalkError as e:
        _fail(e)

    for name in names:
        click.echo(name)
    for table, present in report.items():
        if not present:
            click.echo(f"Missing: {table}", err=True)


@cli.command()
@click.argument('database')
@click.argument('table')
@click.pass_context
def describe(ctx, database, table):
    """Show the columns and row count of TABLE."""
    try:
        with ctx.obj['manager'].session(database) as handle:
            metadata = describe_table(handle, table)
    except SqlWalkError as e:
        _fail(e)

    click.echo(f"{metadata.name} ({metadata.row_count} rows)")
    for column in metadata.columns:
        flags = []
        if column.is_primary_key:
            flags.append("primary key")
        if not column.is_nullable:
            flags.append("not null")
        suffix = f"  [{', '.join(flags)}]" if flags else ""
        click.echo(f"  {column.name:<24} {column.data_type or '-'}{suffix}")


@cli.command()
@click.argument('database', type=DATABASE_CHOICE)
@click.argument('csv_files', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Database file to write (default: configured path)')
@click.pass_context
def load(ctx, database, csv_files, output):
    """Build DATABASE from CSV files, one table per file named after the file."""
    manager = ctx.obj['manager']
    db_path = Path(output) if output else manager.resolve(database)

    sources = {Path(csv_file).stem: Path(csv_file) for csv_file in csv_files}
    try:
        written = build_database(db_path, sources)
    except ValueError as e:
        _fail(e)

    for table, row_count in written.items():
        click.echo(f"{table}: {row_count} rows")
    click.echo(f"Wrote {db_path}")

    with manager.session(db_path) as handle:
        missing = SchemaValidator().missing_tables(handle, database)
    if missing:
        click.echo(f"Warning: walkthrough tables still missing: {', '.join(missing)}", err=True)


@cli.command()
@click.pass_context
def config_info(ctx):
    """Show current configuration."""
    config = ctx.obj['config']

    click.echo(" Current sqlwalk Configuration:")
    click.echo("=" * 40)

    for name in DATABASE_NAMES:
        click.echo(f"{name.capitalize()} database: {config.database.get_path(name)}")
    click.echo(f"Read-only: {config.database.read_only}")
    click.echo(f"Max display rows: {config.max_display_rows}")
    click.echo(f"Log level: {config.log_level}")


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
