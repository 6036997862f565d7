"""class-select CLI entry point."""
from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from class_select import __version__
from class_select.config import ClassSelectConfig


@click.group()
@click.version_option(version=__version__, prog_name="class-select")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Class select: CSS class options declared in stylesheet comments."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _read_css(css_file: str) -> str:
    return Path(css_file).read_text(encoding="utf-8")


def _selector(css_file: str, prefix: str, marker: str):
    from class_select.service import ClassSelect

    config = ClassSelectConfig(variable_prefix=prefix, declaration_name=marker)
    return ClassSelect(config, css_source=_read_css(css_file))


@cli.command()
@click.argument("css_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--prefix", default="custom_class", help="Variable prefix")
@click.option("--marker", default="", help="Declaration name (defaults to the prefix)")
def scan(css_file: str, prefix: str, marker: str) -> None:
    """List the class declarations found in a CSS file."""
    from class_select.parser import parse_declaration, scan_declarations

    config = ClassSelectConfig(variable_prefix=prefix, declaration_name=marker)
    bodies = scan_declarations(_read_css(css_file), config.marker_name)

    skipped = 0
    for body in bodies:
        atts = parse_declaration(body)
        if atts is None:
            skipped += 1
            continue
        parts = [f"  {atts.class_name}"]
        if atts.label != atts.class_name:
            parts.append(f'label="{atts.label}"')
        parts.append(f"scope={','.join(atts.scopes)}")
        if atts.group:
            parts.append(f'group="{atts.group}"')
        if atts.bare_tokens:
            parts.append(f"ignored={','.join(atts.bare_tokens)}")
        click.echo("  ".join(parts))

    click.echo()
    click.echo(f"Summary: {len(bodies) - skipped} declaration(s), {skipped} skipped")


@cli.command()
@click.argument("css_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--scope", default="", help="Scope key, e.g. global or context:row")
@click.option("--prefix", default="custom_class", help="Variable prefix")
@click.option("--marker", default="", help="Declaration name (defaults to the prefix)")
def classes(css_file: str, scope: str, prefix: str, marker: str) -> None:
    """Print the class registry (or one scope of it) as JSON."""
    selector = _selector(css_file, prefix, marker)
    click.echo(json.dumps(selector.get_classes(scope), indent=2))


@cli.command()
@click.argument("css_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--context", "context_id", required=True, help="Requesting context id")
@click.option("--prefix", default="custom_class", help="Variable prefix")
@click.option("--marker", default="", help="Declaration name (defaults to the prefix)")
def options(css_file: str, context_id: str, prefix: str, marker: str) -> None:
    """Print the grouped class options for a context as JSON."""
    selector = _selector(css_file, prefix, marker)
    click.echo(json.dumps(selector.options_for(context_id).to_options(), indent=2))


@cli.command()
@click.option(
    "--css",
    "css_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="CSS file holding class declarations",
)
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--db", default="class_select.db", help="Cache database path")
@click.option("--prefix", default="custom_class", help="Variable prefix")
@click.option("--marker", default="", help="Declaration name (defaults to the prefix)")
@click.option("--cache-name", default="", help="Cache name (defaults to one derived from the prefix)")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(
    css_file: str,
    host: str,
    port: int,
    db: str,
    prefix: str,
    marker: str,
    cache_name: str,
    debug: bool,
) -> None:
    """Start the class options web server."""
    from class_select.service import ClassSelect
    from class_select.store import Database, SqliteCache, run_migrations
    from class_select.web.app import create_app

    config = ClassSelectConfig(
        variable_prefix=prefix,
        declaration_name=marker,
        cache_name=cache_name,
        db_path=db,
        host=host,
        port=port,
    )
    database = Database(config.db_path)
    database.connect()
    run_migrations(database)

    selector = ClassSelect(
        config,
        # Re-read on every rebuild so a flush picks up edits to the file.
        css_source=lambda: _read_css(css_file),
        cache=SqliteCache(database, config.cache_key),
    )
    app = create_app(selector=selector)
    click.echo(f"Starting class select on {host}:{port}")
    app.run(host=host, port=port, debug=debug)


@cli.command()
@click.option("--db", default="class_select.db", help="Cache database path")
@click.option("--prefix", default="custom_class", help="Variable prefix")
@click.option("--cache-name", default="", help="Cache name (defaults to one derived from the prefix)")
def flush(db: str, prefix: str, cache_name: str) -> None:
    """Delete the persisted class registry."""
    from class_select.store import Database, SqliteCache, run_migrations

    config = ClassSelectConfig(variable_prefix=prefix, cache_name=cache_name, db_path=db)
    database = Database(config.db_path)
    database.connect()
    try:
        run_migrations(database)
        SqliteCache(database, config.cache_key).delete()
    finally:
        database.close()

    click.echo(f"Cache flushed: {config.cache_key}")
