"""CLI entry point for swagger-docgen."""

import json
import logging
from pathlib import Path

import click

from swagger_docgen.config import DocumentationConfig, load_config
from swagger_docgen.docs.assembler import describe_resource, list_resources
from swagger_docgen.errors import SwaggerDocError
from swagger_docgen.routes.index import ResourceIndex
from swagger_docgen.routes.loader import load_catalog, load_index
from swagger_docgen.server import create_app, documentation_routes


def _load(routes_file: Path, **overrides) -> tuple[ResourceIndex, DocumentationConfig]:
    """Load the index and options of a route file, overriding options given on the command line."""
    try:
        config = load_config(routes_file).with_overrides(**overrides)
        index = load_index(routes_file)
    except SwaggerDocError as e:
        raise click.ClickException(str(e)) from e
    return index, config


def _write(doc: dict, output: Path | None) -> None:
    text = json.dumps(doc, indent=2, ensure_ascii=False)
    if output is None:
        click.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Documentation saved to {output}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages.")
def main(verbose: bool):
    """swagger-docgen: Swagger 1.1 documentation from route metadata."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("routes_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the JSON document to this file.")
@click.option("--base-path", default=None, help="basePath of the document.")
@click.option("--api-version", default=None, help="apiVersion of the document.")
@click.option("--hide-documentation-path/--show-documentation-path", default=None, help="Leave the documentation resource out of the listing.")
def listing(routes_file: Path, output: Path | None, base_path: str | None, api_version: str | None, hide_documentation_path: bool | None):
    """Print the resource listing for a route file."""
    index, config = _load(
        routes_file,
        base_path=base_path,
        api_version=api_version,
        hide_documentation_path=hide_documentation_path,
    )
    index.register_all(documentation_routes(config.mount_path))
    index.freeze()

    doc = list_resources(
        index,
        config.mount_path,
        config.api_version,
        config.base_path,
        config.hide_documentation_path,
    )
    _write(doc.to_dict(), output)


@main.command()
@click.argument("routes_file", type=click.Path(exists=True, path_type=Path))
@click.argument("name")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the JSON document to this file.")
@click.option("--base-path", default=None, help="basePath of the document.")
@click.option("--api-version", default=None, help="apiVersion of the document.")
@click.option("--markdown/--no-markdown", default=None, help="Render route notes from Markdown to HTML.")
def describe(routes_file: Path, name: str, output: Path | None, base_path: str | None, api_version: str | None, markdown: bool | None):
    """Print the API declaration of resource NAME."""
    index, config = _load(routes_file, base_path=base_path, api_version=api_version, markdown=markdown)
    index.register_all(documentation_routes(config.mount_path))
    index.freeze()
    try:
        catalog = load_catalog(routes_file)
    except SwaggerDocError as e:
        raise click.ClickException(str(e)) from e

    routes = index.routes_for(name.lower())
    if not routes:
        click.echo(f"No routes registered under '{name}'.", err=True)

    doc = describe_resource(routes, catalog, config.api_version, config.base_path, config.markdown)
    _write(doc.to_dict(), output)


@main.command()
@click.argument("routes_file", type=click.Path(exists=True, path_type=Path))
@click.option("--host", default="127.0.0.1", help="Interface to listen on.")
@click.option("--port", default=5000, type=int, help="Port to listen on.")
def serve(routes_file: Path, host: str, port: int):
    """Serve the documentation endpoints for a route file."""
    index, config = _load(routes_file)
    try:
        catalog = load_catalog(routes_file)
    except SwaggerDocError as e:
        raise click.ClickException(str(e)) from e

    app = create_app(index, catalog, config)
    click.echo(f"Serving {len(index)} resources at http://{host}:{port}{config.mount_path}")
    app.run(host=host, port=port)
