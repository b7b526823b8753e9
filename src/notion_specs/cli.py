"""CLI entry point for notion-specs."""

from pathlib import Path

import click
from pydantic import ValidationError

from notion_specs.config import LOG_LEVELS, Settings, get_settings
from notion_specs.core.errors import SpecError
from notion_specs.logging_config import setup_logging
from notion_specs.notion.endpoints import get_registry
from notion_specs.openapi import dump_document, to_openapi


@click.group()
@click.option("--log-level", default=None, type=click.Choice(LOG_LEVELS, case_sensitive=False), help="Override the configured log level.")
@click.pass_context
def main(ctx: click.Context, log_level: str | None):
    """Notion endpoint specs: inspect and export the endpoint table."""
    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.ClickException(f"Invalid NOTION_SPECS_* settings:\n{e}") from e
    ctx.obj = settings
    setup_logging(log_level or settings.log_level)


@main.command("list")
@click.option("--tag", default=None, help="Only show endpoints with this tag.")
def list_endpoints(tag: str | None):
    """List registered endpoints."""
    registry = get_registry()
    specs = registry.by_tag(tag) if tag else list(registry)
    for spec in specs:
        click.echo(f"{spec.method:<6} {spec.path:<20} {spec.name}")


@main.command()
@click.argument("name")
@click.option("--format", "fmt", default="yaml", type=click.Choice(["yaml", "json"]), help="Output format.")
def show(name: str, fmt: str):
    """Print the structural document of one endpoint."""
    try:
        spec = get_registry().get(name)
    except SpecError as e:
        raise click.ClickException(str(e)) from e
    click.echo(dump_document(spec.to_document(), fmt), nl=False)


@main.command()
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file path for the OpenAPI document.")
@click.option("--format", "fmt", default="yaml", type=click.Choice(["yaml", "json"]), help="Output format.")
@click.option("--tag", default=None, help="Only export endpoints with this tag.")
@click.pass_obj
def export(settings: Settings, output: Path, fmt: str, tag: str | None):
    """Write the endpoint table as an OpenAPI document."""
    registry = get_registry()
    specs = registry.by_tag(tag) if tag else list(registry)
    doc = to_openapi(specs, settings)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_document(doc, fmt), encoding="utf-8")
    click.echo(f"Exported {len(specs)} endpoints to {output}")
