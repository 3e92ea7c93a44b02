"""
chunder CLI - Command line interface for signaling host resolution.
"""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.table import Table

from .config import Config, DEFAULT_DATA_DIR
from .errors import InvalidArgumentError
from .regions import (
    DEFAULT_EDGE,
    DEFAULT_REGION,
    DEPRECATED_REGIONS,
    EDGE_TO_REGION,
    REGION_TO_EDGE,
    resolve_chunder_uri,
    resolve_region_uri,
    resolve_shortcode,
)

console = Console()


def setup_logging(verbose: bool = False):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler()]
    )


def _load_config(data_dir: Optional[str]) -> Config:
    return Config.load(Path(data_dir) if data_dir else DEFAULT_DATA_DIR)


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.pass_context
def main(ctx, verbose):
    """chunder - resolve signaling hosts from edges and regions"""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    setup_logging(verbose)


@main.command()
@click.option('--edge', '-e', help='Edge to connect through')
@click.option('--region', '-r', help='Legacy region (deprecated)')
@click.option('--legacy', is_flag=True, help='Use legacy region resolution')
@click.option('--json', 'as_json', is_flag=True, help='Output as JSON')
@click.option('--data-dir', type=click.Path(), help='Data directory')
def resolve(
    edge: Optional[str],
    region: Optional[str],
    legacy: bool,
    as_json: bool,
    data_dir: Optional[str],
):
    """Resolve the signaling hostname for an edge or region."""

    config = _load_config(data_dir)
    if edge is None and region is None:
        edge, region = config.edge, config.region

    advisories: List[str] = []

    try:
        if legacy:
            if edge:
                raise InvalidArgumentError("`--legacy` only accepts a region.")
            uri = resolve_region_uri(
                region,
                lambda new_region: advisories.append(
                    f'Region "{region}" is deprecated, use "{new_region}".'
                ),
            )
        else:
            uri = resolve_chunder_uri(edge, region, advisories.append)
    except InvalidArgumentError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps({
            "uri": uri,
            "deprecation": advisories[0] if advisories else None,
        }, indent=2))
        return

    if advisories and config.warn_deprecated:
        for advisory in advisories:
            console.print(f"[yellow]⚠️  {advisory}[/yellow]")

    click.echo(uri)


@main.command()
@click.argument('code')
def shortcode(code: str):
    """Look up the region for a region shortcode."""

    region = resolve_shortcode(code)
    if region is None:
        console.print(f"[red]Unknown shortcode: {code}[/red]")
        sys.exit(1)

    click.echo(region)


@main.command()
def edges():
    """List known edges and the region each one maps to."""

    table = Table(title="Edges", show_header=True, header_style="bold")
    table.add_column("Edge", style="cyan")
    table.add_column("Region")

    for edge, region in sorted(EDGE_TO_REGION.items()):
        label = f"{edge} [dim](default)[/dim]" if edge == DEFAULT_EDGE else edge
        table.add_row(label, region)

    console.print(table)


@main.command()
def regions():
    """List known regions with the edge that replaces them."""

    table = Table(title="Regions", show_header=True, header_style="bold")
    table.add_column("Region", style="cyan")
    table.add_column("Preferred Edge")

    for region, edge in sorted(REGION_TO_EDGE.items()):
        label = f"{region} [dim](default)[/dim]" if region == DEFAULT_REGION else region
        table.add_row(label, edge)

    console.print(table)

    deprecated = Table(title="Deprecated Regions", show_header=True, header_style="bold")
    deprecated.add_column("Region", style="yellow")
    deprecated.add_column("Successor")
    deprecated.add_column("Preferred Edge")

    for region, successor in sorted(DEPRECATED_REGIONS.items()):
        deprecated.add_row(region, successor, REGION_TO_EDGE.get(successor, ""))

    console.print(deprecated)


@main.command('config')
@click.option('--edge', '-e', help='Default edge')
@click.option('--region', '-r', help='Default region (deprecated)')
@click.option('--clear', is_flag=True, help='Clear the saved edge and region')
@click.option('--warn/--no-warn', default=None, help='Show deprecation warnings')
@click.option('--data-dir', type=click.Path(), help='Data directory')
def config_command(
    edge: Optional[str],
    region: Optional[str],
    clear: bool,
    warn: Optional[bool],
    data_dir: Optional[str],
):
    """Show or update the saved connection defaults."""

    config = _load_config(data_dir)
    changed = False

    if edge and region:
        console.print("[red]Set either an edge or a region, not both.[/red]")
        sys.exit(1)

    if clear:
        config.edge = None
        config.region = None
        changed = True

    if edge:
        config.edge, config.region = edge, None
        changed = True
    elif region:
        config.edge, config.region = None, region
        changed = True

    if warn is not None:
        config.warn_deprecated = warn
        changed = True

    if changed:
        config.save()
        console.print(f"[green]✓ Saved to {config.config_path}[/green]")

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="dim")
    table.add_column("Value")

    table.add_row("Edge", config.edge or "-")
    table.add_row("Region", config.region or "-")
    table.add_row("Warn Deprecated", "yes" if config.warn_deprecated else "no")
    table.add_row("Data Directory", str(config.data_dir))

    console.print(table)


if __name__ == "__main__":
    main()
