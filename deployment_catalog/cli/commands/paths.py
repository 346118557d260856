"""Path inspection command"""

import sys
from pathlib import Path

import click
from rich import box
from rich.table import Table

from ...api.exceptions import ConfigError
from ..utils.output import console


@click.command()
@click.pass_context
def paths(ctx):
    """Show the resolved catalog paths

    Useful to check which directory the catalog scans before listing.

    Examples:
        deployment-catalog --public-dir /srv/public paths
    """
    try:
        config = ctx.obj.config
    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        sys.exit(1)

    table = Table(title="Catalog Paths", box=box.ROUNDED)
    table.add_column("Path Type", style="cyan")
    table.add_column("Absolute Path", style="green")
    table.add_column("Exists", style="yellow")

    paths_info = [
        ("Public", config.public_dir),
        ("Deployments", config.deployments_root),
    ]

    for name, abs_path in paths_info:
        table.add_row(name, str(abs_path), "Yes" if abs_path.is_dir() else "No")

    console.print(table)

    console.print("\n[bold]Environment:[/bold]")
    console.print(f"  Current Directory: {Path.cwd()}")
    console.print(f"  Base URL: {ctx.obj.request_context.base_url}")
