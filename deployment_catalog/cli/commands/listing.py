"""Deployment listing command"""

import sys

import click

from ...api.exceptions import CatalogError
from ...utils.async_utils import run_async
from ..utils.output import console, print_json, format_deployments_table


@click.command(name='list')
@click.option('--json', 'as_json', is_flag=True, help='Output the catalog as JSON')
@click.option('--all/--valid-only', 'show_all', default=True,
              help='Include or hide deployments without a manifest')
@click.pass_context
def list_deployments(ctx, as_json, show_all):
    """List all deployments

    Examples:
        # Show the catalog as a table
        deployment-catalog list

        # Dump the catalog as JSON
        deployment-catalog list --json
    """
    try:
        deployments = run_async(
            ctx.obj.catalog.list_deployments(ctx.obj.request_context)
        )
    except (CatalogError, OSError) as e:
        console.print(f"[red]Error listing deployments: {e}[/red]")
        if ctx.obj.debug:
            console.print_exception()
        sys.exit(1)

    if not show_all:
        deployments = [d for d in deployments if d.valid]

    if as_json:
        print_json([d.to_dict() for d in deployments])
        return

    if not deployments:
        console.print("[yellow]No deployments found[/yellow]")
        return

    console.print(format_deployments_table(deployments))

    invalid = sum(1 for d in deployments if not d.valid)
    if invalid:
        console.print(f"\n[dim]{invalid} of {len(deployments)} deployment(s) are missing a manifest.[/dim]")
