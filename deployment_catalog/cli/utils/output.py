# deployment_catalog/cli/utils/output.py
"""Output formatting utilities"""

import json
from typing import Any, List

import click
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...constants import FILE_KINDS, EMOJI_SUCCESS, EMOJI_ERROR
from ...models import DeploymentDescriptor
from ...utils.formatting import format_size, format_timestamp

console = Console()


def print_json(data: Any) -> None:
    """Print data as indented JSON, bypassing rich so lines are never wrapped"""
    click.echo(json.dumps(data, indent=2))


def format_deployments_table(deployments: List[DeploymentDescriptor]) -> Table:
    """Build the deployment listing table"""
    table = Table(title="Deployments", box=box.ROUNDED)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Status", style="bold")
    for kind in FILE_KINDS:
        table.add_column(kind, justify="right")
    table.add_column("Size", justify="right", style="yellow")

    for deployment in deployments:
        if deployment.valid:
            status = f"[green]{EMOJI_SUCCESS} valid[/green]"
            counts = [str(len(deployment.files[kind])) for kind in FILE_KINDS]
            size = format_size(deployment.total_size)
        else:
            status = f"[red]{EMOJI_ERROR} {deployment.message}[/red]"
            counts = ["-" for _ in FILE_KINDS]
            size = "-"
        table.add_row(deployment.name, status, *counts, size)

    return table


def print_deployment_detail(deployment: DeploymentDescriptor) -> None:
    """Display one deployment with its files"""
    if not deployment.valid:
        console.print(Panel(
            f"[red]{EMOJI_ERROR} {deployment.message}[/red]",
            title=deployment.name,
            border_style="red"
        ))
        return

    lines = [
        f"[green]{EMOJI_SUCCESS}[/green] Valid deployment",
        "",
        f"[bold]URL:[/bold] {deployment.url}",
        f"[bold]Listing:[/bold] {deployment.listing_url}",
        f"[bold]Files:[/bold] {deployment.file_count} ({format_size(deployment.total_size)})",
    ]
    console.print(Panel("\n".join(lines), title=deployment.name, border_style="green"))

    if not deployment.file_count:
        return

    table = Table(box=box.ROUNDED)
    table.add_column("Kind", style="cyan")
    table.add_column("Name")
    table.add_column("Size", justify="right", style="yellow")
    table.add_column("Modified", style="dim")
    table.add_column("Download", style="blue")

    for kind in FILE_KINDS:
        for entry in deployment.files[kind]:
            table.add_row(
                kind,
                entry.name,
                format_size(entry.size),
                format_timestamp(entry.last_modified),
                entry.download_url
            )

    console.print(table)
