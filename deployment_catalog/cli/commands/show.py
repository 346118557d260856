"""Single deployment command"""

import sys

import click

from ...api.exceptions import CatalogError, DeploymentNotFoundError
from ...utils.async_utils import run_async
from ..utils.output import console, print_json, print_deployment_detail


@click.command()
@click.argument('name', required=True)
@click.option('--json', 'as_json', is_flag=True, help='Output the deployment as JSON')
@click.pass_context
def show(ctx, name, as_json):
    """Show detailed information about a deployment

    Arguments:
        NAME: Deployment directory name

    Examples:
        deployment-catalog show kathmandu
    """
    try:
        deployment = run_async(
            ctx.obj.catalog.get_deployment(ctx.obj.request_context, name)
        )
    except DeploymentNotFoundError:
        console.print(f"[red]Deployment not found: {name}[/red]")
        sys.exit(1)
    except (CatalogError, OSError) as e:
        console.print(f"[red]Error reading deployment: {e}[/red]")
        if ctx.obj.debug:
            console.print_exception()
        sys.exit(1)

    if as_json:
        print_json(deployment.to_dict())
    else:
        print_deployment_detail(deployment)
