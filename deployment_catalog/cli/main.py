# deployment_catalog/cli/main.py
"""Main CLI entry point for deployment-catalog"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.logging import RichHandler

from ..constants import APP_NAME, LOG_FORMAT, ENV_LOG_LEVEL
from ..core import DeploymentCatalog
from ..models import CatalogConfig, RequestContext
from ..services import ConfigService
from .utils.output import console

# Import all commands
from .commands import (
    listing,
    show,
    paths
)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.getLevelName(os.environ.get(ENV_LOG_LEVEL, "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )

    # Adjust third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiofiles").setLevel(logging.WARNING)


class Context:
    """CLI context object with lazy configuration loading

    Configuration and the catalog are only built when a command asks for
    them, so ``--help`` works without a valid configuration.
    """

    def __init__(self, config_path: Optional[Path] = None, public_dir: Optional[Path] = None):
        """Initialize CLI context"""
        self.config_path = config_path
        self.public_dir = public_dir
        self.verbose: bool = False
        self.debug: bool = False
        self._config: Optional[CatalogConfig] = None
        self._catalog: Optional[DeploymentCatalog] = None

    @property
    def config(self) -> CatalogConfig:
        """Get catalog configuration (lazy loading)"""
        if self._config is None:
            config = ConfigService(self.config_path).config
            if self.public_dir is not None:
                config = CatalogConfig(
                    public_dir=self.public_dir,
                    deployments_dir=config.deployments_dir,
                    url=config.url
                )
            self._config = config
        return self._config

    @property
    def catalog(self) -> DeploymentCatalog:
        """Get deployment catalog (lazy loading)"""
        if self._catalog is None:
            self._catalog = DeploymentCatalog(self.config)
        return self._catalog

    @property
    def request_context(self) -> RequestContext:
        """Request context used for locators in CLI output"""
        return RequestContext.from_url_config(self.config.url)


@click.group(name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option('-c', '--config', 'config_path', type=click.Path(path_type=Path),
              help='Configuration file (default: .deployment-catalog.yaml)')
@click.option('--public-dir', type=click.Path(file_okay=False, path_type=Path),
              help='Public directory containing the deployments directory')
@click.pass_context
def cli(ctx, verbose, debug, quiet, config_path, public_dir):
    """Deployment Catalog - inspect packaged map data deployments

    Each deployment is a directory under <public-dir>/deployments holding a
    manifest.json and any number of .osm and .mbtiles files.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(config_path=config_path, public_dir=public_dir)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(listing.list_deployments)
cli.add_command(show.show)
cli.add_command(paths.paths)


def main():
    """Main entry point for the CLI application"""
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
