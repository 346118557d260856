"""Command line interface for deployment-catalog"""

from .main import cli, main

__all__ = ["cli", "main"]
