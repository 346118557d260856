"""CLI utilities"""

from .output import (
    console,
    print_json,
    format_deployments_table,
    print_deployment_detail,
)

__all__ = [
    "console",
    "print_json",
    "format_deployments_table",
    "print_deployment_detail",
]
