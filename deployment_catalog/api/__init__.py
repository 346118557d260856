# deployment_catalog/api/__init__.py
"""API layer for deployment-catalog"""

from .exceptions import (
    CatalogError,
    ConfigError,
    ValidationError,
    InvalidDeploymentNameError,
    DeploymentNotFoundError,
)

__all__ = [
    "CatalogError",
    "ConfigError",
    "ValidationError",
    "InvalidDeploymentNameError",
    "DeploymentNotFoundError",
]
