"""Deployment Catalog - list and inspect packaged map data deployments.

Each deployment is a directory holding a ``manifest.json`` and any number
of ``.osm`` and ``.mbtiles`` data files.
"""

from .__version__ import __version__, __version_info__, __license__

# Exceptions
from .api.exceptions import (
    CatalogError,
    ConfigError,
    ValidationError,
    InvalidDeploymentNameError,
    DeploymentNotFoundError,
)

# Data models
from .models import (
    CatalogConfig,
    UrlConfig,
    DeploymentDescriptor,
    FileEntry,
    RequestContext,
)

# Core API
from .core import DeploymentCatalog, UrlBuilder
from .api.query import CatalogQuery, query

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__license__",

    # Main classes
    "DeploymentCatalog",
    "UrlBuilder",
    "CatalogQuery",
    "query",

    # Data models
    "CatalogConfig",
    "UrlConfig",
    "DeploymentDescriptor",
    "FileEntry",
    "RequestContext",

    # Exceptions
    "CatalogError",
    "ConfigError",
    "ValidationError",
    "InvalidDeploymentNameError",
    "DeploymentNotFoundError",
]
