# deployment_catalog/models/__init__.py
"""Data models for deployment-catalog"""

from .deployment import DeploymentDescriptor, FileEntry
from .config import CatalogConfig, UrlConfig
from .context import RequestContext

__all__ = [
    # Deployment models
    "DeploymentDescriptor",
    "FileEntry",

    # Config models
    "CatalogConfig",
    "UrlConfig",

    # Request models
    "RequestContext",
]
