"""Core functionality for deployment-catalog"""

from .path_resolver import PathResolver
from .url_builder import UrlBuilder
from .digester import DeploymentDigester, file_extension
from .catalog import DeploymentCatalog, sort_deployments

__all__ = [
    "PathResolver",
    "UrlBuilder",
    "DeploymentDigester",
    "file_extension",
    "DeploymentCatalog",
    "sort_deployments",
]
