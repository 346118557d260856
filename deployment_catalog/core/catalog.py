"""Deployment catalog: scanning the deployments root"""

import logging
from typing import List, Optional

from .digester import DeploymentDigester
from .path_resolver import PathResolver
from .url_builder import UrlBuilder
from ..api.exceptions import DeploymentNotFoundError
from ..models.config import CatalogConfig
from ..models.context import RequestContext
from ..models.deployment import DeploymentDescriptor
from ..storage.base import FilesystemBackend
from ..storage.filesystem import LocalFilesystem
from ..utils.async_utils import gather_all

logger = logging.getLogger(__name__)


def sort_deployments(deployments: List[DeploymentDescriptor]) -> List[DeploymentDescriptor]:
    """Sort descriptors by name using ordinal string comparison"""
    return sorted(deployments, key=lambda d: d.name)


class DeploymentCatalog:
    """Lists and resolves deployments under the configured root

    Nothing is cached: every call scans the filesystem again.
    """

    def __init__(self,
                 config: CatalogConfig,
                 backend: Optional[FilesystemBackend] = None,
                 url_builder: Optional[UrlBuilder] = None):
        """
        Initialize deployment catalog

        Args:
            config: Catalog configuration
            backend: Filesystem backend (local filesystem by default)
            url_builder: Locator builder
        """
        self.config = config
        self.path_resolver = PathResolver(config)
        self.backend = backend or LocalFilesystem()
        self.digester = DeploymentDigester(
            self.path_resolver,
            self.backend,
            url_builder or UrlBuilder()
        )

    async def list_deployments(self, context: RequestContext) -> List[DeploymentDescriptor]:
        """
        Build the catalog of every deployment under the root

        A missing root yields an empty catalog. Any other I/O failure,
        during any stage, aborts the whole build.

        Args:
            context: Request context used for locators

        Returns:
            Descriptors sorted by name
        """
        root = self.path_resolver.get_deployments_root()

        try:
            entries = await self.backend.listdir(root)
        except FileNotFoundError:
            logger.info(f"Deployments root does not exist: {root}")
            return []

        if not entries:
            logger.debug(f"Deployments root is empty: {root}")
            return []

        # Probe every top-level entry, keep directories
        flags = await gather_all(
            self.backend.is_dir(self.path_resolver.get_deployment_dir(entry))
            for entry in entries
        )
        names = [entry for entry, is_dir in zip(entries, flags) if is_dir]
        logger.debug(f"Found {len(names)} deployment directories out of {len(entries)} entries")

        listings = await gather_all(
            self.backend.listdir(self.path_resolver.get_deployment_dir(name))
            for name in names
        )

        deployments = [
            self.digester.digest(context, name, contents)
            for name, contents in zip(names, listings)
        ]
        return sort_deployments(deployments)

    async def get_deployment(self, context: RequestContext, name: str) -> DeploymentDescriptor:
        """
        Resolve a single deployment by name

        Args:
            context: Request context used for locators
            name: Deployment directory name

        Returns:
            Deployment descriptor

        Raises:
            InvalidDeploymentNameError: If the name cannot address a deployment
            DeploymentNotFoundError: If the deployment directory does not exist
            OSError: On any other I/O failure
        """
        self.path_resolver.validate_deployment_name(name)
        path = self.path_resolver.get_deployment_dir(name)

        try:
            await self.backend.stat(path)
        except FileNotFoundError as e:
            raise DeploymentNotFoundError(name, str(path)) from e

        contents = await self.backend.listdir(path)
        return self.digester.digest(context, name, contents)
