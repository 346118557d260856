"""Path resolution module for deployment-catalog"""

from pathlib import Path

from ..api.exceptions import InvalidDeploymentNameError
from ..models.config import CatalogConfig


class PathResolver:
    """Resolves paths within the deployments root"""

    def __init__(self, config: CatalogConfig):
        """Initialize path resolver

        Args:
            config: Catalog configuration
        """
        self.config = config

    @property
    def deployments_dir_name(self) -> str:
        """Name of the deployments subdirectory, as used in locators"""
        return self.config.deployments_dir

    def get_deployments_root(self) -> Path:
        """Get deployments root directory path

        Returns:
            Path to the directory holding one subdirectory per deployment
        """
        return self.config.deployments_root

    def get_deployment_dir(self, name: str) -> Path:
        """Get path for a deployment directory

        Args:
            name: Deployment name

        Returns:
            Path to the deployment directory
        """
        return self.get_deployments_root() / name

    def get_entry_path(self, deployment: str, entry: str) -> Path:
        """Get path for an entry inside a deployment directory

        Args:
            deployment: Deployment name
            entry: Child name inside the deployment directory

        Returns:
            Path to the entry
        """
        return self.get_deployment_dir(deployment) / entry

    def get_deployment_relative_dir(self, name: str) -> str:
        """Get a deployment directory relative to the public directory"""
        return f"{self.deployments_dir_name}/{name}"

    @staticmethod
    def validate_deployment_name(name: str) -> str:
        """Check that a name addresses exactly one directory under the root

        Args:
            name: Deployment name

        Returns:
            The name unchanged

        Raises:
            InvalidDeploymentNameError: If the name is empty, a relative
                reference or contains a path separator
        """
        if not name or name in (".", "..") or "/" in name or "\\" in name or "\0" in name:
            raise InvalidDeploymentNameError(name)
        return name
