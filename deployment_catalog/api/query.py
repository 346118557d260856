"""Query API for deployment information"""

from typing import Any, Dict, List, Optional

from ..constants import FILE_KINDS
from ..core import DeploymentCatalog
from ..models import CatalogConfig, DeploymentDescriptor, RequestContext
from ..services import ConfigService
from ..utils.async_utils import run_async


class CatalogQuery:
    """Synchronous query interface over the deployment catalog"""

    def __init__(self,
                 config: Optional[CatalogConfig] = None,
                 context: Optional[RequestContext] = None,
                 catalog: Optional[DeploymentCatalog] = None):
        """
        Initialize query interface

        Args:
            config: Catalog configuration (loaded via ConfigService if omitted)
            context: Request context for locators (built from config if omitted)
            catalog: Catalog instance to query
        """
        if catalog is not None:
            config = catalog.config
        self.config = config or ConfigService().config
        self.context = context or RequestContext.from_url_config(self.config.url)
        self.catalog = catalog or DeploymentCatalog(self.config)

    def list_deployments(self) -> List[DeploymentDescriptor]:
        """
        List all deployments

        Returns:
            Descriptors sorted by name
        """
        return run_async(self.catalog.list_deployments(self.context))

    def get_deployment(self, name: str) -> DeploymentDescriptor:
        """
        Get one deployment

        Args:
            name: Deployment name

        Returns:
            Deployment descriptor
        """
        return run_async(self.catalog.get_deployment(self.context, name))

    def summary(self) -> Dict[str, Any]:
        """
        Get catalog statistics

        Returns:
            Counts of deployments and files, and total data size
        """
        deployments = self.list_deployments()
        valid = [d for d in deployments if d.valid]

        files = {kind: 0 for kind in FILE_KINDS}
        for deployment in valid:
            for kind, entries in deployment.files.items():
                files[kind] += len(entries)

        return {
            'total': len(deployments),
            'valid': len(valid),
            'invalid': len(deployments) - len(valid),
            'files': files,
            'total_size': sum(d.total_size for d in valid)
        }


# Global query instance
_query_instance = None


def query() -> CatalogQuery:
    """
    Get query interface (singleton)

    Returns:
        CatalogQuery instance
    """
    global _query_instance
    if _query_instance is None:
        _query_instance = CatalogQuery()
    return _query_instance
