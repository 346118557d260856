# deployment_catalog/services/__init__.py
"""Services for deployment-catalog"""

from .config_service import ConfigService

__all__ = [
    "ConfigService",
]
