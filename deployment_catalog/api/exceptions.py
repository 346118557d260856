"""Exception definitions for deployment-catalog API"""

import errno

from ..constants import ErrorCode


class CatalogError(Exception):
    """Base exception for deployment-catalog"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(CatalogError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class ValidationError(CatalogError):
    """Validation error"""

    def __init__(self, message: str, error_code: str = ErrorCode.VALIDATION_FAILED):
        super().__init__(message, error_code)


class InvalidDeploymentNameError(ValidationError):
    """Deployment name cannot address a directory under the deployments root"""

    def __init__(self, name: str):
        message = f"Invalid deployment name: {name!r}"
        super().__init__(message, ErrorCode.INVALID_DEPLOYMENT_NAME)
        self.name = name


class DeploymentNotFoundError(CatalogError, FileNotFoundError):
    """Named deployment directory does not exist"""

    def __init__(self, name: str, path: str = None):
        message = f"Deployment not found: {name}"
        super().__init__(message, ErrorCode.DEPLOYMENT_NOT_FOUND)
        self.name = name
        self.path = path
        self.errno = errno.ENOENT
