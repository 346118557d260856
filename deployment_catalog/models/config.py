"""Configuration data models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Any

from ..api.exceptions import ConfigError
from ..constants import (
    DEFAULT_PUBLIC_DIR,
    DEFAULT_DEPLOYMENTS_DIR,
    DEFAULT_URL_SCHEME,
    DEFAULT_URL_HOST,
)


def _require_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string, got {value!r}")
    return value


@dataclass
class UrlConfig:
    """Where the catalog is served from, used to build locators"""

    scheme: str = DEFAULT_URL_SCHEME
    host: str = DEFAULT_URL_HOST
    path_prefix: str = ""

    def __post_init__(self):
        """Validate URL configuration"""
        _require_str(self.scheme, "url.scheme")
        _require_str(self.host, "url.host")
        _require_str(self.path_prefix, "url.path_prefix")

        if self.scheme not in ("http", "https"):
            raise ConfigError(f"Unsupported URL scheme: {self.scheme}")
        if not self.host:
            raise ConfigError("URL host is required")
        self.path_prefix = self.path_prefix.rstrip("/")
        if self.path_prefix and not self.path_prefix.startswith("/"):
            self.path_prefix = "/" + self.path_prefix

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "scheme": self.scheme,
            "host": self.host
        }
        if self.path_prefix:
            data["path_prefix"] = self.path_prefix
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UrlConfig':
        """Create from dictionary"""
        return cls(
            scheme=data.get("scheme", DEFAULT_URL_SCHEME),
            host=data.get("host", DEFAULT_URL_HOST),
            path_prefix=data.get("path_prefix", "")
        )


@dataclass
class CatalogConfig:
    """Catalog configuration

    ``public_dir`` is the directory served publicly; deployments live in
    its ``deployments_dir`` subdirectory.
    """

    public_dir: Path = field(default_factory=lambda: Path(DEFAULT_PUBLIC_DIR))
    deployments_dir: str = DEFAULT_DEPLOYMENTS_DIR
    url: UrlConfig = field(default_factory=UrlConfig)

    def __post_init__(self):
        """Validate catalog configuration"""
        if not isinstance(self.public_dir, (str, Path)):
            raise ConfigError(f"'public_dir' must be a path, got {self.public_dir!r}")
        _require_str(self.deployments_dir, "deployments_dir")
        self.public_dir = Path(self.public_dir).expanduser().resolve()

        if not self.deployments_dir or self.deployments_dir in (".", ".."):
            raise ConfigError(f"Invalid deployments directory: {self.deployments_dir!r}")
        if "/" in self.deployments_dir or "\\" in self.deployments_dir:
            raise ConfigError(
                f"Deployments directory must be a single path segment: {self.deployments_dir}"
            )

    @property
    def deployments_root(self) -> Path:
        """Absolute directory holding one subdirectory per deployment"""
        return self.public_dir / self.deployments_dir

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "public_dir": str(self.public_dir),
            "deployments_dir": self.deployments_dir,
            "url": self.url.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]],
                  base_dir: Optional[Path] = None) -> 'CatalogConfig':
        """Create from dictionary

        Args:
            data: Parsed configuration mapping
            base_dir: Directory that relative ``public_dir`` values resolve against
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")

        public_dir = _require_str(data.get("public_dir", DEFAULT_PUBLIC_DIR), "public_dir")
        public_dir = Path(public_dir).expanduser()
        if base_dir and not public_dir.is_absolute():
            public_dir = Path(base_dir) / public_dir

        url_data = data.get("url") or {}
        if not isinstance(url_data, dict):
            raise ConfigError("'url' must be a mapping")

        return cls(
            public_dir=public_dir,
            deployments_dir=data.get("deployments_dir", DEFAULT_DEPLOYMENTS_DIR),
            url=UrlConfig.from_dict(url_data)
        )
