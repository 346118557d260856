"""Configuration management service"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..api.exceptions import ConfigError
from ..constants import (
    PROJECT_CONFIG_FILE,
    ENV_CONFIG_PATH,
    ENV_PUBLIC_DIR,
    ENV_DEPLOYMENTS_DIR,
)
from ..models.config import CatalogConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading catalog configuration

    Resolution order: explicit path, ``DEPLOYMENT_CATALOG_CONFIG``,
    ``.deployment-catalog.yaml`` in the working directory. A missing
    default file is not an error; defaults are used instead. Environment
    overrides are applied last.
    """

    def __init__(self,
                 config_path: Optional[Path] = None,
                 working_dir: Optional[Path] = None,
                 environ: Optional[Mapping[str, str]] = None):
        """Initialize config service

        Args:
            config_path: Explicit configuration file
            working_dir: Directory searched for the default configuration file
            environ: Environment mapping (``os.environ`` by default)
        """
        self.environ = os.environ if environ is None else environ
        self.working_dir = Path(working_dir) if working_dir else Path.cwd()
        self.explicit = config_path is not None or bool(self.environ.get(ENV_CONFIG_PATH))

        if config_path is None and self.environ.get(ENV_CONFIG_PATH):
            config_path = Path(self.environ[ENV_CONFIG_PATH])
        self.config_path = Path(config_path) if config_path else self.working_dir / PROJECT_CONFIG_FILE
        self._config: Optional[CatalogConfig] = None

    @property
    def config(self) -> CatalogConfig:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def load_config(self) -> CatalogConfig:
        """Load configuration from file and environment

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If an explicit file is missing or any file is malformed
        """
        data: Dict[str, Any] = {}
        base_dir = self.working_dir

        if self.config_path.exists():
            data = self._read_file(self.config_path)
            base_dir = self.config_path.resolve().parent
            logger.debug(f"Loaded configuration from {self.config_path}")
        elif self.explicit:
            raise ConfigError(f"Configuration file not found: {self.config_path}")
        else:
            logger.debug(f"No configuration file at {self.config_path}, using defaults")

        data = self._apply_env_overrides(data)
        self._config = CatalogConfig.from_dict(data, base_dir=base_dir)
        return self._config

    def _read_file(self, path: Path) -> Dict[str, Any]:
        with open(path, 'r') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration must be a mapping: {path}")
        return data

    def _apply_env_overrides(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data = dict(data)
        if self.environ.get(ENV_PUBLIC_DIR):
            # Relative to the working directory, not the config file
            data['public_dir'] = str(self.working_dir / Path(self.environ[ENV_PUBLIC_DIR]).expanduser())
        if self.environ.get(ENV_DEPLOYMENTS_DIR):
            data['deployments_dir'] = self.environ[ENV_DEPLOYMENTS_DIR]
        return data
