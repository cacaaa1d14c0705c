"""Configuration loading service"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

import yaml

from ..api.exceptions import ConfigError
from ..constants import CONFIG_FILE, ENV_CONFIG_PATH
from ..models.config import DeployConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for locating and loading the deployment configuration"""

    def __init__(self,
                 config_path: Optional[Path] = None,
                 working_dir: Optional[Path] = None,
                 environ: Optional[Mapping[str, str]] = None):
        """Initialize config service

        Args:
            config_path: Explicit configuration file (must exist)
            working_dir: Directory searched for the default config file
            environ: Environment used for the config path override
        """
        self.explicit_path = Path(config_path) if config_path else None
        self.working_dir = Path(working_dir) if working_dir else Path.cwd()
        self.environ = os.environ if environ is None else environ
        self._config: Optional[DeployConfig] = None

    @property
    def config(self) -> DeployConfig:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def resolve_path(self) -> Optional[Path]:
        """Find the configuration file to read

        Returns:
            Path to the file, or None when built-in defaults apply

        Raises:
            ConfigError: If an explicitly requested file does not exist
        """
        if self.explicit_path:
            if not self.explicit_path.is_file():
                raise ConfigError(f"Configuration file not found: {self.explicit_path}")
            return self.explicit_path

        env_path = self.environ.get(ENV_CONFIG_PATH)
        if env_path:
            path = Path(env_path)
            if not path.is_file():
                raise ConfigError(f"Configuration file from {ENV_CONFIG_PATH} not found: {path}")
            return path

        default_path = self.working_dir / CONFIG_FILE
        if default_path.is_file():
            return default_path

        return None

    def load_config(self) -> DeployConfig:
        """Load configuration from file or defaults

        Returns:
            Loaded configuration
        """
        path = self.resolve_path()
        if path is None:
            logger.debug("No configuration file found, using defaults")
            self._config = DeployConfig()
            return self._config

        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
            self._config = DeployConfig.from_dict(data)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        except (ValueError, TypeError) as e:
            raise ConfigError(f"Invalid configuration in {path}: {e}") from e

        logger.info("Loaded configuration from %s", path)
        return self._config
