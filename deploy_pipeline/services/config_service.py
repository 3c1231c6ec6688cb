"""Configuration management service"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..constants import (
    ENV_CONFIG_PATH,
    ENV_LOG_LEVEL,
    ENV_NON_INTERACTIVE,
    ENV_STATE_DIR,
    PROJECT_CONFIG_FILE,
)
from ..exceptions import ConfigError
from ..models.config import Config

logger = logging.getLogger(__name__)


class ConfigService:
    """Load configuration from defaults, a YAML file and the environment"""

    def __init__(self,
                 config_path: Optional[Path] = None,
                 environ: Optional[Mapping[str, str]] = None,
                 working_dir: Optional[Path] = None):
        """Initialize config service

        Args:
            config_path: Explicit config file (overrides discovery)
            environ: Environment mapping (defaults to os.environ)
            working_dir: Directory searched for the project config file
        """
        self.environ = environ if environ is not None else os.environ
        self.working_dir = Path(working_dir) if working_dir else Path.cwd()
        self.config_path = Path(config_path) if config_path else self._discover_config_file()
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def _discover_config_file(self) -> Optional[Path]:
        env_path = self.environ.get(ENV_CONFIG_PATH)
        if env_path:
            return Path(env_path).expanduser()

        candidate = self.working_dir / PROJECT_CONFIG_FILE
        if candidate.exists():
            return candidate

        return None

    def load_config(self) -> Config:
        """Load configuration

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the file is missing, unreadable or invalid
        """
        data: Dict[str, Any] = {}

        if self.config_path is not None:
            data.update(self._read_file(self.config_path))

        data.update(self._read_environment())

        try:
            self._config = Config.from_dict(
                data,
                config_file=str(self.config_path) if self.config_path else None
            )
        except ValueError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        logger.debug("Loaded configuration: %s", self._config.to_dict())
        return self._config

    def _read_file(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
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
            raise ConfigError(f"Configuration file {path} must contain a mapping")

        return data

    def _read_environment(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}

        if self.environ.get(ENV_STATE_DIR):
            data["state_dir"] = self.environ[ENV_STATE_DIR]

        if self.environ.get(ENV_NON_INTERACTIVE):
            data["non_interactive"] = self.environ[ENV_NON_INTERACTIVE]

        if self.environ.get(ENV_LOG_LEVEL):
            data["log_level"] = self.environ[ENV_LOG_LEVEL]

        return data


def load_config(config_path: Optional[Path] = None,
                environ: Optional[Mapping[str, str]] = None) -> Config:
    """Load configuration in one call"""
    return ConfigService(config_path=config_path, environ=environ).load_config()
