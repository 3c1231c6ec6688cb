"""Services for deploy-pipeline"""

from .config_service import ConfigService, load_config

__all__ = [
    "ConfigService",
    "load_config",
]
