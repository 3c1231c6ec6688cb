"""Configuration data models"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from ..constants import DEFAULT_STATE_DIR

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off", "")


def parse_bool(value: Any, field_name: str) -> bool:
    """
    Parse a boolean setting given as a bool or a true/false word

    Raises:
        ValueError: If the value is neither
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid value '{value}' for '{field_name}', expected true or false")


@dataclass
class Config:
    """Runtime configuration for deploy-pipeline"""

    state_dir: str = DEFAULT_STATE_DIR
    non_interactive: bool = False
    log_level: str = "WARNING"
    config_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration"""
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{self.log_level}', expected one of: {', '.join(LOG_LEVELS)}"
            )
        if not self.state_dir:
            raise ValueError("'state_dir' cannot be empty")

    @property
    def state_path(self) -> Path:
        """State directory with '~' expanded"""
        return Path(self.state_dir).expanduser()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "state_dir": self.state_dir,
            "non_interactive": self.non_interactive,
            "log_level": self.log_level
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], config_file: Optional[str] = None) -> 'Config':
        """Create from dictionary"""
        return cls(
            state_dir=data.get("state_dir", DEFAULT_STATE_DIR),
            non_interactive=parse_bool(data.get("non_interactive", False), "non_interactive"),
            log_level=data.get("log_level", "WARNING"),
            config_file=config_file
        )
