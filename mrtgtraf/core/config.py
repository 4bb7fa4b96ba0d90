"""Check configuration and the optional YAML settings file."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml


PROJECT_CONFIG = Path(".mrtgtraf.yaml")


class Aggregation(Enum):
    """Which pair of rates from the log record is evaluated."""

    AVERAGE = "AVG"
    MAXIMUM = "MAX"

    @classmethod
    def from_token(cls, token: str | None) -> "Aggregation":
        """Only the literal "MAX" selects maximum; anything else is average."""
        if token == "MAX":
            return cls.MAXIMUM
        return cls.AVERAGE

    @property
    def label(self) -> str:
        """Short label used in the status message."""
        return "Ave" if self is Aggregation.AVERAGE else "Max"


@dataclass(frozen=True)
class Configuration:
    """Resolved settings for a single check run."""

    log_path: str
    expire_minutes: int | None = None
    aggregation: Aggregation = Aggregation.AVERAGE
    incoming_warning: int = 0
    incoming_critical: int = 0
    outgoing_warning: int = 0
    outgoing_critical: int = 0
    output_format: str = "plain"
    log_dir: Path | None = None

    @property
    def expiry_enabled(self) -> bool:
        return self.expire_minutes is not None and self.expire_minutes > 0


def user_config_path() -> Path:
    return Path.home() / ".config" / "mrtgtraf" / "config.yaml"


def load_config_file(path: Path) -> dict[str, Any]:
    """Load a YAML config file if it exists and is readable."""
    try:
        if not path.exists():
            return {}
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def get_config_value(key: str) -> Any:
    """Get config value with project -> user -> None precedence."""
    for path in (PROJECT_CONFIG, user_config_path()):
        data = load_config_file(path)
        if key in data:
            return data[key]
    return None
