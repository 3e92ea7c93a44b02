"""
Configuration management for chunder.

Handles:
- Default edge / region selection
- Deprecation warning preference
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging

from .regions import MessageCallback, resolve_chunder_uri

logger = logging.getLogger(__name__)

# Default paths
DEFAULT_DATA_DIR = Path.home() / ".chunder"


@dataclass
class Config:
    """
    Client connection defaults.

    Stored at ~/.chunder/config.json
    """
    # Paths
    data_dir: Path = field(default_factory=lambda: DEFAULT_DATA_DIR)

    # Only one of these may be set; see resolve_uri()
    edge: Optional[str] = None
    region: Optional[str] = None

    warn_deprecated: bool = True

    @property
    def config_path(self) -> Path:
        return self.data_dir / "config.json"

    def ensure_data_dir(self) -> None:
        """Create data directory if it doesn't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def to_dict(self) -> dict:
        return {
            "edge": self.edge,
            "region": self.region,
            "warn_deprecated": self.warn_deprecated,
        }

    @classmethod
    def from_dict(cls, data: dict, data_dir: Optional[Path] = None) -> "Config":
        # Filter to only known fields to handle config evolution
        return cls(
            data_dir=data_dir or DEFAULT_DATA_DIR,
            edge=data.get("edge"),
            region=data.get("region"),
            warn_deprecated=data.get("warn_deprecated", True),
        )

    def resolve_uri(self, on_deprecated: Optional[MessageCallback] = None) -> str:
        """Resolve the signaling hostname for the configured edge or region."""
        return resolve_chunder_uri(self.edge, self.region, on_deprecated)

    def save(self) -> None:
        """Save configuration to disk."""
        self.ensure_data_dir()

        with open(self.config_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.debug(f"Configuration saved to {self.config_path}")

    @classmethod
    def load(cls, data_dir: Optional[Path] = None) -> "Config":
        """Load configuration from disk."""
        data_dir = data_dir or DEFAULT_DATA_DIR
        config_path = data_dir / "config.json"

        if not config_path.exists():
            return cls(data_dir=data_dir)

        with open(config_path, 'r') as f:
            data = json.load(f)

        return cls.from_dict(data, data_dir=data_dir)

    @classmethod
    def exists(cls, data_dir: Optional[Path] = None) -> bool:
        """Check if configuration exists."""
        data_dir = data_dir or DEFAULT_DATA_DIR
        return (data_dir / "config.json").exists()


# Global config instance
_config: Optional[Config] = None


def get_config(data_dir: Optional[Path] = None) -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load(data_dir)
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global configuration instance."""
    global _config
    _config = None
