"""Configuration management for jazz-search."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


# Default paths
DEFAULT_CONFIG_DIR = Path.home() / ".jazz-search"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.yaml"
CONFIG_PATH_ENV = "JAZZ_SEARCH_CONFIG"

SUPPORTED_LOCALES = ("en", "zh", "ja")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _expand_path(value: Optional[str]) -> Optional[Path]:
    """Expand ``~`` and ``${VAR}`` references in a configured path."""
    if not value:
        return None
    if value.startswith("${") and value.endswith("}"):
        value = os.environ.get(value[2:-1])
        if not value:
            return None
    return Path(os.path.expandvars(value)).expanduser()


@dataclass
class SearchConfig:
    """Search and result-capping configuration."""
    group_limit: int = 4  # Max items per kind when showing all types
    flat_limit: int = 20  # Max items when a single kind is selected
    strict_filters: bool = False  # Raise on unknown filters instead of falling back

    def __post_init__(self):
        for name in ("group_limit", "flat_limit"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


@dataclass
class Config:
    """Main configuration."""
    data_path: Optional[Path] = None
    locale: str = "en"
    log_level: str = "WARNING"
    search: SearchConfig = field(default_factory=SearchConfig)

    def __post_init__(self):
        if self.locale not in SUPPORTED_LOCALES:
            raise ValueError(
                f"Unsupported locale: {self.locale} (expected one of {', '.join(SUPPORTED_LOCALES)})"
            )
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level: {self.log_level} (expected one of {', '.join(LOG_LEVELS)})"
            )

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """Load configuration from YAML file."""
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"{config_path.name}: expected a mapping at the top level")

        # Parse search config
        search_data = data.get("search") or {}
        if not isinstance(search_data, dict):
            raise ValueError(f"{config_path.name}: 'search' must be a mapping")
        search = SearchConfig(
            group_limit=search_data.get("group_limit", 4),
            flat_limit=search_data.get("flat_limit", 20),
            strict_filters=bool(search_data.get("strict_filters", False)),
        )

        return cls(
            data_path=_expand_path(data.get("data_path")),
            locale=data.get("locale", "en"),
            log_level=str(data.get("log_level", "WARNING")).upper(),
            search=search,
        )

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save configuration to YAML file."""
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "locale": self.locale,
            "log_level": self.log_level,
            "search": {
                "group_limit": self.search.group_limit,
                "flat_limit": self.search.flat_limit,
                "strict_filters": self.search.strict_filters,
            },
        }

        if self.data_path:
            data["data_path"] = str(self.data_path)

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def default_config_path() -> Path:
    """Return the config file path, honouring ``JAZZ_SEARCH_CONFIG``."""
    override = os.environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


# Global config instance (lazy loaded)
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def reload_config() -> Config:
    """Reload configuration from disk."""
    global _config
    _config = Config.load()
    return _config
