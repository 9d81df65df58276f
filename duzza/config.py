"""League configuration management."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from .constants import TEAM_NAMES
from .schemas import LeagueConfig
from .utils import load_json

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'league_config.json'


@lru_cache(maxsize=1)
def get_config(config_path: Optional[Path] = None) -> LeagueConfig:
    """
    Load league configuration from data/league_config.json.

    Configuration is cached after first load.

    Args:
        config_path: Alternative config file (default: data/league_config.json)

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the config file has an invalid structure
    """
    return load_json(config_path or DEFAULT_CONFIG_PATH, schema=LeagueConfig)


def get_current_year(config_path: Optional[Path] = None) -> int:
    """Get the current season year from config."""
    return get_config(config_path).current_year


def get_team_names(config_path: Optional[Path] = None) -> dict[str, str]:
    """Team names from config, falling back to the built-in names."""
    return get_config(config_path).team_names or dict(TEAM_NAMES)


def clear_config_cache() -> None:
    """Clear the cached configuration so the next get_config() rereads the file."""
    get_config.cache_clear()
