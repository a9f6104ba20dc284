"""
Settings Module

USE: Loads runtime configuration for the client
HOW IT WORKS:
  - Built-in defaults cover every key
  - An optional YAML file is overlaid on the defaults, section by section
  - The file is taken from the explicit path, else FOOTBALL_CLI_CONFIG,
    else config/football_cli.yaml when it exists in the working directory
  - The merged values are frozen into a Settings instance that is passed
    to the credential bootstrap and the data gateway

FITS IN PROJECT:
  - Loaded once by the CLI before any report runs, immutable afterwards
"""

import copy
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .data.competitions import COMPETITION_IDS, DEFAULT_COMPETITION
from .errors import ConfigurationError, UnknownCompetitionError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FOOTBALL_CLI_CONFIG"
DEFAULT_CONFIG_PATH = Path("config") / "football_cli.yaml"

DEFAULTS: Dict[str, Any] = {
    'api': {
        'base_url': 'https://api.football-data.org/v4/',
        'token_env_var': 'X_AUTH_TOKEN',
        'token_header': 'X-Auth-Token',
        'timeout': 10,
    },
    'credentials': {
        'env_file': '.env',
        'persist': True,
    },
    'menu': {
        'max_attempts': 5,
    },
    'default_competition': DEFAULT_COMPETITION,
}


@dataclass(frozen=True)
class Settings:
    """Immutable runtime configuration."""
    base_url: str
    token_env_var: str
    token_header: str
    timeout: Optional[float]
    env_file: str
    persist_token: bool
    menu_max_attempts: int
    default_competition: str

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "Settings":
        api = config.get('api') or {}
        credentials = config.get('credentials') or {}
        menu = config.get('menu') or {}

        try:
            base_url = str(api['base_url'])
            if not base_url.endswith('/'):
                base_url += '/'

            timeout = api.get('timeout')
            values = dict(
                base_url=base_url,
                token_env_var=str(api['token_env_var']),
                token_header=str(api['token_header']),
                timeout=float(timeout) if timeout is not None else None,
                env_file=str(credentials['env_file']),
                persist_token=bool(credentials['persist']),
                menu_max_attempts=max(int(menu['max_attempts']), 1),
                default_competition=str(config['default_competition']),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid setting: {e!r}") from e

        if values['default_competition'] not in COMPETITION_IDS:
            raise UnknownCompetitionError(values['default_competition'], COMPETITION_IDS)

        return cls(**values)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        # An empty section ("api:") keeps its defaults
        if value is None and isinstance(merged.get(key), dict):
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_config(config_path: Path) -> Dict[str, Any]:
    """Load a YAML configuration file."""
    try:
        with open(config_path, 'r') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not read config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")
    return data


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Build Settings from defaults and an optional YAML file.

    Args:
        config_path: Explicit config file path (overrides FOOTBALL_CLI_CONFIG)

    Returns:
        Frozen Settings instance
    """
    path = config_path or os.getenv(CONFIG_ENV_VAR)
    if path:
        overrides = _load_config(Path(path))
        logger.debug(f"Loaded settings from {path}")
    elif DEFAULT_CONFIG_PATH.is_file():
        overrides = _load_config(DEFAULT_CONFIG_PATH)
        logger.debug(f"Loaded settings from {DEFAULT_CONFIG_PATH}")
    else:
        overrides = {}

    return Settings.from_dict(_merge(DEFAULTS, overrides))
