"""Configuration loading for Folio."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import structlog
import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from folio.config.settings import FolioConfig
from folio.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default.yaml"
ENV_CONFIG_PATH = "FOLIO_CONFIG"

# (environment variable, section, key)
ENV_OVERRIDES = [
    ("FOLIO_SITE_TITLE", "site", "title"),
    ("FOLIO_ERROR_TOLERANCE", "processing", "error_tolerance"),
    ("FOLIO_LOG_LEVEL", "logging", "level"),
    ("FOLIO_TEMPLATE_DIR", "render", "template_dir"),
]


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file: {e}", source=path) from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file: {e}", source=path) from e

    if not isinstance(data, dict):
        raise ConfigurationError("Config file must contain a mapping", source=path)
    return data


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if value is None and isinstance(merged.get(key), dict):
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _config_locations(config_path: Optional[Union[str, Path]]) -> List[Path]:
    locations = []
    if config_path:
        locations.append(Path(config_path).expanduser())
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        locations.append(Path(env_path).expanduser())
    locations.append(Path("folio.yaml"))
    return locations


def load_config(
    config_path: Optional[Union[str, Path]] = None, use_dotenv: bool = True
) -> FolioConfig:
    """Load configuration from file and environment variables.

    The bundled defaults are always read first; the first existing file from
    the explicit path, ``$FOLIO_CONFIG`` and ``./folio.yaml`` is merged on top,
    then ``FOLIO_*`` environment variables are applied.

    Args:
        config_path: Path to config file. Must exist when given.
        use_dotenv: Whether to read a ``.env`` file into the environment first

    Returns:
        Validated configuration object

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    if config_path and not Path(config_path).expanduser().exists():
        raise ConfigurationError("Config file not found", source=config_path)

    config_data = _read_yaml(DEFAULT_CONFIG_PATH)
    for path in _config_locations(config_path):
        if path.exists():
            logger.debug("config_file_loaded", path=str(path))
            config_data = _merge(config_data, _read_yaml(path))
            break

    for env_var, section, key in ENV_OVERRIDES:
        if env_var in os.environ:
            if not isinstance(config_data.get(section), dict):
                config_data[section] = {}
            config_data[section][key] = os.environ[env_var]

    try:
        return FolioConfig(**config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
