"""
Configuration Utilities

Loads and manages configuration from config/settings.yaml
"""

import copy
import os
import logging
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_CONFIG = {
    "filter": {
        "type": "one_pole",
        "value_type": "scalar",
        "cutoff_hz": 1.0,
        "sample_rate": 100.0,
        "q": 0.5
    },
    "logging": {
        "level": "INFO"
    }
}


def default_config_path() -> str:
    project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(project_root, "config", "settings.yaml")


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base. Empty (None) values keep the base value."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if value is None:
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: str = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Path to config file. If None, looks in config/settings.yaml

    Returns:
        Configuration dictionary, file values merged over DEFAULT_CONFIG
    """
    if config_path is None:
        config_path = default_config_path()

    if os.path.exists(config_path):
        logger.info(f"Loading config from {config_path}")
        try:
            with open(config_path, 'r') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config: {e}. Using defaults.")
            return copy.deepcopy(DEFAULT_CONFIG)
        if not isinstance(loaded, dict):
            logger.warning(f"Config {config_path} is not a mapping. Using defaults.")
            return copy.deepcopy(DEFAULT_CONFIG)
        return merge_config(DEFAULT_CONFIG, loaded)
    else:
        logger.info("No config file found. Using defaults.")
        return copy.deepcopy(DEFAULT_CONFIG)


def save_config(config: Dict[str, Any], config_path: str = None):
    """
    Save configuration to file.

    Args:
        config: Configuration dictionary
        config_path: Path to save to
    """
    if config_path is None:
        config_path = default_config_path()

    os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)

    with open(config_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False)

    logger.info(f"Config saved to {config_path}")
