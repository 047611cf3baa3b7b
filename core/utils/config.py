"""
Configuration utility functions
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def load_yaml(filepath: str | Path) -> dict[str, Any]:
    """
    Load YAML file and return as dictionary

    Args:
        filepath: Path to YAML file (relative or absolute)

    Returns:
        Dictionary with YAML data (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file doesn't exist
        yaml.YAMLError: If YAML is invalid

    Example:
        >>> config = load_yaml("config/providers/storage.yaml")
        >>> print(config["oss"]["bucket"])
        media
    """
    path = Path(filepath)

    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {filepath}")

    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_yaml_safe(filepath: str | Path) -> dict[str, Any]:
    """
    Load YAML file with fallback to empty dict if missing or invalid

    Args:
        filepath: Path to YAML file

    Returns:
        Dictionary with YAML data, or empty dict
    """
    try:
        return load_yaml(filepath)
    except FileNotFoundError:
        logger.debug(f"No YAML config at {filepath}, using defaults")
        return {}
    except yaml.YAMLError as e:
        logger.warning(f"Invalid YAML in {filepath}, using defaults: {e}")
        return {}
