"""Configuration management for projfs."""
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from .. import constants
from ..utils.exceptions import ConfigValidationError

def init_paths(base_path: Optional[Path] = None) -> None:
    """Initialize global paths for projfs.

    Args:
        base_path: Optional custom base path. If None, uses ~/.config/projfs

    Raises:
        ValueError: If base_path does not exist and cannot be created
    """
    if base_path is not None and not (base_path.exists() or base_path.parent.exists()):
        raise ValueError(f"Base path {base_path} does not exist and cannot be created")

    constants.PROJFS_HOME = base_path or Path.home() / ".config" / "projfs"
    constants.PROJFS_CONFIG_FILE = constants.PROJFS_HOME / "config.yaml"

def _ensure_config_dir() -> None:
    """Ensure configuration directory exists.

    Raises:
        RuntimeError: If directory cannot be created
    """
    try:
        constants.PROJFS_HOME.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RuntimeError(f"Failed to create config directory {constants.PROJFS_HOME}: {e}")

def load_config() -> Dict[str, Any]:
    """Load configuration, layering the YAML file over the defaults.

    Raises:
        ConfigValidationError: If the file is not valid YAML or not a mapping
    """
    config = constants.DEFAULT_CONFIG.copy()
    if not constants.PROJFS_CONFIG_FILE.exists():
        return config

    try:
        with open(constants.PROJFS_CONFIG_FILE, 'r') as f:
            user_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Failed to load config file {constants.PROJFS_CONFIG_FILE}: {e}")

    if not isinstance(user_config, dict):
        raise ConfigValidationError(
            f"Config file {constants.PROJFS_CONFIG_FILE} must contain a mapping, "
            f"got {type(user_config).__name__}"
        )
    config.update(user_config)
    return config

def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to the YAML file.

    Args:
        config: Configuration dictionary to save

    Raises:
        RuntimeError: If config cannot be saved
    """
    _ensure_config_dir()
    try:
        with open(constants.PROJFS_CONFIG_FILE, 'w') as f:
            yaml.dump(config, f)
    except (yaml.YAMLError, OSError) as e:
        raise RuntimeError(f"Failed to save config file {constants.PROJFS_CONFIG_FILE}: {e}")

def get_setting(key: str) -> Any:
    """Get a single configuration value (defaults applied)."""
    return load_config().get(key)
