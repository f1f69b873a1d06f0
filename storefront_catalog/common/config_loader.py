"""
Configuration Loader

Loads YAML configuration files. The catalog settings name the data
directory and the export file names the loaders read from.
"""

import os
from pathlib import Path
from typing import Any, Dict

import yaml

DATA_DIR_ENV = "CATALOG_DATA_DIR"

CATALOG_DEFAULTS = {
    'data_dir': '.',
    'products_file': 'products.csv',
    'categories_file': 'categories.csv',
    'encoding': 'utf-8',
}


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'catalog.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def default_catalog_settings() -> Dict[str, Any]:
    """Built-in catalog settings with the CATALOG_DATA_DIR override applied."""
    settings = dict(CATALOG_DEFAULTS)
    _apply_env_overrides(settings)
    return settings


def _apply_env_overrides(settings: Dict[str, Any]) -> None:
    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        settings['data_dir'] = env_dir


def load_catalog_settings() -> Dict[str, Any]:
    """
    Load catalog settings, filling in defaults for missing keys.

    The CATALOG_DATA_DIR environment variable overrides ``data_dir``.

    Returns:
        Dictionary with data_dir, products_file, categories_file, encoding

    Raises:
        FileNotFoundError: If the config directory or file doesn't exist
        yaml.YAMLError: If catalog.yaml is not valid YAML
        ValueError: If catalog.yaml or its 'catalog' section is not a mapping

    Example:
        {
            'data_dir': 'data',
            'products_file': 'products.csv',
            'categories_file': 'categories.csv',
            'encoding': 'utf-8',
        }
    """
    config = load_config('catalog.yaml')
    if not isinstance(config, dict):
        raise ValueError("catalog.yaml must contain a mapping")

    catalog = config.get('catalog') or {}
    if not isinstance(catalog, dict):
        raise ValueError("'catalog' section in catalog.yaml must be a mapping")

    settings = dict(CATALOG_DEFAULTS)
    settings.update(catalog)
    _apply_env_overrides(settings)
    return settings


def resolve_data_dir(settings: Dict[str, Any]) -> Path:
    """
    Resolve the configured data directory.

    Relative paths are taken from the repository root (the parent of
    the config directory), so loaders behave the same from any cwd.
    """
    data_dir = Path(settings['data_dir'])
    if data_dir.is_absolute():
        return data_dir
    return _get_config_dir().parent / data_dir
