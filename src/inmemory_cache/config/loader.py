"""
Configuration Loader - YAML Loading with Validation.

Loads cache configuration from YAML files and validates it using the
Pydantic model. The file may either hold the settings at top level or
nest them under a ``cache:`` section.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from inmemory_cache.config.models import CacheConfig

SECTION_KEY = "cache"


class ConfigLoader:
    """Loads and validates cache configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
        """
        self._base_path = base_path or Path(".")

    def load(self, config_path: Union[str, Path]) -> CacheConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file

        Returns:
            Validated CacheConfig object

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        path = self._resolve_path(config_path)
        return self.load_from_dict(self._load_yaml(path))

    def load_from_dict(self, config_dict: Dict[str, Any]) -> CacheConfig:
        """
        Load configuration from dictionary.

        Args:
            config_dict: Configuration as dictionary

        Returns:
            Validated CacheConfig object

        Raises:
            ValidationError: If config is invalid or not a mapping
        """
        if isinstance(config_dict, dict):
            section = config_dict.get(SECTION_KEY)
            if isinstance(section, dict):
                config_dict = section
        return CacheConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve config path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file."""
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


def load_config(
    config_path: Union[str, Path],
    base_path: Optional[Path] = None,
) -> CacheConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        base_path: Base path for resolving relative paths

    Returns:
        Validated CacheConfig object
    """
    loader = ConfigLoader(base_path=base_path)
    return loader.load(config_path)
