"""
Configuration Loader - YAML Files, Profiles and Environment.

A config file may be overlaid by a named profile stored beside it
(``<config dir>/profiles/<name>.yaml``). Record file paths in the
``data`` section are resolved against the directory of the config file
they appear in.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from care_registry.config.models import RegistryConfig

logger = logging.getLogger(__name__)

# Environment variables read by the server entry points
CONFIG_ENV_VAR = "CARE_REGISTRY_CONFIG"
PROFILE_ENV_VAR = "CARE_REGISTRY_PROFILE"

PROFILE_DIR = "profiles"


class ConfigLoader:
    """Reads YAML config files into a validated RegistryConfig."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Args:
            base_path: Directory that relative config paths start from
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> RegistryConfig:
        """
        Load a config file, optionally overlaid by a profile.

        Raises:
            FileNotFoundError: If the config file or profile is missing
            pydantic.ValidationError: If the merged config is invalid
        """
        path = self._locate(config_path)
        settings = self._read(path)

        if profile:
            profile_path = path.parent / PROFILE_DIR / f"{profile}.yaml"
            if not profile_path.is_file():
                raise FileNotFoundError(f"Profile not found: {profile} ({profile_path})")
            settings = self._merge_configs(settings, self._read(profile_path))

        config = RegistryConfig.model_validate(settings)
        logger.debug(f"Loaded config from {path} (profile={profile})")
        return self._anchor_data_paths(config, path.parent)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> RegistryConfig:
        """Validate an in-memory config mapping."""
        return RegistryConfig.model_validate(config_dict)

    def _locate(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Recursively overlay one settings mapping onto another."""
        merged = dict(base)
        for key, value in overlay.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[key] = self._merge_configs(current, value)
            else:
                merged[key] = value
        return merged

    @staticmethod
    def _anchor_data_paths(config: RegistryConfig, directory: Path) -> RegistryConfig:
        def anchor(value: Optional[str]) -> Optional[str]:
            if value is None or Path(value).is_absolute():
                return value
            return str(directory.resolve() / value)

        data = config.data.model_copy(
            update={
                "patients_file": anchor(config.data.patients_file),
                "practitioners_file": anchor(config.data.practitioners_file),
            }
        )
        return config.model_copy(update={"data": data})


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> RegistryConfig:
    """Shortcut for ``ConfigLoader(base_path).load(config_path, profile)``."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)


def load_config_from_env() -> RegistryConfig:
    """
    Load the config file named by CARE_REGISTRY_CONFIG.

    CARE_REGISTRY_PROFILE, when set, selects a profile to overlay.
    Built-in defaults apply when no config file is named.
    """
    config_path = os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        return RegistryConfig()
    return load_config(config_path, profile=os.environ.get(PROFILE_ENV_VAR) or None)
