"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the Care Registry:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - RegistryConfig: Root configuration object
    - ServerConfig: MCP server names and version
    - LoggingConfig: Log level, JSON output, audit verbosity
    - SearchConfig: Search engine behavior
    - DataConfig: Record file locations

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles
    - Config file and profile from CARE_REGISTRY_CONFIG and
      CARE_REGISTRY_PROFILE
"""

from care_registry.config.loader import (
    CONFIG_ENV_VAR,
    PROFILE_ENV_VAR,
    ConfigLoader,
    load_config,
    load_config_from_env,
)
from care_registry.config.models import (
    DataConfig,
    LoggingConfig,
    RegistryConfig,
    SearchConfig,
    ServerConfig,
)

__all__ = [
    "CONFIG_ENV_VAR",
    "PROFILE_ENV_VAR",
    "ConfigLoader",
    "load_config",
    "load_config_from_env",
    "DataConfig",
    "LoggingConfig",
    "RegistryConfig",
    "SearchConfig",
    "ServerConfig",
]
