"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ServerConfig(BaseModel):
    """Names and version advertised by the MCP servers."""

    patient_name: str = "patient-mcp"
    practitioner_name: str = "practitioner-mcp"
    version: str = "1.0.0"


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field(default="INFO")
    json_output: bool = True
    verbose_audit: bool = False

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


class SearchConfig(BaseModel):
    """Search engine behavior."""

    strict_date_bounds: bool = False


class DataConfig(BaseModel):
    """Record sources. None means the built-in seed records."""

    patients_file: Optional[str] = None
    practitioners_file: Optional[str] = None


class RegistryConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    data: DataConfig = Field(default_factory=DataConfig)

    model_config = {"populate_by_name": True}
