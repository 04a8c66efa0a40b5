"""
Configuration Settings.

This module defines the editor kit configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FactoryFailurePolicy(str, Enum):
    """How the kit builder reacts when a dynamic extension factory fails."""

    fail_fast = "fail_fast"
    isolate = "isolate"


class ExtensionFactorySetting(BaseModel):
    """A statically configured extension factory registration."""

    priority: Union[int, float] = Field(..., description="Ordering key of the produced extension")
    create: str = Field(..., description="Factory reference in 'package.module:attribute' form")
    name: Optional[str] = Field(default=None, description="Optional label used in logs and errors")


class Settings(BaseSettings):
    """
    Editor kit settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="TEXT_EDITOR_KIT_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="TEXT_EDITOR_KIT_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="TEXT_EDITOR_KIT_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write DEBUG-level logs to a file under log_file_dir",
        alias="TEXT_EDITOR_KIT_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Kit Composition Configuration
    # =====================================================================
    default_mode: Optional[Literal["full", "compact"]] = Field(
        default=None,
        description="Editor mode captured by the default kit cache (full or compact); unset means full",
        alias="TEXT_EDITOR_KIT_DEFAULT_MODE",
    )
    entry_point_group: str = Field(
        default="text_editor_kit.extension_factories",
        description="Entry-point group scanned for plugin extension factories",
        alias="TEXT_EDITOR_KIT_ENTRY_POINT_GROUP",
    )
    extension_factories: List[ExtensionFactorySetting] = Field(
        default_factory=list,
        description="JSON list of extra extension factories ({priority, create, name})",
        alias="TEXT_EDITOR_KIT_EXTENSION_FACTORIES",
    )
    factory_failure_policy: FactoryFailurePolicy = Field(
        default=FactoryFailurePolicy.fail_fast,
        description="fail_fast aborts the whole build on a factory error; isolate skips the failing factory",
        alias="TEXT_EDITOR_KIT_FACTORY_FAILURE_POLICY",
    )

    # =====================================================================
    # Blob Resolution Configuration
    # =====================================================================
    blob_base_url: str = Field(
        default="/files",
        description="Base URL the default blob resolver joins file ids onto",
        alias="TEXT_EDITOR_KIT_BLOB_BASE_URL",
    )


settings = Settings()
