"""Application configuration using pydantic-settings."""

import platform
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and .env file.

    Environment variables take precedence over .env file values.
    CLI flags take precedence over both.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = Field(default="execbridge", description="Application name")
    log_level: str = Field(default="INFO", description="Logging level")

    # Host platform
    os_name: str = Field(
        default_factory=platform.system,
        description="Reported OS name, matched case-insensitively for 'windows'",
    )

    # exec-maven-plugin coordinates
    exec_maven_plugin_version: str = Field(
        default="1.2.1",
        description="Version of exec-maven-plugin to render",
    )

    # Command defaults
    working_directory: str = Field(
        default=".",
        description="Working directory passed to the executed process",
    )
    show_colors: bool = Field(
        default=False,
        description="Let tasks print colors in their output",
    )
    whitespace_replacement: str = Field(
        default="=",
        description="Replacement for the whitespace between an option and its value",
    )

    # Task executables
    grunt_executable: str = Field(default="grunt", description="Grunt executable name")
    npm_executable: str = Field(default="npm", description="npm executable name")
    bower_executable: str = Field(default="bower", description="Bower executable name")

    # Execution
    exec_timeout: int | None = Field(
        default=None,
        description="Timeout in seconds for executed commands (None waits forever)",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings instance (cached for performance)

    Example:
        >>> settings = get_settings()
        >>> print(settings.exec_maven_plugin_version)
        '1.2.1'
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
