"""
Configuration management for the calculator engine.

Handles loading configuration from environment variables and an optional
.env file, and provides defaults for every setting.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from calc_engine.models import FormatPolicy


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    app_name: str = "Calc Engine"
    debug: bool = False
    log_level: str = "WARNING"

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000

    # Result formatting
    format_policy: FormatPolicy = FormatPolicy.SHORTEST
    fixed_precision: int = Field(default=10, ge=0, le=17)

    # Parser limits
    max_nesting_depth: int = Field(default=100, ge=1)  # Must stay well below sys.getrecursionlimit()
    max_expression_length: int = Field(default=1000, ge=1)


class ShellConfig(BaseSettings):
    """Interactive shell configuration."""

    model_config = SettingsConfigDict(env_prefix="CALC_SHELL_")

    prompt: str = "calc> "
    chain_results: bool = True  # Prepend the last result when a line starts with an operator


# Global settings instance
settings = Settings()
shell_config = ShellConfig()
