"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use SHORTCODES_ prefix (e.g., SHORTCODES_STRICT_MODE=true).

Settings can also be loaded from a .env file in the working directory.
Shortcode syntax itself is fixed and not configurable here.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use SHORTCODES_ prefix.

    Examples:
        SHORTCODES_DOCUMENT_GLOB=**/*.markdown
        SHORTCODES_STRICT_MODE=true
        SHORTCODES_DEBUG_MODE=true
    """

    model_config = SettingsConfigDict(
        env_prefix="SHORTCODES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Document discovery
    document_glob: str = Field(
        default="**/*.md",
        description="Glob (relative to inputdir) selecting documents to transform",
    )

    # Failure handling
    strict_mode: bool = Field(
        default=False,
        description="Abort the whole run on the first document that fails to transform",
    )

    debug_mode: bool = Field(
        default=False,
        description="Print tracebacks for documents that fail to transform",
    )

    # Output configuration
    output_encoding: str = Field(
        default="utf-8",
        description="Encoding used to read and write documents",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
