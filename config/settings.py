# config/settings.py
# ============================================================
# Centralized Configuration for pagebinder
# ============================================================
# All settings are loaded from environment variables (or .env file).
# Pydantic validates types and provides sensible defaults.
#
# Per-document layout options live in ConversionOptions
# (pagebinder.layout.options); this module only holds the
# process-wide defaults used by the CLI and the logger.
#
# Usage:
#   from config.settings import settings
#   print(settings.default_page_size)
# ============================================================

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application-wide settings. Values are loaded from environment variables
    or a .env file. Every setting has a typed default so the converter can
    run out-of-the-box with zero configuration.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Document defaults ---
    default_page_size: str = Field(
        default="A4",
        description="Named page size used when the CLI is not given --size.",
    )
    default_output: str = Field(
        default="output.pdf",
        description="Output file written when no --output is given.",
    )

    # --- Input ---
    sort_directory_listing: bool = Field(
        default=True,
        description=(
            "Sort image files found in a directory by name. When disabled, "
            "the operating system's listing order is kept."
        ),
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG | INFO | WARNING | ERROR.",
    )


# ============================================================
# Singleton instance - import this everywhere:
#   from config.settings import settings
# ============================================================
settings = Settings()
