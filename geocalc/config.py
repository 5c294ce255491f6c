"""
Configuration management for geocalc.

Uses pydantic-settings for environment variable loading with sensible defaults.
The calculation functions never read these settings; they only shape the
command line's logging and output.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """geocalc configuration."""

    # Logging
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Output
    precision: int | None = None  # digits to round to; None keeps full precision

    model_config = {
        "env_prefix": "GEOCALC_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
