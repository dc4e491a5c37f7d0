"""Runtime settings for retrait."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TraitSettings(BaseSettings):
    """
    Settings for retrait.

    Values are loaded from ``RETRAIT_``-prefixed environment variables and/or a
    .env file.
    """

    log_level: str = Field(
        default="WARNING",
        description="Level used by setup_logging() when none is given explicitly.",
    )
    warn_on_reattach: bool = Field(
        default=False,
        description="Log a warning instead of a debug record when an attachment is overwritten.",
    )

    model_config = SettingsConfigDict(
        env_prefix="RETRAIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Global settings instance, initialized when this module is imported.
settings = TraitSettings()
