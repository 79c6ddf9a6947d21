"""Library settings and configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Logging level")
    format: Literal["json", "text"] = Field(default="text", description="Log format")


class Settings(BaseSettings):
    """Main library settings.

    Built on demand by ``setup_logging`` rather than at import, so the
    environment is only read when the application asks for configuration.
    """

    model_config = SettingsConfigDict(
        env_prefix="NULLSAFE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
