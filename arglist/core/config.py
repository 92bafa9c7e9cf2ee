"""Argument list parser configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserSettings(BaseSettings):
    """Argument list parser behavior settings."""

    STRICT_TIME_UNITS: bool = Field(
        default=False,
        alias="ARGLIST_STRICT_TIME_UNITS",
        description="Reject characters following a valid time unit instead of warning",
    )
    LOG_PARSE_ERRORS: bool = Field(
        default=True,
        alias="ARGLIST_LOG_PARSE_ERRORS",
        description="Emit a warning log event for every failed parse",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Argument list parser configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    parser: ParserSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "parser": ParserSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)


settings = Settings()
