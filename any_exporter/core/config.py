"""Application settings.

Values come from the environment (prefix ``ANY_EXPORTER_``) or a local
``.env`` file; the CLI in ``main.py`` can override host and port.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the exporter process."""

    model_config = SettingsConfigDict(
        env_prefix="ANY_EXPORTER_",
        env_file=".env",
        extra="ignore",
    )

    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    @field_validator("PORT")
    @classmethod
    def _check_port(cls, value: int) -> int:
        if value < 0 or value > 65535:
            raise ValueError(f"Invalid port number: {value}")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.upper()


settings = Settings()
