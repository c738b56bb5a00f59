"""Application settings."""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    app_name: str = "Flink Job Lifecycle Engine"
    api_prefix: str = ""
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    allow_implicit_observe_time: bool = True

    @model_validator(mode="after")
    def validate_runtime_settings(self) -> "Settings":
        """Ensure server and logging settings are valid."""

        if self.port < 1:
            raise ValueError("FLINK_LC_PORT must be >= 1.")
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"FLINK_LC_LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}."
            )
        return self

    model_config = SettingsConfigDict(env_prefix="FLINK_LC_", extra="ignore")


__all__ = ["Settings"]
