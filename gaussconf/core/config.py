from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Gauss Confidence"
    environment: str = "development"
    # stdout carries only the score, so diagnostics stay quiet unless asked for.
    log_level: str = Field(default="WARNING", validation_alias="LOG_LEVEL")
    # Structured event log; events are dropped when unset.
    event_log_path: str | None = Field(default=None, validation_alias="EVENT_LOG_PATH")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
    )


settings = Settings()
