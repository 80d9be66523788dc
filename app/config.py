"""
Application Settings

Values come from the environment (prefix ``PLASMA_``); a local ``.env``
file is loaded first when present.
"""
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PLASMA_",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    app_name: str = "Plasma Rule Engine API"
    app_version: str = "1.0.0"
    api_v1_prefix: str = "/api/v1"
    cors_origins: str = "*"  # comma-separated

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
