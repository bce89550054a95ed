# clinic/config.py
import os
from datetime import time
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application Settings
    APP_NAME: str = "Clinic Registry API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = int(os.environ.get("PORT", 8000))

    # CORS Settings (comma-separated)
    ALLOWED_ORIGINS: str = "*"

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Scheduling rules (both bounds inclusive)
    OPENING_TIME: time = time(8, 0)
    CLOSING_TIME: time = time(19, 0)
    # Drop a doctor's/patient's appointments when they leave the registry
    CASCADE_ON_REMOVE: bool = False

    # Load the demo clinic on startup
    SEED_DEMO_DATA: bool = True

    def _split_csv(self, value: str) -> List[str]:
        if value is None:
            return []
        value = value.strip()
        if value == "":
            return []
        return [item.strip() for item in value.split(",")]

    @property
    def allowed_origins_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_ORIGINS)


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings: Settings = get_settings()
