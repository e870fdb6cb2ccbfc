"""
Конфигурация приложения на pydantic-settings.
Все значения читаются из переменных окружения (или файла .env).
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Приложение
    APP_NAME: str = "Booking Manager"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Хранилище
    DATA_FILE_PATH: str = "data/addressbook.json"

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
