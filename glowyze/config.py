from pydantic_settings import BaseSettings
from functools import lru_cache

from glowyze.schemas import Locale


class Settings(BaseSettings):
    """Application settings"""
    app_name: str = "Glowyze"
    default_locale: Locale = Locale.EN
    log_level: str = "INFO"

    class Config:
        env_file = '.env'
        env_prefix = 'GLOWYZE_'


@lru_cache()
def get_settings() -> Settings:
    return Settings()
