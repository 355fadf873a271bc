# employee_api/config.py
from typing import Literal

from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    PROJECT_NAME: str = "Employee Management API"

    # Storage settings
    STORAGE_BACKEND: Literal["sql", "mongo"] = "sql"
    SEED_SAMPLE_DATA: bool = False

    # SQL settings (any SQLAlchemy async URL)
    DATABASE_URL: str = "sqlite+aiosqlite:///./employees.db"
    DATABASE_ECHO: bool = False

    # MongoDB settings
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB_NAME: str = "employee_management"

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    RELOAD: bool = True
    LOG_LEVEL: str = "INFO"

    # API settings
    API_PREFIX: str = "/api"

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
