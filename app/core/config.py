# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

class Settings(BaseSettings):
    APP_NAME: str = "Employee Management API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = (
        "This API provides both blocking and reactive endpoints for managing Employee resources. "
        "Demonstrates RESTful design principles with full OpenAPI/Swagger documentation."
    )
    API_PREFIX: str = ""

    # SQLAlchemy asyncio URL
    DATABASE_URL: str = "sqlite+aiosqlite:///./employees.db"
    DB_ECHO: bool = False

    LOG_LEVEL: str = "INFO"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def safe_database_url(self) -> str:
        return make_url(self.DATABASE_URL).render_as_string(hide_password=True)

@lru_cache
def get_settings() -> Settings:
    return Settings()
