import os
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    app_name: str = Field(default="Todo Lists API")
    secret_key: str = Field(...)
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60 * 24)
    database_url: str = Field(...)
    log_level: str = Field(default="INFO")
    sql_echo: bool = Field(default=False)
    cors_origins: List[str] = Field(default=["*"])


def get_settings():
    if "DATABASE_URL" not in os.environ:
        user = os.getenv("POSTGRES_USER", "todolists")
        password = os.getenv("POSTGRES_PASSWORD", "todolists-pass")
        db = os.getenv("POSTGRES_DB", "todolists")
        host = os.getenv("POSTGRES_HOST", "todolists-db")
        port = os.getenv("POSTGRES_PORT", "5432")
        os.environ["DATABASE_URL"] = f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{db}"
    return Settings()

settings = get_settings()
