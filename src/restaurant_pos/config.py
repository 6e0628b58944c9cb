from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str
    DB_ECHO: bool = False
    REQUEST_TIMEOUT_SECONDS: float = 100.0

    SECRET_KEY: str = "change-me"
    ACCESS_TOKEN_TTL_HOURS: int = 24
    REFRESH_TOKEN_TTL_HOURS: int = 168
    BCRYPT_ROUNDS: int = 12

    LOG_LEVEL: str = "INFO"
    DEFAULT_PAGE_SIZE: int = 10

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
