from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "Quiz Points API"
    API_VERSION: str = "1.0.0"
    ENV: str = "development"
    FRONTEND_URL: str = "http://localhost:3000"

    # auth
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # database
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "quiz"
    DATABASE_URL: Optional[str] = None  # overrides the POSTGRES_* settings when set

    LOG_LEVEL: str = "INFO"


settings = Settings()
