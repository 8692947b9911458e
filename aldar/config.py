from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Aldar Real Estate API"
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True
    CORS_ORIGINS: List[str] = ["http://localhost:5000", "http://127.0.0.1:5000"]
    # Session store: "memory" keeps sessions in-process, "redis" shares them
    SESSION_BACKEND: str = "memory"
    REDIS_URL: str = "redis://localhost:6379/0"
    SESSION_COOKIE_NAME: str = "aldar_session"
    SESSION_TTL_SECONDS: int = 86400
    SESSION_CHECK_PERIOD_SECONDS: int = 86400
    SESSION_COOKIE_SECURE: bool = False
    # bcrypt cost factor
    PASSWORD_HASH_ROUNDS: int = 12
    # Startup data
    SEED_SAMPLE_DATA: bool = True
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"
    ADMIN_NAME: str = "مدير النظام"
    ADMIN_EMAIL: str = "admin@aldar.com"
    ADMIN_PHONE: str = "+966500000000"
    # Catalog
    FEATURED_DEFAULT_LIMIT: int = 6
    PROPERTY_CODE_PREFIX: str = "SA-"
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
