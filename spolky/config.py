"""
Konfigurace aplikace / Application configuration.
Používá pydantic-settings, načítá z .env nebo proměnných prostředí.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Psi spolky API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = True

    # Databáze - SQLite jako výchozí pro vývoj
    # Database - SQLite by default for development
    DATABASE_URL: str = "sqlite+aiosqlite:///./spolky.db"

    # CORS - povolené origins / allowed origins
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # JWT Authentication
    SECRET_KEY: str = "change-me-in-production"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    # Rate Limiting
    RATE_LIMIT_LOGIN: str = "5/minute"
    RATE_LIMIT_REGISTER: str = "3/minute"

    # Audit: změna a auditní záznam v jedné transakci /
    # Audit: mutation and audit entry share one transaction
    AUDIT_ATOMIC: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None  # např. "logs/application.log", denní rotace / daily rotation

    # Výchozí admin při prvním startu / Seed admin on first startup
    SEED_ADMIN: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
