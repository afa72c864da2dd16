from pathlib import Path
from typing import List, Literal

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    # ── App ─────────────────────────────────────
    APP_NAME: str = "FinziAi"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    DEBUG: bool = True
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # ── Database ────────────────────────────────
    DATABASE_URL: str = "sqlite+aiosqlite:///./finziai.db"
    # Production databases are migrated with alembic instead
    DB_CREATE_TABLES: bool = True

    # ── Ebook / static assets ───────────────────
    # The ebook lives outside STATIC_DIR so it is only reachable with a token
    STATIC_DIR: str = str(BASE_DIR / "static")
    EBOOK_FILE_PATH: str = str(
        BASE_DIR / "resources" / "Finziai-Habbits-to-save-money-effortlessly.pdf"
    )
    EBOOK_DOWNLOAD_FILENAME: str = "Finziai-Habbits-to-save-money-effortlessly.pdf"
    DOWNLOAD_URL_PATH: str = "/api/download"

    # ── Logging ─────────────────────────────────
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_DIR: str = "logs"

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
