"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ──────────────────────────────
    POSTGRES_USER: str = "aliens_user"
    POSTGRES_PASSWORD: str = "aliens_pass"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "aliens_db"

    # Full async URL; when set it wins over the POSTGRES_* vars
    # (e.g. sqlite+aiosqlite:///./aliens.db for an embedded store)
    DATABASE_URI: str | None = None

    # Create missing tables at startup instead of relying on Alembic
    DB_CREATE_TABLES: bool = False

    @property
    def DATABASE_URL(self) -> str:
        """Async URL for app runtime (asyncpg / aiosqlite)."""
        if self.DATABASE_URI:
            return self.DATABASE_URI
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    @property
    def DATABASE_URL_SYNC(self) -> str:
        """Sync URL for Alembic migrations (psycopg2 / pysqlite)."""
        url = self.DATABASE_URL
        for async_driver in ("+asyncpg", "+aiosqlite"):
            url = url.replace(async_driver, "")
        return url

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    # ── HTTP ──────────────────────────────────
    API_PREFIX: str = ""

    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    LOG_LEVEL: str | None = None
    LOG_JSON: bool = False

    @property
    def log_level(self) -> str:
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return "DEBUG" if self.APP_ENV == "development" else "INFO"

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
