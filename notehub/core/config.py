"""Application settings loaded from environment / .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Database ──────────────────────────────────────────
    # Empty → the in-memory fallback backend is used.
    database_url: str = ""

    # ── Security ──────────────────────────────────────────
    jwt_secret: str = ""  # MUST be set, startup fails without it
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = 24
    bcrypt_rounds: int = 10

    # ── Plans ─────────────────────────────────────────────
    free_plan_note_limit: int = 3

    # ── HTTP ──────────────────────────────────────────────
    allowed_origins: str = "http://localhost:5000,http://localhost:3000"
    frontend_url: str = ""

    log_level: str = "INFO"

    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.allowed_origins.split(",") if o.strip()]
        if self.frontend_url:
            origins.append(self.frontend_url)
        return origins


@lru_cache
def get_settings() -> Settings:
    return Settings()
