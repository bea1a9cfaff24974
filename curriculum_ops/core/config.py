from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Curriculum Ops"
    debug: bool = False
    log_level: str = "INFO"  # env: LOG_LEVEL; DEBUG forced when debug=True

    # API
    frontend_url: str = "http://localhost:3000"

    # Catalog store (single-writer embedded database)
    database_url: str = "sqlite+aiosqlite:///./data/curriculum.db"
    seed_catalog_on_startup: bool = True

    # Anthropic
    anthropic_api_key: str = ""

    # Course / lesson generation
    generation_model: str = "claude-opus-4-20250514"
    architecture_max_tokens: int = 4096
    lesson_max_tokens: int = 16000
    # Fixed pause between successive generation calls and before the single parse retry
    generation_call_delay_seconds: float = 2.0

    # Review workflow
    strict_review_transitions: bool = False  # env: STRICT_REVIEW_TRANSITIONS
    default_actor: str = "anonymous"


@lru_cache
def get_settings() -> Settings:
    return Settings()
