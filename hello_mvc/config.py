from pydantic_settings import BaseSettings
from functools import lru_cache
import os


PACKAGE_DIR = os.path.dirname(__file__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "hello-mvc"

    # Database (in-memory SQLite unless overridden)
    database_url: str = "sqlite://"

    # Insert itemA/itemB on startup when the store is empty
    seed_items: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"

    # View assets
    templates_dir: str = os.path.join(PACKAGE_DIR, "views", "templates")
    static_dir: str = os.path.join(PACKAGE_DIR, "static")

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    class Config:
        env_prefix = "HELLO_MVC_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
