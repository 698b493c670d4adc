from pathlib import Path
from typing import Literal, List, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # ---- Data roots ----
    project_root: Path = Path(".").resolve()
    data_root: Path = Path("data")
    # Derived from data_root unless set explicitly (APP_DB_DIR, APP_EXPORTS_DIR)
    db_dir: Optional[Path] = None
    exports_dir: Optional[Path] = None

    # ---- app/runtime ----
    env: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ---- API server configuration ----
    api_host: str = "127.0.0.1"  # localhost for dev, 0.0.0.0 for docker/prod
    api_port: int = 3000
    api_reload: bool = True  # Auto-reload on code changes (dev only)
    api_workers: int = 1  # Collection locks are per process: keep 1 worker per data dir
    cors_origins: List[str] = ["*"]  # Allowed CORS origins (restrict in prod)

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="APP_",      # APP_ENV, APP_LOG_LEVEL, APP_DATA_ROOT, etc.
        env_nested_delimiter='__',
        extra = "ignore"
    )

    @model_validator(mode="after")
    def _derive_data_dirs(self) -> "Settings":
        if self.db_dir is None:
            self.db_dir = self.data_root / "db"
        if self.exports_dir is None:
            self.exports_dir = self.data_root / "exports"
        return self


def get_settings() -> Settings:
    """Build settings from the environment and .env (read fresh on every call)."""
    return Settings()
