"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent
PROFILES = ("dev", "prod")


class Settings:
    PROFILE: str
    DATABASE_URL: str
    ADMIN_USER: str
    ADMIN_PASSWORD: str
    LOG_LEVEL: str
    ALLOW_DEV_CORS: bool
    CATALOG_URL: str
    CATALOG_TIMEOUT_SECONDS: float
    CATALOG_FAILURE_THRESHOLD: int
    CATALOG_RESET_SECONDS: float
    HOST: str
    PORT: int

    def __init__(self):
        self.PROFILE = os.getenv("BOOKSTORE_PROFILE", "dev").lower()
        self.ADMIN_USER = os.getenv("BOOKSTORE_ADMIN_USER", "user")
        self.ADMIN_PASSWORD = os.getenv("BOOKSTORE_ADMIN_PASSWORD", "")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self.CATALOG_URL = os.getenv("CATALOG_URL", "").rstrip("/")
        self.CATALOG_TIMEOUT_SECONDS = float(os.getenv("CATALOG_TIMEOUT_SECONDS", "2"))
        self.CATALOG_FAILURE_THRESHOLD = int(os.getenv("CATALOG_FAILURE_THRESHOLD", "3"))
        self.CATALOG_RESET_SECONDS = float(os.getenv("CATALOG_RESET_SECONDS", "30"))
        self.HOST = os.getenv("HOST", "127.0.0.1")
        self.PORT = int(os.getenv("PORT", "8080"))
        self.DATABASE_URL = self._database_url()
        self._validate()

    def _database_url(self) -> str:
        # dev always uses the embedded SQLite file; prod needs an external URL
        if self.PROFILE == "dev":
            db_path = os.getenv("BOOKSTORE_DB_PATH", str(BASE / "bookstore.db"))
            return f"sqlite:///{db_path}"
        return os.getenv("BOOKSTORE_DATABASE_URL", "")

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def _validate(self):
        if self.PROFILE not in PROFILES:
            raise RuntimeError(f"BOOKSTORE_PROFILE must be one of {', '.join(PROFILES)}, got {self.PROFILE!r}")
        if self.PROFILE == "prod":
            if not self.DATABASE_URL:
                raise RuntimeError("BOOKSTORE_DATABASE_URL must be set in the prod profile")
            if not self.ADMIN_PASSWORD:
                raise RuntimeError("BOOKSTORE_ADMIN_PASSWORD must be set in the prod profile")
        if self.CATALOG_FAILURE_THRESHOLD < 1:
            raise RuntimeError("CATALOG_FAILURE_THRESHOLD must be at least 1")


def get_settings() -> Settings:
    """Build a fresh `Settings` from the current environment."""
    return Settings()


settings = get_settings()
