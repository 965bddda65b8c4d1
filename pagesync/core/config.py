from pathlib import Path
import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]  # repo root

ENV_FILE = os.getenv("ENV_FILE", str(BASE_DIR / ".env"))


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILE, extra="ignore")

    APP_ENV: str = "local"
    DATABASE_URL: str = "sqlite:///./pagesync.db"
    CORS_ORIGINS: str = "*"  # Comma-separated list of allowed origins, or "*" for all
    LOG_LEVEL: str = "INFO"

    # Resources that get a pagination store at startup (JSON list in the environment)
    RESOURCES: list[str] = ["audits", "users"]
    DEFAULT_PAGE_SIZE: int = Field(default=50, gt=0)
    # Per-resource overrides, e.g. RESOURCE_PAGE_SIZES='{"audits": 25}'
    RESOURCE_PAGE_SIZES: dict[str, int] = {}

    @field_validator("RESOURCE_PAGE_SIZES")
    @classmethod
    def _positive_page_sizes(cls, value: dict[str, int]) -> dict[str, int]:
        bad = sorted(name for name, size in value.items() if size <= 0)
        if bad:
            raise ValueError(f"page size must be positive for: {bad}")
        return value

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list, handling '*' for development"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def page_size_for(self, resource: str) -> int:
        return self.RESOURCE_PAGE_SIZES.get(resource, self.DEFAULT_PAGE_SIZE)


settings = Settings()
