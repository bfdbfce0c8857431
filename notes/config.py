"""Notes configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "NOTES_",
    }

    # Storage, relative to the working directory unless absolute
    db_path: Path = Path("db.json")

    # HTML viewer
    template_path: Path = PACKAGE_DIR / "templates" / "template.html"
    web_host: str = "0.0.0.0"
    web_port: int = 5000

    # Greeting server
    greeting_port: int = 3000

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        """Accept level names in any case (``info`` -> ``INFO``)."""
        return value.strip().upper()


settings = Settings()
