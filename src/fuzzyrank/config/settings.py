import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env file from the project root
# This file: src/fuzzyrank/config/settings.py
SERVER_ROOT = Path(__file__).resolve().parent.parent.parent.parent
ENV_PATH = SERVER_ROOT / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    # Fallback to simple load_dotenv which looks in cwd
    load_dotenv()


class Settings(BaseModel):
    """Global Application Settings"""

    # Environment
    ENV: str = Field(default="development", description="Environment: development, production, testing")
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    # Project Paths
    ROOT_DIR: Path = Field(default=SERVER_ROOT, description="Project root directory")

    # Matching defaults, used when a record type config omits them
    DEFAULT_THRESHOLD: float = Field(default=50.0, description="Minimum raw field score to keep a record")
    DEFAULT_LIMIT: int = Field(default=100, ge=1, description="Maximum ranked results per record type")

    # Transliteration
    TRANSLITERATION_WORKERS: int = Field(default=1, ge=1, description="Threads used to transliterate records")

    # Locales accepted by the default validator (empty means any)
    SUPPORTED_LOCALES: tuple[str, ...] = Field(default=(), description="Accepted locale codes")

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True
    }


def _split_locales(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def load_settings() -> Settings:
    """Load settings from environment variables."""
    return Settings(
        ENV=os.getenv("ENV", "development"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        ROOT_DIR=SERVER_ROOT,
        DEFAULT_THRESHOLD=float(os.getenv("DEFAULT_THRESHOLD", "50")),
        DEFAULT_LIMIT=int(os.getenv("DEFAULT_LIMIT", "100")),
        TRANSLITERATION_WORKERS=int(os.getenv("TRANSLITERATION_WORKERS", "1")),
        SUPPORTED_LOCALES=_split_locales(os.getenv("SUPPORTED_LOCALES")),
    )


# Global settings instance
settings = load_settings()
