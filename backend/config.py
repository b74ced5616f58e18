"""
Service configuration, read from the environment and .env files.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Load .env file from backend directory or project root
load_dotenv()
load_dotenv(dotenv_path=PROJECT_ROOT / ".env")

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


@dataclass(frozen=True)
class Settings:
    cors_origins: tuple[str, ...]
    host: str
    port: int
    log_level: str
    store_file: Optional[Path]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = os.getenv("WELLNESS_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    store_file = os.getenv("WELLNESS_STORE_FILE")

    return Settings(
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        host=os.getenv("WELLNESS_HOST", "0.0.0.0"),
        port=int(os.getenv("WELLNESS_PORT", "5000")),
        log_level=os.getenv("WELLNESS_LOG_LEVEL", "INFO").upper(),
        store_file=Path(store_file) if store_file else None,
    )
