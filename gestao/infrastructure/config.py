# gestao/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    debug: bool
    cors_origins: tuple[str, ...]
    log_level: str
    log_format: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origens = os.environ.get("API_CORS_ORIGINS", "http://localhost:5173")
    return Settings(
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
        cors_origins=tuple(o.strip() for o in origens.split(",") if o.strip()),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        log_format=os.environ.get("LOG_FORMAT", "standard").lower(),
    )
