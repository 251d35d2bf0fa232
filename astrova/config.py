"""Environment-driven settings for the service and launcher."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

MODULE_DIR = Path(__file__).resolve().parent
REPO_ROOT = MODULE_DIR.parent

# Priority: existing process env > astrova/.env > repo/.env
load_dotenv(dotenv_path=MODULE_DIR / ".env")
load_dotenv(dotenv_path=REPO_ROOT / ".env")


def env_int(name: str, default: int, minimum: int | None = None) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if minimum is None else max(minimum, value)


def env_optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def env_float(name: str, default: float, minimum: float = 0.0) -> float:
    raw = os.getenv(name, str(default)).strip()
    try:
        return max(minimum, float(raw))
    except ValueError:
        return default


def env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


# ------------------------------------------------------------------------------
DEFAULT_API_URL = "http://localhost:10000"
KUNDALI_ENDPOINT = "/api/kundali"

ASTROVA_API_URL = (os.getenv("ASTROVA_API_URL", DEFAULT_API_URL).strip() or DEFAULT_API_URL).rstrip("/")
ASTROVA_API_TIMEOUT_SEC = env_float("ASTROVA_API_TIMEOUT_SEC", 30.0, minimum=1.0)
CACHE_MAX_ITEMS = env_int("CACHE_MAX_ITEMS", 256, minimum=1)
CACHE_TTL_SEC = env_int("CACHE_TTL_SEC", 0, minimum=0)
ALLOWED_ORIGINS = env_list("ALLOWED_ORIGINS", "http://localhost:5173")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
