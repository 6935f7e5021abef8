# backend/config.py
from __future__ import annotations
from pathlib import Path
import os
from dotenv import load_dotenv

# Load exactly backend/.env (do NOT call load_dotenv() without a path)
ENV_FILE = Path(__file__).with_name(".env")
load_dotenv(ENV_FILE, override=False)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def get_settings():
    return Settings


class Settings:
    # External providers (public instances by default)
    NOMINATIM_URL: str = os.getenv(
        "NOMINATIM_URL", "https://nominatim.openstreetmap.org"
    ).rstrip("/")
    OSRM_URL: str = os.getenv("OSRM_URL", "https://router.project-osrm.org").rstrip(
        "/"
    )
    HTTP_TIMEOUT_S: float = float(os.getenv("HTTP_TIMEOUT_S", "15.0"))

    # Nominatim query shape
    GEOCODER_USER_AGENT: str = os.getenv(
        "GEOCODER_USER_AGENT", "co2-trip-calculator/0.1"
    )
    GEOCODER_LANGUAGE: str = os.getenv("GEOCODER_LANGUAGE", "pt-BR")
    GEOCODER_COUNTRY_CODES: str = os.getenv("GEOCODER_COUNTRY_CODES", "br")
    GEOCODER_LIMIT: int = _int_env("GEOCODER_LIMIT", 5)
    MIN_QUERY_LENGTH: int = _int_env("MIN_QUERY_LENGTH", 3)

    # 0 means unbounded / no expiry
    CACHE_MAXSIZE: int = _int_env("CACHE_MAXSIZE", 0)
    CACHE_TTL_S: int = _int_env("CACHE_TTL_S", 0)

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ALLOW_ORIGINS: list[str] = os.getenv(
        "CORS_ALLOW_ORIGINS", "http://localhost:3000"
    ).split(",")


settings = Settings
