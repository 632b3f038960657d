"""Process configuration read from the environment."""

from __future__ import annotations

import os

from product_catalog.domain.product import DEFAULT_PAGE_SIZE

DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "https://netcomm.netlify.app")


def _int_env(name: str) -> int | None:
    raw = os.getenv(name)

    if raw is None or not raw.strip():
        return None

    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} environment variable must be an integer, got {raw!r}")

    if value < 1:
        raise RuntimeError(f"{name} environment variable must be >= 1, got {value}")

    return value


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def server_host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def server_port() -> int:
    return _int_env("PORT") or 5000


def cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS")

    if raw is None:
        return list(DEFAULT_CORS_ORIGINS)

    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def default_page_size() -> int:
    return _int_env("DEFAULT_PAGE_SIZE") or DEFAULT_PAGE_SIZE


def max_page_size() -> int | None:
    """Upper bound on limit; None (the default) leaves page size unbounded."""
    return _int_env("MAX_PAGE_SIZE")


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
