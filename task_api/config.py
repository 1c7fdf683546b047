"""Settings loaded from environment variables (+ optional .env)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]


def _env(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    enable_debug_routes: bool = True

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> Settings:
        """Build settings from the environment.

        Values already set in the environment take precedence over ``.env``.
        """
        if dotenv:
            load_dotenv(override=False)
        return cls(
            host=_env("HOST", "0.0.0.0"),
            port=_env_int("PORT", 3000),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            cors_origins=_env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
            enable_debug_routes=_env_bool("ENABLE_DEBUG_ROUTES", True),
        )
