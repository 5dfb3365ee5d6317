"""Runtime settings read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _parse_origins(value: str | None) -> tuple[str, ...]:
    raw = value if value is not None else "*"
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class Settings:
    title: str = "coffee-api"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    graphiql: bool = True
    seed: bool = True
    allow_origins: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            title=os.getenv("COFFEE_API_TITLE", "coffee-api"),
            log_level=os.getenv("COFFEE_API_LOG_LEVEL", "INFO").strip().upper() or "INFO",
            host=os.getenv("COFFEE_API_HOST", "127.0.0.1"),
            port=_safe_int(os.getenv("COFFEE_API_PORT"), 8000),
            graphiql=_parse_bool(os.getenv("COFFEE_API_GRAPHIQL"), True),
            seed=_parse_bool(os.getenv("COFFEE_API_SEED"), True),
            allow_origins=_parse_origins(os.getenv("FRONTEND_ORIGINS")),
        )
