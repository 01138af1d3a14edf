"""Settings loaded from ``TASKBOARD_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

ENV_PREFIX = "TASKBOARD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str = "Taskboard API"
    log_level: str = "INFO"

    # ---- Server ----
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = field(default_factory=lambda: ["http://localhost:3000"])

    # ---- Store ----
    seed_sample: bool = True
    list_delay_ms: int = 100

    @property
    def list_delay_seconds(self) -> float:
        return max(self.list_delay_ms, 0) / 1000

    @staticmethod
    def from_env() -> Settings:
        defaults = Settings()
        return Settings(
            app_name=_env(_k("APP_NAME"), defaults.app_name),
            log_level=_env(_k("LOG_LEVEL"), defaults.log_level).upper(),
            host=_env(_k("HOST"), defaults.host),
            port=_env_int(_k("PORT"), defaults.port),
            cors_origins=_env_list(_k("CORS_ORIGINS"), defaults.cors_origins),
            seed_sample=_env_bool(_k("SEED_SAMPLE"), defaults.seed_sample),
            list_delay_ms=_env_int(_k("LIST_DELAY_MS"), defaults.list_delay_ms),
        )
