"""Application configuration primitives."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _load_env(dotenv_path: Optional[Path] = None) -> None:
    """Load the .env file once for the process."""

    if getattr(_load_env, "_loaded", False):  # type: ignore[attr-defined]
        return

    load_dotenv(dotenv_path)
    setattr(_load_env, "_loaded", True)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class ServerSettings:
    """Where the HTTP server listens."""

    host: str = "0.0.0.0"
    port: int = 4321

    @classmethod
    def from_env(cls) -> "ServerSettings":
        """Instantiate settings using environment overrides when present."""

        defaults = cls()
        return cls(
            host=os.getenv("PLANNER_HOST", defaults.host),
            port=int(os.getenv("PLANNER_PORT", defaults.port)),
        )


@dataclass(frozen=True)
class Settings:
    """Container for application configuration."""

    server: ServerSettings
    log_level: str = "INFO"
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, dotenv_path: Optional[Path] = None) -> "Settings":
        """Build ``Settings`` using environment variables (optionally from ``.env``)."""

        _load_env(dotenv_path)

        server = ServerSettings.from_env()

        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        log_dir_value = os.getenv("LOG_DIR")
        log_dir = Path(log_dir_value) if log_dir_value else None

        return cls(server=server, log_level=log_level, log_dir=log_dir)


@lru_cache()
def get_settings(dotenv_path: Optional[Path] = None) -> Settings:
    """Return a cached settings instance."""

    return Settings.from_env(dotenv_path=dotenv_path)
