# opentdb/config.py
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from opentdb.links import OTDB_BASE

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    base_url: str = OTDB_BASE
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(env: Optional[Mapping[str, str]] = None, dotenv_path: Optional[Path] = None) -> Settings:
    """Read settings from ``env``, or from os.environ after loading a .env file.

    OPENTDB_BASE_URL  service root, default https://opentdb.com
    OPENTDB_LOG_LEVEL one of DEBUG/INFO/WARNING/ERROR/CRITICAL, default WARNING
    """
    if env is None:
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        env = os.environ

    base_url = (env.get("OPENTDB_BASE_URL") or OTDB_BASE).strip().rstrip("/")
    if not base_url.startswith(("http://", "https://")):
        raise ValueError(f"OPENTDB_BASE_URL must be an http(s) URL, got {base_url!r}")

    log_level = (env.get("OPENTDB_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"OPENTDB_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Settings(base_url=base_url, log_level=log_level)
