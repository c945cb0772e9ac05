"""
Service configuration.

Values are read from the environment (and the project ``.env``) once at
import time; the catalog provider is chosen from ``api_mode``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

API_MODES = ("mock", "remote")


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class ServiceConfig:
    api_mode: str = field(default_factory=lambda: os.getenv("CONCIERGE_API_MODE", "mock"))
    api_base: str = field(default_factory=lambda: os.getenv("CONCIERGE_API_BASE", "https://api.bebond.net"))
    api_key: str = field(default_factory=lambda: os.getenv("CONCIERGE_API_KEY", ""))
    org_key: str = field(default_factory=lambda: os.getenv("CONCIERGE_ORG_KEY", "BB_vrconcierge"))
    latency_ms: int = field(default_factory=lambda: _env_int("CONCIERGE_LATENCY_MS", 0))
    timeout: float = 10.0
    catalog_ttl: int = 300  # 5 minutes
    data_dir: Path = Path(__file__).resolve().parent / "data"

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / "restaurants.json"

    @property
    def search_config_path(self) -> Path:
        return self.data_dir / "search_config.json"


DEFAULT_SERVICE_CONFIG = ServiceConfig()
