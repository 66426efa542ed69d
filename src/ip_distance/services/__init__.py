"""Configuration for the geolocation service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "http://ipinfo.io"
DEFAULT_TIMEOUT_SECONDS = 10.0

# Path queried when no address is given; the service answers for the caller's IP
SELF_PATH = "json"


@dataclass
class ServiceConfig:
    """Connection settings for an ipinfo-compatible geolocation service."""

    name: str
    base_url: str
    timeout_seconds: float
    token: Optional[str] = None

    def url_for(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path}"


def load_config() -> ServiceConfig:
    """Build the service config from IPDIST_* / IPINFO_TOKEN env vars."""
    return ServiceConfig(
        name="ipinfo",
        base_url=os.getenv("IPDIST_BASE_URL", DEFAULT_BASE_URL),
        timeout_seconds=float(os.getenv("IPDIST_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)),
        token=os.getenv("IPINFO_TOKEN") or None,
    )
