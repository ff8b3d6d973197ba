"""
Client configuration.

``Endpoints`` holds the API path prefixes and ``Settings`` the connection
parameters. Both are frozen; build them once at startup and hand them to
``BBT`` explicitly.
"""
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HOSTNAME = "http://api.beebotte.com"
DEFAULT_PORT = 80
DEFAULT_TIMEOUT = 30.0


class Endpoints(BaseModel):
    """API path prefixes; locator components are appended as path segments."""
    model_config = ConfigDict(frozen=True)

    public_read: str = "/v1/public/data/read"
    read: str = "/v1/data/read"
    write: str = "/v1/data/write"
    bulk_write: str = "/v1/data/write"
    publish: str = "/v1/data/publish"
    bulk_publish: str = "/v1/data/publish"


DEFAULT_ENDPOINTS = Endpoints()


class Settings(BaseModel):
    """Connection parameters for ``BBT``."""
    model_config = ConfigDict(frozen=True)

    api_key: str
    secret_key: str = Field(repr=False)
    hostname: str = DEFAULT_HOSTNAME
    port: int = DEFAULT_PORT
    timeout: Optional[float] = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from ``BEEBOTTE_*`` environment variables.

        ``BEEBOTTE_API_KEY`` and ``BEEBOTTE_SECRET_KEY`` are required.
        """
        api_key = os.getenv("BEEBOTTE_API_KEY")
        secret_key = os.getenv("BEEBOTTE_SECRET_KEY")
        if not api_key or not secret_key:
            raise ValueError("BEEBOTTE_API_KEY and BEEBOTTE_SECRET_KEY must be set")

        return cls(
            api_key=api_key,
            secret_key=secret_key,
            hostname=os.getenv("BEEBOTTE_HOSTNAME", DEFAULT_HOSTNAME),
            port=int(os.getenv("BEEBOTTE_PORT", str(DEFAULT_PORT))),
            timeout=float(os.getenv("BEEBOTTE_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )
