"""Settings — upstream address, bind address and logging, read once at startup."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_UPSTREAM_ADDR = "http://192.168.1.77:1318"
DEFAULT_LISTEN_ADDR = ":8080"


def parse_listen_addr(addr: str) -> tuple[str, int]:
    """Split ``host:port``; an empty host binds every interface."""
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"listen address must be host:port, got {addr!r}")
    number = int(port)
    if not 0 < number < 65536:
        raise ValueError(f"port out of range: {number}")
    return host.strip("[]") or "0.0.0.0", number


class Settings(BaseSettings):
    """Process-wide configuration, overridable through the environment."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    upstream_addr: str = Field(
        default=DEFAULT_UPSTREAM_ADDR, description="Node REST base address"
    )
    listen_addr: str = Field(default=DEFAULT_LISTEN_ADDR, description="Bind address")
    upstream_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Upstream timeout in seconds; unset keeps the httpx default",
    )
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)
    debug: bool = Field(default=False, description="Include a component trace in renders")

    @field_validator("upstream_addr")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"upstream address must be an http(s) URL, got {v!r}")
        return v.rstrip("/")

    @field_validator("listen_addr")
    @classmethod
    def _check_listen_addr(cls, v: str) -> str:
        parse_listen_addr(v)
        return v

    def bind(self) -> tuple[str, int]:
        return parse_listen_addr(self.listen_addr)


@lru_cache
def get_settings() -> Settings:
    return Settings()
