from __future__ import annotations

import os

from pydantic import BaseModel, Field

DEFAULT_VERSION = "default"
DEFAULT_TIMEOUT_SECONDS = 30


def _default_timeout_seconds() -> int:
    raw = os.getenv("HATEOAS_LINKS_TIMEOUT", "").strip()
    if raw.isdigit() and int(raw) > 0:
        return int(raw)
    return DEFAULT_TIMEOUT_SECONDS


class ResolverSettings(BaseModel):
    default_version: str = Field(default=DEFAULT_VERSION, min_length=1)


class ResolverSettingsUpdateRequest(BaseModel):
    default_version: str = Field(min_length=1)


class ClientSettings(BaseModel):
    timeout_seconds: int = Field(default_factory=_default_timeout_seconds, ge=1)
    max_retries: int = Field(default=2, ge=0)
    headers: dict[str, str] = Field(default_factory=lambda: {"Accept": "application/json"})


class ClientSettingsUpdateRequest(BaseModel):
    timeout_seconds: int = Field(default=DEFAULT_TIMEOUT_SECONDS, ge=1)
    max_retries: int = Field(default=2, ge=0)
    headers: dict[str, str] | None = None


class SettingsBundle(BaseModel):
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)
    client: ClientSettings = Field(default_factory=ClientSettings)
