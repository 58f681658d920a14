from __future__ import annotations

import os
from pathlib import Path

from ..services.endpoint_resolver import EndpointResolver
from ..services.index_client import IndexClient
from ..storage.index_store import IndexStore


def _get_app_dir() -> Path:
    return Path(__file__).resolve().parents[2]


_DEFAULT_BASE_DIR = _get_app_dir() / "data"


def resolve_storage_base_dir(path_raw: str | None) -> Path:
    value = (path_raw or "").strip()
    if not value:
        return _DEFAULT_BASE_DIR.resolve()
    return Path(value).expanduser().resolve()


_BASE_DIR = resolve_storage_base_dir(os.getenv("HATEOAS_LINKS_DATA_DIR"))

_index_store = IndexStore(_BASE_DIR)
_index_client = IndexClient()


def get_index_store() -> IndexStore:
    return _index_store


def get_index_client() -> IndexClient:
    return _index_client


def get_endpoint_resolver() -> EndpointResolver:
    return EndpointResolver(_index_store.get_settings().resolver)
