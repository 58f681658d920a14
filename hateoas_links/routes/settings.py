from __future__ import annotations

from fastapi import APIRouter, Depends

from ..models.settings import (
    ClientSettings,
    ClientSettingsUpdateRequest,
    ResolverSettings,
    ResolverSettingsUpdateRequest,
    SettingsBundle,
)
from ..storage.index_store import IndexStore
from .shared import get_index_store

router = APIRouter(prefix="/api/settings", tags=["settings"])


def _normalize_headers(headers: dict[str, str]) -> dict[str, str]:
    normalized: dict[str, str] = {}
    for raw_name, raw_value in headers.items():
        name = (raw_name or "").strip()
        if name:
            normalized[name] = (raw_value or "").strip()
    return normalized


@router.get("", response_model=SettingsBundle)
def get_settings(store: IndexStore = Depends(get_index_store)) -> SettingsBundle:
    return store.get_settings()


@router.put("/resolver", response_model=SettingsBundle)
def update_resolver_settings(
    req: ResolverSettingsUpdateRequest,
    store: IndexStore = Depends(get_index_store),
) -> SettingsBundle:
    resolver = ResolverSettings(default_version=req.default_version.strip() or "default")
    return store.update_resolver_settings(resolver)


@router.put("/client", response_model=SettingsBundle)
def update_client_settings(
    req: ClientSettingsUpdateRequest,
    store: IndexStore = Depends(get_index_store),
) -> SettingsBundle:
    current = store.get_settings().client
    headers = current.headers if req.headers is None else _normalize_headers(req.headers)
    client = ClientSettings(
        timeout_seconds=req.timeout_seconds,
        max_retries=req.max_retries,
        headers=headers,
    )
    return store.update_client_settings(client)
