from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..models.index import (
    IndexDeleteResponse,
    IndexFetchRequest,
    IndexListResponse,
    IndexResponse,
    IndexSaveRequest,
    LinksDocument,
)
from ..services.endpoint_resolver import links_to_map
from ..services.index_client import IndexClient, IndexFetchError
from ..storage.index_store import IndexStore
from .shared import get_index_client, get_index_store

router = APIRouter(prefix="/api/indexes", tags=["indexes"])


@router.get("", response_model=IndexListResponse)
def list_indexes(store: IndexStore = Depends(get_index_store)) -> IndexListResponse:
    names = store.list_index_names()
    return IndexListResponse(total=len(names), names=names)


@router.get("/{name}", response_model=IndexResponse)
def get_index(name: str, store: IndexStore = Depends(get_index_store)) -> IndexResponse:
    links = store.get_index(name)
    if links is None:
        raise HTTPException(status_code=404, detail="Index not found")
    return IndexResponse(name=name, links=links)


@router.put("/{name}", response_model=IndexResponse)
def save_index(
    name: str,
    req: IndexSaveRequest,
    store: IndexStore = Depends(get_index_store),
) -> IndexResponse:
    links = store.save_index(name, req.links)
    return IndexResponse(name=name, links=links)


@router.post("/{name}/links", response_model=IndexResponse)
def import_links_document(
    name: str,
    req: LinksDocument,
    store: IndexStore = Depends(get_index_store),
) -> IndexResponse:
    links = store.save_index(name, links_to_map(req))
    return IndexResponse(name=name, links=links)


@router.post("/{name}/fetch", response_model=IndexResponse)
async def fetch_index(
    name: str,
    req: IndexFetchRequest,
    store: IndexStore = Depends(get_index_store),
    client: IndexClient = Depends(get_index_client),
) -> IndexResponse:
    settings = store.get_settings()
    try:
        fetched = await client.fetch_index(req.url, settings.client)
    except IndexFetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    links = store.save_index(name, fetched)
    return IndexResponse(name=name, links=links)


@router.delete("/{name}", response_model=IndexDeleteResponse)
def delete_index(name: str, store: IndexStore = Depends(get_index_store)) -> IndexDeleteResponse:
    deleted = store.delete_index(name)
    if not deleted:
        raise HTTPException(status_code=404, detail="Index not found")
    return IndexDeleteResponse(name=name, deleted=True)
