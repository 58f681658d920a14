from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..models.index import IndexMap, ResolveRequest, ResolveResponse
from ..services.endpoint_resolver import EndpointResolver
from ..services.template_errors import UrlTemplateError
from ..storage.index_store import IndexStore
from .shared import get_endpoint_resolver, get_index_store

router = APIRouter(prefix="/api/endpoints", tags=["endpoints"])


def _load_index(store: IndexStore, name: str) -> IndexMap:
    links = store.get_index(name)
    if links is None:
        raise HTTPException(status_code=404, detail="Index not found")
    return links


@router.post("/{name}/resolve", response_model=ResolveResponse)
def resolve_endpoint(
    name: str,
    req: ResolveRequest,
    store: IndexStore = Depends(get_index_store),
    resolver: EndpointResolver = Depends(get_endpoint_resolver),
) -> ResolveResponse:
    links = _load_index(store, name)
    try:
        url = resolver.resolve(links, req.rel, req.params, req.version)
    except UrlTemplateError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ResolveResponse(rel=req.rel, version=req.version, url=url)


@router.get("/{name}/clean/{rel}", response_model=ResolveResponse)
def get_clean_endpoint(
    name: str,
    rel: str,
    version: str | None = None,
    store: IndexStore = Depends(get_index_store),
    resolver: EndpointResolver = Depends(get_endpoint_resolver),
) -> ResolveResponse:
    links = _load_index(store, name)
    try:
        url = resolver.resolve_clean(links, rel, version)
    except UrlTemplateError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ResolveResponse(rel=rel, version=version, url=url)
