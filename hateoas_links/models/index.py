from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

IndexEntry = str | dict[str, str]
IndexMap = dict[str, IndexEntry]


class LinkRelation(BaseModel):
    rel: str
    href: str = ""


class LinksDocument(BaseModel):
    index: list[LinkRelation] | None = None
    links: list[LinkRelation] | None = None


class IndexSaveRequest(BaseModel):
    links: IndexMap = Field(default_factory=dict)


class IndexFetchRequest(BaseModel):
    url: str = Field(min_length=1)


class IndexResponse(BaseModel):
    name: str
    links: IndexMap


class IndexListResponse(BaseModel):
    total: int
    names: list[str]


class IndexDeleteResponse(BaseModel):
    name: str
    deleted: bool


class ResolveRequest(BaseModel):
    rel: str = Field(min_length=1)
    params: dict[str, Any] | list[Any] | None = None
    version: str | None = None


class ResolveResponse(BaseModel):
    rel: str
    version: str | None = None
    url: str
