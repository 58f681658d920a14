from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes.endpoints import router as endpoints_router
from .routes.indexes import router as indexes_router
from .routes.settings import router as settings_router

app = FastAPI(title="HATEOAS Links", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(indexes_router)
app.include_router(endpoints_router)
app.include_router(settings_router)


@app.get("/health")
def health() -> dict:
    return {"ok": True}
