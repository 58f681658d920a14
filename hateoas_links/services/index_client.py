from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..models.index import IndexMap
from ..models.settings import ClientSettings
from .endpoint_resolver import links_to_map

logger = logging.getLogger(__name__)

# transient transport failures worth another attempt
_RETRYABLE_EXCEPTIONS = (
    httpx.RemoteProtocolError,
    httpx.ReadError,
    httpx.ConnectError,
    httpx.ConnectTimeout,
)


class IndexFetchError(RuntimeError):
    pass


class IndexClient:
    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    async def fetch_index(self, url: str, settings: ClientSettings | None = None) -> IndexMap:
        settings = settings or ClientSettings()
        payload = await self._fetch_json(url, settings)
        return self.normalize_index_document(payload)

    async def _fetch_json(self, url: str, settings: ClientSettings) -> dict[str, Any]:
        attempts = 1 + settings.max_retries
        last_exc: Exception | None = None
        for attempt in range(attempts):
            try:
                return await self._get_json(url, settings)
            except _RETRYABLE_EXCEPTIONS as exc:
                last_exc = exc
                if attempt < attempts - 1:
                    logger.warning(
                        "index request failed (attempt %d/%d): %s, retrying",
                        attempt + 1,
                        attempts,
                        exc,
                    )
        raise IndexFetchError(f"index request failed after {attempts} attempts: {last_exc}")

    async def _get_json(self, url: str, settings: ClientSettings) -> dict[str, Any]:
        timeout = self._build_timeout(settings.timeout_seconds)
        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            resp = await client.get(url, headers=settings.headers)
            self._raise_for_status_with_body(resp)

        obj = self._load_json_payload(resp.text)
        if obj is None:
            raise IndexFetchError(f"index document at {url} is not a JSON object")
        return obj

    def _build_timeout(self, timeout_seconds: int) -> httpx.Timeout:
        base = float(max(1, timeout_seconds))
        return httpx.Timeout(base, connect=min(10.0, base))

    def _raise_for_status_with_body(self, resp: httpx.Response) -> None:
        if resp.is_success:
            return
        body = resp.text.strip()
        detail = f" {body}" if body else ""
        raise IndexFetchError(f"index request error [{resp.status_code}].{detail}")

    def _load_json_payload(self, payload: str) -> dict[str, Any] | None:
        try:
            value = json.loads(payload)
        except json.JSONDecodeError:
            return None
        if isinstance(value, dict):
            return value
        return None

    def normalize_index_document(self, obj: dict[str, Any]) -> IndexMap:
        """Accept either a ``{index|links: [...]}`` document or a flat rel -> href map."""
        if isinstance(obj.get("index"), list) or isinstance(obj.get("links"), list):
            try:
                return dict(links_to_map(obj))
            except ValidationError as exc:
                raise IndexFetchError(f"index document has malformed links: {exc}") from exc

        index: IndexMap = {}
        for rel, entry in obj.items():
            if isinstance(entry, str):
                index[rel] = entry
                continue
            if isinstance(entry, dict) and all(isinstance(v, str) for v in entry.values()):
                index[rel] = dict(entry)
        return index
