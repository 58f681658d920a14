from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..models.index import IndexMap
from ..models.settings import ClientSettings, ResolverSettings, SettingsBundle

logger = logging.getLogger(__name__)


class IndexStore:
    """Named index maps and settings, kept as JSON files under ``base_dir``."""

    def __init__(self, base_dir: Path):
        self._lock = threading.RLock()
        self._set_base_paths(base_dir)
        self._ensure_storage_files()

    def _set_base_paths(self, base_dir: Path) -> None:
        self.base = Path(base_dir).expanduser().resolve()
        self.base.mkdir(parents=True, exist_ok=True)
        self.indexes_file = self.base / "indexes.json"
        self.settings_file = self.base / "settings.json"

    def _ensure_storage_files(self) -> None:
        self._ensure_json_file(self.indexes_file, {})
        self._ensure_json_file(self.settings_file, SettingsBundle().model_dump(mode="json"))

    def _ensure_json_file(self, path: Path, default_obj: dict) -> None:
        if not path.exists():
            path.write_text(json.dumps(default_obj, ensure_ascii=False, indent=2), encoding="utf-8")

    def _read_json(self, path: Path) -> dict:
        if not path.exists():
            return {}
        text = path.read_text(encoding="utf-8").strip()
        if not text:
            return {}
        try:
            obj = json.loads(text)
            if isinstance(obj, dict):
                return obj
            return {}
        except json.JSONDecodeError:
            return {}

    def _write_json(self, path: Path, obj: dict) -> None:
        path.write_text(json.dumps(obj, ensure_ascii=False, indent=2), encoding="utf-8")

    def list_index_names(self) -> list[str]:
        with self._lock:
            return sorted(self._read_json(self.indexes_file).keys())

    def get_index(self, name: str) -> IndexMap | None:
        with self._lock:
            raw = self._read_json(self.indexes_file).get(name)
            if not isinstance(raw, dict):
                return None
            return self._clean_index(raw)

    def save_index(self, name: str, links: dict[str, Any]) -> IndexMap:
        with self._lock:
            indexes = self._read_json(self.indexes_file)
            cleaned = self._clean_index(links)
            indexes[name] = cleaned
            self._write_json(self.indexes_file, indexes)
            return cleaned

    def delete_index(self, name: str) -> bool:
        with self._lock:
            indexes = self._read_json(self.indexes_file)
            if name not in indexes:
                return False
            del indexes[name]
            self._write_json(self.indexes_file, indexes)
            return True

    def _clean_index(self, raw: dict[str, Any]) -> IndexMap:
        index: IndexMap = {}
        for rel, entry in raw.items():
            if isinstance(entry, str):
                index[str(rel)] = entry
            elif isinstance(entry, dict):
                index[str(rel)] = {str(k): str(v) for k, v in entry.items() if isinstance(v, str)}
        return index

    def get_settings(self) -> SettingsBundle:
        with self._lock:
            raw = self._read_json(self.settings_file)
            try:
                return SettingsBundle.model_validate(raw)
            except ValidationError:
                logger.warning("settings file %s is invalid, resetting to defaults", self.settings_file)
                default = SettingsBundle()
                self._write_json(self.settings_file, default.model_dump(mode="json"))
                return default

    def update_resolver_settings(self, resolver: ResolverSettings) -> SettingsBundle:
        with self._lock:
            settings = self.get_settings()
            settings.resolver = resolver
            self._write_json(self.settings_file, settings.model_dump(mode="json"))
            return settings

    def update_client_settings(self, client: ClientSettings) -> SettingsBundle:
        with self._lock:
            settings = self.get_settings()
            settings.client = client
            self._write_json(self.settings_file, settings.model_dump(mode="json"))
            return settings
