from __future__ import annotations

from collections import deque
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from .placeholder_scanner import find_mandatory_placeholder
from .template_errors import SubResourceOrderError, UnresolvedPlaceholderError


class ParamStyle(str, Enum):
    named = "named"
    positional = "positional"


def _sub_resource_token(name: str) -> str:
    return f"{{/{name}}}"


class NamedBinder:
    """Binds a name -> value mapping. ``None`` values count as not supplied."""

    style = ParamStyle.named

    def __init__(self, params: Mapping[str, Any]):
        self.params = {str(key): value for key, value in params.items() if value is not None}

    def replace_mandatory(self, url: str) -> str:
        for name, value in self.params.items():
            url = url.replace(f"{{{name}}}", str(value), 1)
        return url

    def compute_optional_params(self, names: list[str]) -> dict[str, Any]:
        return {name: self.params[name] for name in names if name in self.params}

    def apply_sub_resources(self, url: str, queue: deque[str]) -> str:
        for name in self.params:
            if name not in queue:
                continue
            expected = queue.popleft()
            if expected != name:
                raise SubResourceOrderError(expected)
            url = url.replace(_sub_resource_token(name), f"/{self.params[name]}", 1)
        return url


class PositionalBinder:
    """Binds an ordered list of values, consumed front to back across passes."""

    style = ParamStyle.positional

    def __init__(self, params: Sequence[Any]):
        self.values: deque[Any] = deque(params)

    def replace_mandatory(self, url: str) -> str:
        while self.values:
            match = find_mandatory_placeholder(url)
            if match is None:
                break
            value = self.values.popleft()
            if value is None:
                raise UnresolvedPlaceholderError([match.group(1)], url)
            url = url[: match.start()] + str(value) + url[match.end() :]
        return url

    def compute_optional_params(self, names: list[str]) -> dict[str, Any]:
        optional: dict[str, Any] = {}
        for name in names:
            value = self.values.popleft() if self.values else None
            if value is not None:
                optional[name] = value
        return optional

    def apply_sub_resources(self, url: str, queue: deque[str]) -> str:
        skipped: str | None = None
        while self.values and queue:
            name = queue.popleft()
            value = self.values.popleft()
            if value is None:
                if skipped is None:
                    skipped = name
                continue
            if skipped is not None:
                raise SubResourceOrderError(skipped)
            url = url.replace(_sub_resource_token(name), f"/{value}", 1)
        return url


ParamBinder = NamedBinder | PositionalBinder


def create_binder(params: Mapping[str, Any] | Sequence[Any] | None) -> ParamBinder:
    if params is None:
        return NamedBinder({})
    if isinstance(params, (list, tuple)):
        return PositionalBinder(params)
    if isinstance(params, Mapping):
        return NamedBinder(params)
    raise TypeError(f"params must be a mapping or a list, got {type(params).__name__}")
