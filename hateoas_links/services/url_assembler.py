from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping, Sequence
from typing import Any

from .param_binder import ParamBinder, create_binder
from .placeholder_scanner import (
    extract_optional_names,
    extract_sub_resource_names,
    find_placeholder_bodies,
    locate_optional_group_start,
    strip_sub_resource_placeholders,
)
from .template_errors import UnresolvedPlaceholderError

logger = logging.getLogger(__name__)


def check_for_errors(url: str) -> None:
    remaining = find_placeholder_bodies(url)
    if remaining:
        raise UnresolvedPlaceholderError(remaining, url)


def truncate_optional_group(url: str) -> str:
    position = locate_optional_group_start(url)
    if position > -1:
        return url[:position]
    return url


def truncate_query_string(url: str) -> str:
    position = url.find("?")
    if position > -1:
        return url[:position]
    return url


class ResolutionSession:
    """Working state of a single template resolution.

    The passes must run in order: mandatory placeholders first, then the
    optional query hash, then sub-resources, then the query string.
    """

    def __init__(self, template: str, binder: ParamBinder):
        self.url = template
        self.binder = binder
        self.optional_params: dict[str, Any] = {}
        self.sub_resources: deque[str] = deque()

    def replace_mandatory(self) -> None:
        self.url = self.binder.replace_mandatory(self.url)

    def create_optional_params_hash(self) -> None:
        if locate_optional_group_start(self.url) < 0:
            return
        names = extract_optional_names(self.url)
        self.optional_params = self.binder.compute_optional_params(names)

    def create_sub_resources_list(self) -> None:
        self.sub_resources = deque(extract_sub_resource_names(self.url))

    def apply_sub_resources(self) -> None:
        if not self.sub_resources:
            return
        self.url = self.binder.apply_sub_resources(self.url, self.sub_resources)
        self.url = strip_sub_resource_placeholders(self.url)

    def apply_optional_params(self) -> None:
        position = locate_optional_group_start(self.url)
        if position < 0:
            return

        self.url = self.url[:position]
        if not self.optional_params:
            return

        connector = "&" if "?" in self.url else "?"
        querystring = "&".join(f"{name}={value}" for name, value in self.optional_params.items())
        self.url += connector + querystring

    def build_url(self) -> str:
        logger.debug("resolving %r with %s params", self.url, self.binder.style.value)
        self.replace_mandatory()
        self.create_optional_params_hash()
        self.create_sub_resources_list()
        self.apply_sub_resources()
        self.apply_optional_params()
        check_for_errors(self.url)
        return self.url


def parse_url(template: str, params: Mapping[str, Any] | Sequence[Any] | None = None) -> str:
    session = ResolutionSession(template or "", create_binder(params))
    return session.build_url()
