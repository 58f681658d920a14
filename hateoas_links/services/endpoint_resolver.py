from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ..models.index import LinksDocument
from ..models.settings import DEFAULT_VERSION, ResolverSettings
from .url_assembler import check_for_errors, parse_url, truncate_optional_group, truncate_query_string

logger = logging.getLogger(__name__)


def links_to_map(document: LinksDocument | Mapping[str, Any] | None) -> dict[str, str]:
    """Flatten a ``{index|links: [{rel, href}, ...]}`` document into rel -> href."""
    if document is None:
        return {}
    if not isinstance(document, LinksDocument):
        document = LinksDocument.model_validate(dict(document))

    relations = document.index if document.index is not None else document.links
    result: dict[str, str] = {}
    for relation in relations or []:
        result[relation.rel] = relation.href
    return result


def select_template(index: Mapping[str, Any], rel: str, version: str | None = None) -> str:
    entry = index.get(rel)
    if entry is None:
        logger.debug("relation %r not found in index", rel)
        return ""

    if isinstance(entry, Mapping):
        selected = version or DEFAULT_VERSION
        template = entry.get(selected)
        if template is None:
            logger.debug("version %r not found for relation %r", selected, rel)
            return ""
        return str(template)
    return str(entry)


def get_endpoint(
    index: Mapping[str, Any],
    rel: str,
    params: Mapping[str, Any] | Sequence[Any] | None = None,
    version: str | None = None,
) -> str:
    template = select_template(index, rel, version)
    return parse_url(template, params)


def get_clean_endpoint(index: Mapping[str, Any], rel: str, version: str | None = None) -> str:
    url = select_template(index, rel, version)
    url = truncate_optional_group(url)
    url = truncate_query_string(url)
    check_for_errors(url)
    return url


class EndpointResolver:
    def __init__(self, settings: ResolverSettings | None = None):
        self.settings = settings or ResolverSettings()

    def resolve(
        self,
        index: Mapping[str, Any],
        rel: str,
        params: Mapping[str, Any] | Sequence[Any] | None = None,
        version: str | None = None,
    ) -> str:
        return get_endpoint(index, rel, params, version or self.settings.default_version)

    def resolve_clean(self, index: Mapping[str, Any], rel: str, version: str | None = None) -> str:
        return get_clean_endpoint(index, rel, version or self.settings.default_version)
