"""Placeholder discovery for HATEOAS URL templates.

Three shapes are recognised, each with its own matcher:

- ``{name}``: mandatory placeholder
- ``{/name}``: optional sub-resource segment
- ``{?a,b}`` / ``{&a,b}``: optional query-parameter group
"""

from __future__ import annotations

import re

OPTIONAL_GROUP_MARKERS = ("{&", "{?")

# a run of non-brace characters ending with a word character right before "}"
PLACEHOLDER_BODY_PATTERN = re.compile(r"([^{]*?)\w(?=\})")
MANDATORY_PLACEHOLDER_PATTERN = re.compile(r"\{([a-zA-Z0-9_]+)\}")
SUB_RESOURCE_PLACEHOLDER_PATTERN = re.compile(r"\{/[^{}]*\w\}")


def locate_optional_group_start(template: str) -> int:
    positions = [template.find(marker) for marker in OPTIONAL_GROUP_MARKERS]
    found = [pos for pos in positions if pos > -1]
    if not found:
        return -1
    return min(found)


def extract_optional_names(template: str) -> list[str]:
    position = locate_optional_group_start(template)
    if position < 0:
        return []

    end = template.find("}", position)
    if end == -1:
        end = len(template)
    body = template[position + 2 : end]
    return body.split(",")


def find_placeholder_bodies(template: str) -> list[str]:
    return [match.group(0) for match in PLACEHOLDER_BODY_PATTERN.finditer(template)]


def extract_sub_resource_names(template: str) -> list[str]:
    return [body[1:] for body in find_placeholder_bodies(template) if body.startswith("/")]


def find_mandatory_placeholder(template: str) -> re.Match[str] | None:
    return MANDATORY_PLACEHOLDER_PATTERN.search(template)


def strip_sub_resource_placeholders(template: str) -> str:
    """Remove every unfilled ``{/name}`` token, braces included."""
    return SUB_RESOURCE_PLACEHOLDER_PATTERN.sub("", template)
