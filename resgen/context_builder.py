"""Build Jinja2 template context for one accessor class.

Turns a GenerationRequest plus its parsed entries into the flat dict
consumed by templates/accessor.cs.j2.
"""

from __future__ import annotations

import re
from typing import Any

from .naming import resource_set_id, split_class_name, to_identifier
from .types import GenerationRequest, ResourceEntry

_LINE_BREAK = re.compile(r"\r\n?|\n")


def doc_lines(value: str) -> list[str]:
    """Split an entry value into the lines of its /// summary block."""
    return _LINE_BREAK.split(value)


def build_entry(entry: ResourceEntry) -> dict[str, Any]:
    """Build the template context for one property."""
    return {
        "name": to_identifier(entry.name),
        "doc_lines": doc_lines(entry.value),
    }


def build_context(
    request: GenerationRequest, entries: list[ResourceEntry],
) -> dict[str, Any]:
    """Build the full template context for one resource file."""
    namespace_name, short_class_name = split_class_name(request.class_name)
    return {
        "namespace_name": namespace_name,
        "class_name": short_class_name,
        "access_modifier": request.access_modifier,
        "resource_set_id": resource_set_id(
            request.module_name, request.class_name, request.access_modifier,
        ),
        "entries": [build_entry(e) for e in entries],
    }
