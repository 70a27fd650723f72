"""Dataclasses passed between the loader, naming policy and codegen."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ResourceEntry:
    """One ``<data>`` element of a resource file."""
    name: str
    value: str


@dataclass(frozen=True)
class GenerationRequest:
    """Everything codegen needs to render one accessor class."""
    file_path: Path
    module_name: str
    class_name: str  # may be dotted, e.g. "Strings.Errors"
    access_modifier: str  # "public" or "internal"


@dataclass(frozen=True)
class GeneratedSource:
    """Rendered accessor class, ready to be written to gen/."""
    short_class_name: str
    text: str


@dataclass(frozen=True)
class ModuleTarget:
    """A module directory holding a resources/ folder."""
    module_name: str
    resources_dir: Path
    gen_dir: Path
    pattern: str
