"""Load and parse .resx resource files.

Reads the XML document and extracts the ``<data>`` entries in file order.
Everything else in a .resx (xsd:schema, resheader, metadata, assembly)
is ignored.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from .types import ResourceEntry

logger = logging.getLogger(__name__)


class ResGenError(Exception):
    """Base class for fatal resgen errors."""


class ResourceFileError(ResGenError):
    """A resource file could not be turned into entries."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


def load_document(path: Path) -> ET.Element:
    """Parse a resource file and return its root element."""
    with open(path, "rb") as f:
        try:
            return ET.parse(f).getroot()
        except ET.ParseError as exc:
            raise ResourceFileError(path, f"malformed resource document ({exc})") from exc


def _entry_value(data: ET.Element) -> str:
    """Return the text of a <data> element, preferring its <value> child."""
    value = data.find("value")
    if value is not None:
        return value.text or ""
    return "".join(data.itertext())


def get_entries(root: ET.Element, path: Path) -> list[ResourceEntry]:
    """Extract every named <data> entry from a parsed resource document."""
    entries: list[ResourceEntry] = []
    for data in root.findall("data"):
        name = data.get("name")
        if name is None:
            raise ResourceFileError(path, "<data> element without a name attribute")
        entries.append(ResourceEntry(name=name, value=_entry_value(data)))
    return entries


def load_entries(path: Path) -> list[ResourceEntry]:
    """Load the ordered string entries of a resource file."""
    path = Path(path)
    entries = get_entries(load_document(path), path)
    logger.debug("Loaded %d entries from %s", len(entries), path)
    return entries
