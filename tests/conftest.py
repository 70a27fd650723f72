"""Shared fixtures for resgen tests.

Resource documents and module trees are written under tmp_path so each
test gets a clean layout:

    {tmp_path}/{Module}/resources/{File}.resx
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable
from xml.sax.saxutils import escape, quoteattr

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def resx_document(entries: list[tuple[str, str]]) -> str:
    """Build a minimal .resx document from (name, value) pairs."""
    lines = [
        '<?xml version="1.0" encoding="utf-8"?>',
        "<root>",
        '  <resheader name="resmimetype">',
        "    <value>text/microsoft-resx</value>",
        "  </resheader>",
    ]
    for name, value in entries:
        lines.append(f'  <data name={quoteattr(name)} xml:space="preserve">')
        lines.append(f"    <value>{escape(value)}</value>")
        lines.append("  </data>")
    lines.append("</root>")
    return "\n".join(lines) + "\n"


@pytest.fixture
def messages_resx() -> Path:
    """The checked-in public.Messages.resx fixture."""
    return FIXTURES_DIR / "public.Messages.resx"


@pytest.fixture
def write_resx(tmp_path) -> Callable[..., Path]:
    """Return a callable writing a .resx file into {module}/resources/.

    Usage::

        path = write_resx("Greeter", "public.Messages.resx", [("Hello", "Hi there")])
    """
    def _write(module: str, filename: str, entries: list[tuple[str, str]]) -> Path:
        resources = tmp_path / module / "resources"
        resources.mkdir(parents=True, exist_ok=True)
        path = resources / filename
        path.write_text(resx_document(entries), encoding="utf-8")
        return path
    return _write
