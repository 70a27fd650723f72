"""Render templates and write generated output.

Takes a GenerationRequest, builds its context and produces the C#
accessor class for gen/<ClassName>.cs.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import jinja2

from .context_builder import build_context
from .loader import load_entries
from .naming import split_class_name
from .types import GeneratedSource, GenerationRequest

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "accessor.cs.j2"
OUTPUT_EXTENSION = ".cs"

_LINE_ENDING = re.compile(r"\r\n?|\n")


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def normalize_line_endings(text: str) -> str:
    """Convert every CR, LF or CRLF to CRLF."""
    return _LINE_ENDING.sub("\r\n", text)


def render(context: dict) -> str:
    """Render the accessor template with a prepared context."""
    template = _environment().get_template(TEMPLATE_NAME)
    return normalize_line_endings(template.render(**context))


def generate(request: GenerationRequest) -> GeneratedSource:
    """Render the accessor class for one resource file.

    Loader errors propagate; nothing is rendered for a file that fails
    to parse.
    """
    entries = load_entries(request.file_path)
    context = build_context(request, entries)
    return GeneratedSource(
        short_class_name=context["class_name"],
        text=render(context),
    )


def output_path(gen_dir: Path, class_name: str) -> Path:
    """Return gen/<ShortClassName>.cs for a possibly dotted class name."""
    _, short_class_name = split_class_name(class_name)
    return Path(gen_dir) / f"{short_class_name}{OUTPUT_EXTENSION}"


def write_source(source: GeneratedSource, gen_dir: Path) -> Path:
    """Write a rendered class to gen_dir, creating the directory if needed."""
    gen_dir = Path(gen_dir)
    gen_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_path(gen_dir, source.short_class_name)
    # newline="" keeps the CRLF endings from being translated again
    with open(out_path, "w", encoding="utf-8", newline="") as f:
        f.write(source.text)
    return out_path
