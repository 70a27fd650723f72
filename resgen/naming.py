"""Derive class names, access modifiers and identifiers from resource files.

Convention:
  - public.{Name}.resx -> public class {Name}
  - {Name}.resx        -> internal class {Name}

The "public." prefix is matched case-insensitively. Dotted class names
carry a namespace:

  Strings.Errors      -> namespace Strings, class Errors
  A.B.C               -> namespace A.B,     class C
  Messages            -> no namespace,      class Messages

The resource-set id handed to ResourceManager must match the name the
packaging step embeds the compiled .resources blob under:

  {module}.resources.{public.}{ClassName}
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable

PUBLIC = "public"
INTERNAL = "internal"

_PUBLIC_PREFIX = "public."

_WHITESPACE = re.compile(r"\s")

# (resource file path) -> (class name, access modifier)
NamingPolicy = Callable[[Path], tuple[str, str]]


def class_name_for(path: Path) -> tuple[str, str]:
    """Return (class_name, access_modifier) for a resource file."""
    class_name = Path(path).stem
    if class_name.lower().startswith(_PUBLIC_PREFIX):
        return class_name[len(_PUBLIC_PREFIX):], PUBLIC
    return class_name, INTERNAL


def split_class_name(class_name: str) -> tuple[str | None, str]:
    """Split a dotted class name into (namespace, short class name)."""
    namespace, dot, short_name = class_name.rpartition(".")
    if not dot:
        return None, class_name
    return namespace, short_name


def to_identifier(name: str) -> str:
    """Replace each whitespace character of an entry name with an underscore."""
    return _WHITESPACE.sub("_", name)


def is_public(access_modifier: str) -> bool:
    return access_modifier.lower() == PUBLIC


def resource_set_id(module_name: str, class_name: str, access_modifier: str) -> str:
    """Build the manifest resource name the generated ResourceManager loads."""
    prefix = _PUBLIC_PREFIX if is_public(access_modifier) else ""
    return f"{module_name}.resources.{prefix}{class_name}"
