"""Find resource files and drive generation for each module.

Directory convention:
  {root}/{Module}/resources/*.resx  ->  {root}/{Module}/gen/{ClassName}.cs

Two invocation modes:
  - single file: module dir is the grandparent of the .resx
  - scan: every directory under root (default: siblings of cwd) is a
    candidate module; those without a resources/ folder are skipped
"""

from __future__ import annotations

import glob
import logging
from pathlib import Path
from typing import Iterator

from .codegen import generate, write_source
from .naming import NamingPolicy, class_name_for
from .types import GenerationRequest, ModuleTarget

logger = logging.getLogger(__name__)

RESOURCES_DIRNAME = "resources"
GEN_DIRNAME = "gen"
DEFAULT_PATTERN = "*.resx"
DEFAULT_ROOT = Path("..")


def _target_for(module_dir: Path, pattern: str) -> ModuleTarget:
    return ModuleTarget(
        module_name=module_dir.name,
        resources_dir=module_dir / RESOURCES_DIRNAME,
        gen_dir=module_dir / GEN_DIRNAME,
        pattern=pattern,
    )


def single_file_target(path: Path) -> ModuleTarget:
    """Build the target for one resource file at {Module}/resources/{file}."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Resource file not found: {path}")
    # resolve() so that a bare "Foo.resx" still has a named grandparent
    resources_dir = path.resolve().parent
    module_dir = resources_dir.parent
    return ModuleTarget(
        module_name=module_dir.name,
        resources_dir=resources_dir,
        gen_dir=module_dir / GEN_DIRNAME,
        pattern=glob.escape(path.name),
    )


def find_targets(root: Path = DEFAULT_ROOT, pattern: str = DEFAULT_PATTERN) -> list[ModuleTarget]:
    """Return a target for every module under root that has a resources/ folder."""
    root = Path(root)
    targets = []
    for module_dir in sorted(p for p in root.iterdir() if p.is_dir()):
        target = _target_for(module_dir.resolve(), pattern)
        if target.resources_dir.is_dir():
            targets.append(target)
        else:
            logger.debug("No %s/ in %s, skipping", RESOURCES_DIRNAME, module_dir)
    return targets


def iter_requests(
    target: ModuleTarget, naming_policy: NamingPolicy = class_name_for,
) -> Iterator[GenerationRequest]:
    """Yield a GenerationRequest for each matching file of a module."""
    for resx_path in sorted(target.resources_dir.glob(target.pattern)):
        if not resx_path.is_file():
            continue
        class_name, access_modifier = naming_policy(resx_path)
        yield GenerationRequest(
            file_path=resx_path,
            module_name=target.module_name,
            class_name=class_name,
            access_modifier=access_modifier,
        )


def run(
    targets: list[ModuleTarget], naming_policy: NamingPolicy = class_name_for,
) -> list[Path]:
    """Generate and write an accessor class for every resource file.

    Stops at the first failure; errors propagate to the caller.
    """
    written: list[Path] = []
    for target in targets:
        target.gen_dir.mkdir(exist_ok=True)
        for request in iter_requests(target, naming_policy):
            source = generate(request)
            out_path = write_source(source, target.gen_dir)
            logger.info("ResGen for %s", out_path)
            written.append(out_path)
    return written
