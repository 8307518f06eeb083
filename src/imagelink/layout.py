# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Write a linked resource pool as an exploded image that can be linked from again."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from .catalog.classifier import recorded_path
from .catalog.types import CATALOG_FILENAME
from .errors import ResourceIOError
from .modules import MODULES_DIRNAME
from .pipeline import ResourcePool
from .platform import TargetPlatform
from .resources import ResourceEntry

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WrittenImage:
    """Summarise the files produced by :func:`write_image`.

    Attributes:
        root: Image root that received the files.
        files: Every written file in pool order.
        catalogs: The subset of ``files`` holding module catalogs.
    """

    root: Path
    files: tuple[Path, ...]
    catalogs: tuple[Path, ...]


def image_location(entry: ResourceEntry, root: Path, platform: TargetPlatform) -> Path:
    """Return where ``entry`` is installed below the image ``root``.

    Primary entries live in ``modules/<module>/``; every other entry is
    installed at its recorded path directly below ``root``, which is where
    reconstruction looks for it.

    Args:
        entry: Entry of a linked pool.
        root: Image root directory.
        platform: Target platform of the image.

    Returns:
        Path: Destination file.
    """

    if entry.type.is_primary:
        return root / MODULES_DIRNAME / entry.module_name / entry.module_path
    return root / recorded_path(entry, platform)


def write_image(pool: ResourcePool, root: Path, platform: TargetPlatform) -> WrittenImage:
    """Copy every entry of ``pool`` into an exploded image below ``root``.

    Args:
        pool: Output pool of a recording pass.
        root: Image root directory; created when missing.
        platform: Target platform the pool was linked for.

    Returns:
        WrittenImage: Written files and catalogs.

    Raises:
        ResourceIOError: If two entries map to the same file or a copy fails.
    """

    owners: dict[Path, str] = {}
    catalogs: list[Path] = []
    for entry in pool.entries():
        target = image_location(entry, root, platform)
        previous = owners.setdefault(target, entry.path)
        if previous != entry.path:
            raise ResourceIOError(f"{entry.path} and {previous} are both installed at {target}")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with entry.open_stream() as source, target.open("wb") as sink:
                shutil.copyfileobj(source, sink)
        except OSError as exc:
            raise ResourceIOError(f"cannot install {entry.path} at {target}") from exc
        if entry.type.is_primary and entry.module_path == CATALOG_FILENAME:
            catalogs.append(target)
    LOGGER.debug("installed %d file(s) below %s", len(owners), root)
    return WrittenImage(root=root, files=tuple(owners), catalogs=tuple(catalogs))


__all__ = ["WrittenImage", "image_location", "write_image"]
