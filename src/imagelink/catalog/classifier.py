# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Classify pipeline entries and record non-primary resources into catalogs."""

from __future__ import annotations

import logging
from enum import Enum

from ..errors import CorruptCatalogError
from ..platform import TargetPlatform, installed_native_path
from ..resources import ResourceEntry, ResourceType
from .accumulator import CatalogAccumulator
from .types import CatalogLine, catalog_path

LOGGER = logging.getLogger(__name__)


class Decision(str, Enum):
    """Outcome of classifying a single entry."""

    KEEP = "keep"
    DROP = "drop"
    RECORD_AND_KEEP = "record-and-keep"


def recorded_path(entry: ResourceEntry, platform: TargetPlatform) -> str:
    """Return the module-relative path to record for a non-primary ``entry``.

    The recorded path matches where the file is physically installed, since
    reconstruction resolves it against the installed image root.

    Args:
        entry: Non-primary entry being recorded.
        platform: Target platform of the image under assembly.

    Returns:
        str: Module-relative installed path.
    """

    module_path = entry.module_path
    if entry.type is ResourceType.NATIVE_LIB:
        return installed_native_path(module_path, platform)
    return module_path


def classify(
    entry: ResourceEntry,
    platform: TargetPlatform,
    accumulator: CatalogAccumulator,
) -> Decision:
    """Classify ``entry`` and record it into ``accumulator`` when non-primary.

    Args:
        entry: Entry observed by the pipeline.
        platform: Target platform of the image under assembly.
        accumulator: Per-pass catalog accumulator receiving recorded lines.

    Returns:
        Decision: Whether the pipeline keeps or drops the entry.

    Raises:
        CorruptCatalogError: If a ``TOP`` entry reaches the classifier.
    """

    if entry.type is ResourceType.TOP:
        raise CorruptCatalogError(f"top-level file {entry.path!r} cannot be recorded in a module catalog")
    if entry.type is not ResourceType.CLASS_OR_RESOURCE:
        line = CatalogLine(type=entry.type, path=recorded_path(entry, platform))
        accumulator.record(entry.module_name, line)
        LOGGER.debug("recorded %s for module %s", line.render(), entry.module_name)
        return Decision.RECORD_AND_KEEP
    if entry.path == catalog_path(entry.module_name):
        # A catalog from an earlier pass; the current pass emits a fresh one.
        LOGGER.debug("dropping stale catalog %s", entry.path)
        return Decision.DROP
    return Decision.KEEP


__all__ = ["Decision", "classify", "recorded_path"]
