# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Serialise accumulated catalog lines into one synthetic resource per module."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..resources import ResourceEntry, ResourceType
from .accumulator import CatalogAccumulator
from .types import CATALOG_ENCODING, LINE_SEPARATOR, catalog_path

LOGGER = logging.getLogger(__name__)


def render_catalog(lines: Iterable[str]) -> bytes:
    """Return the catalog bytes for ``lines``.

    Lines are sorted so the output does not depend on recording order.

    Args:
        lines: Rendered catalog lines of a single module.

    Returns:
        bytes: UTF-8 encoded, newline separated catalog without a trailing newline.
    """

    return LINE_SEPARATOR.join(sorted(lines)).encode(CATALOG_ENCODING)


def emit_catalogs(accumulator: CatalogAccumulator) -> list[ResourceEntry]:
    """Seal ``accumulator`` and return the catalog resources of every module.

    Must only be called after every entry of the pass has been classified.

    Args:
        accumulator: Accumulator populated during the pass.

    Returns:
        list[ResourceEntry]: Catalog entries ordered by module name.
    """

    snapshot = accumulator.seal()
    catalogs: list[ResourceEntry] = []
    for module_name in sorted(snapshot):
        lines = snapshot[module_name]
        if not lines:
            raise AssertionError(f"module {module_name!r} listed without catalog lines")
        catalogs.append(
            ResourceEntry.create(
                catalog_path(module_name),
                render_catalog(lines),
                ResourceType.CLASS_OR_RESOURCE,
            ),
        )
        LOGGER.debug("emitted catalog for %s with %d line(s)", module_name, len(lines))
    return catalogs


__all__ = ["emit_catalogs", "render_catalog"]
