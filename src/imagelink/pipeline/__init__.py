# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resource pool collaborators that host a catalog recording pass."""

from __future__ import annotations

from .pool import EntryTransform, ModuleInfo, ResourcePool, ResourcePoolBuilder
from .sources import SECTION_TYPES, ModuleSourceScanner, archive_pool, scan_modules

__all__ = (
    "EntryTransform",
    "ModuleInfo",
    "ModuleSourceScanner",
    "ResourcePool",
    "ResourcePoolBuilder",
    "SECTION_TYPES",
    "archive_pool",
    "scan_modules",
)
