# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from imagelink.pipeline import ModuleInfo, ResourcePool
from imagelink.resources import ResourceEntry, ResourceType

EntryFactory = Callable[..., ResourceEntry]
PoolFactory = Callable[..., ResourcePool]


def _entry(path: str, resource_type: ResourceType = ResourceType.CLASS_OR_RESOURCE, data: bytes = b"") -> ResourceEntry:
    return ResourceEntry.create(path, data or path.encode("utf-8"), resource_type)


@pytest.fixture
def make_entry() -> EntryFactory:
    """Return a factory for in-memory entries whose content defaults to their path."""
    return _entry


@pytest.fixture
def make_pool() -> PoolFactory:
    """Return a factory building pools whose anchor module declares a platform."""

    def _factory(
        entries: Iterable[ResourceEntry],
        *,
        platform: str | None = "linux-x64",
        anchor: str = "java.base",
    ) -> ResourcePool:
        return ResourcePool(entries, modules=[ModuleInfo(name=anchor, target_platform=platform)])

    return _factory


@pytest.fixture
def image_root(tmp_path: Path) -> Path:
    """Return an exploded image holding module ``m`` with one native library."""
    root = tmp_path / "image"
    module_dir = root / "modules" / "m"
    module_dir.mkdir(parents=True)
    (module_dir / "A.class").write_bytes(b"class-a")
    (module_dir / "B.class").write_bytes(b"class-bb")
    (module_dir / "module_resources").write_text(f"{int(ResourceType.NATIVE_LIB)}|lib/libm.so", encoding="utf-8")
    (root / "lib").mkdir()
    (root / "lib" / "libm.so").write_bytes(b"\x7fELF-native")
    return root
