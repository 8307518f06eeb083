# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for installing linked pools as exploded images."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from imagelink.archive import VirtualArchive
from imagelink.catalog import ModuleResourcesRecorder
from imagelink.errors import ResourceIOError
from imagelink.layout import image_location, write_image
from imagelink.pipeline import ResourcePool, archive_pool
from imagelink.platform import TargetPlatform
from imagelink.resources import ResourceEntry, ResourceType

EntryFactory = Callable[..., ResourceEntry]
PoolFactory = Callable[..., ResourcePool]

LINUX = TargetPlatform.parse("linux-x64")
WINDOWS = TargetPlatform.parse("windows-x64")


@pytest.mark.parametrize(
    ("path", "resource_type", "platform", "expected"),
    [
        ("/m/p/A.class", ResourceType.CLASS_OR_RESOURCE, LINUX, "modules/m/p/A.class"),
        ("/m/module_resources", ResourceType.CLASS_OR_RESOURCE, LINUX, "modules/m/module_resources"),
        ("/m/conf/m.properties", ResourceType.CONFIG, LINUX, "conf/m.properties"),
        ("/m/lib/m.dll", ResourceType.NATIVE_LIB, LINUX, "lib/m.dll"),
        ("/m/lib/m.dll", ResourceType.NATIVE_LIB, WINDOWS, "bin/m.dll"),
        ("/m/lib/m.lib", ResourceType.NATIVE_LIB, WINDOWS, "lib/m.lib"),
    ],
)
def test_image_location(
    make_entry: EntryFactory,
    tmp_path: Path,
    path: str,
    resource_type: ResourceType,
    platform: TargetPlatform,
    expected: str,
) -> None:
    assert image_location(make_entry(path, resource_type), tmp_path, platform) == tmp_path / expected


def test_written_image_can_be_reconstructed(make_entry: EntryFactory, make_pool: PoolFactory, tmp_path: Path) -> None:
    pool = make_pool(
        [
            make_entry("/m/A.class", data=b"class-a"),
            make_entry("/m/lib/m.dll", ResourceType.NATIVE_LIB, data=b"dll"),
            make_entry("/m/conf/m.properties", ResourceType.CONFIG, data=b"k=v"),
        ],
        platform="windows-x64",
        anchor="m",
    )
    linked = ModuleResourcesRecorder(anchor_module="m").transform(pool)

    written = write_image(linked, tmp_path / "image", WINDOWS)

    root = tmp_path / "image"
    assert written.catalogs == (root / "modules" / "m" / "module_resources",)
    assert set(written.files) == {
        root / "modules" / "m" / "A.class",
        root / "bin" / "m.dll",
        root / "conf" / "m.properties",
        root / "modules" / "m" / "module_resources",
    }
    entries = {entry.path: entry for entry in VirtualArchive("m", root).entries()}
    assert entries["bin/m.dll"].read_bytes() == b"dll"
    assert entries["conf/m.properties"].size() == 3
    assert entries["A.class"].read_bytes() == b"class-a"


def test_relinking_a_written_image_is_stable(image_root: Path, tmp_path: Path) -> None:
    recorder = ModuleResourcesRecorder(anchor_module="m")
    first_root = tmp_path / "first"
    second_root = tmp_path / "second"

    first = recorder.transform(archive_pool([VirtualArchive("m", image_root)], "linux-x64"))
    write_image(first, first_root, LINUX)
    second = recorder.transform(archive_pool([VirtualArchive("m", first_root)], "linux-x64"))
    write_image(second, second_root, LINUX)

    catalog = Path("modules") / "m" / "module_resources"
    assert (second_root / catalog).read_bytes() == (image_root / catalog).read_bytes()
    assert (second_root / "lib" / "libm.so").read_bytes() == b"\x7fELF-native"
    assert (second_root / "modules" / "m" / "B.class").read_bytes() == b"class-bb"


def test_two_entries_installed_at_one_file_are_rejected(make_entry: EntryFactory, tmp_path: Path) -> None:
    pool = ResourcePool(
        [
            make_entry("/a/bin/tool", ResourceType.NATIVE_CMD),
            make_entry("/b/bin/tool", ResourceType.NATIVE_CMD),
        ],
    )

    with pytest.raises(ResourceIOError, match="both installed"):
        write_image(pool, tmp_path, LINUX)
