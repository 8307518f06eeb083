# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for pipeline resource entries."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from imagelink.errors import ResourceIOError
from imagelink.interfaces import ContentSource
from imagelink.resources import NON_PRIMARY_TYPES, ResourceEntry, ResourceType, module_name_of


def test_resource_type_ordinals_are_stable() -> None:
    assert [int(member) for member in ResourceType] == list(range(8))
    assert ResourceType.NATIVE_LIB == 6
    assert ResourceType.TOP == 7


def test_non_primary_types_exclude_primary_and_top() -> None:
    assert ResourceType.CLASS_OR_RESOURCE not in NON_PRIMARY_TYPES
    assert ResourceType.TOP not in NON_PRIMARY_TYPES
    assert len(NON_PRIMARY_TYPES) == 6


@pytest.mark.parametrize("path", ["m/A.class", "/m", "/m/", "//A.class"])
def test_module_name_of_rejects_paths_without_module_prefix(path: str) -> None:
    with pytest.raises(ValueError):
        module_name_of(path)


def test_create_derives_module_and_module_path() -> None:
    entry = ResourceEntry.create("/java.base/lib/libjava.so", b"abc", ResourceType.NATIVE_LIB)

    assert entry.module_name == "java.base"
    assert entry.module_path == "lib/libjava.so"
    assert entry.content_length() == 3
    assert entry.read_bytes() == b"abc"


def test_entry_requires_exactly_one_content_source(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        ResourceEntry(module_name="m", path="/m/A.class")
    with pytest.raises(ValueError):
        ResourceEntry(module_name="m", path="/m/A.class", data=b"", file=tmp_path / "A.class")


def test_entry_rejects_foreign_module_path() -> None:
    with pytest.raises(ValueError):
        ResourceEntry(module_name="other", path="/m/A.class", data=b"")


def test_file_backed_entry_reads_on_demand(tmp_path: Path) -> None:
    file = tmp_path / "libm.so"
    entry = ResourceEntry.from_file("/m/lib/libm.so", file, ResourceType.NATIVE_LIB)

    with pytest.raises(ResourceIOError):
        entry.content_length()

    file.write_bytes(b"native")
    assert entry.content_length() == 6
    assert entry.read_bytes() == b"native"


class _Counter:
    """Content source recording how often it was resolved."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.opened = 0

    def size(self) -> int:
        return len(self.data)

    def open_stream(self) -> io.BytesIO:
        self.opened += 1
        return io.BytesIO(self.data)


def test_source_backed_entry_resolves_on_every_read() -> None:
    source = _Counter(b"one")
    entry = ResourceEntry.from_source("/m/conf/a.properties", source, ResourceType.CONFIG)

    assert isinstance(source, ContentSource)
    assert entry.read_bytes() == b"one"
    source.data = b"three"
    assert entry.content_length() == 5
    assert entry.read_bytes() == b"three"
    assert source.opened == 2
    with pytest.raises(ValueError):
        ResourceEntry(module_name="m", path="/m/A.class", data=b"", source=source)
