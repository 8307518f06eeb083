# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for target platform parsing and native library placement."""

from __future__ import annotations

import pytest

from imagelink.errors import ConfigurationError
from imagelink.platform import OperatingSystem, TargetPlatform, installed_native_path

WINDOWS = TargetPlatform.parse("windows-x64")
LINUX = TargetPlatform.parse("linux-x64")


@pytest.mark.parametrize(
    ("value", "expected_os", "expected_arch"),
    [
        ("linux-x64", OperatingSystem.LINUX, "x64"),
        ("Windows-AArch64", OperatingSystem.WINDOWS, "aarch64"),
        ("macosx-x64", OperatingSystem.MACOS, "x64"),
        ("darwin-arm64", OperatingSystem.MACOS, "arm64"),
        ("linux-s390x", OperatingSystem.LINUX, "s390x"),
    ],
)
def test_parse_platform(value: str, expected_os: OperatingSystem, expected_arch: str) -> None:
    platform = TargetPlatform.parse(value)

    assert platform.os is expected_os
    assert platform.arch == expected_arch


@pytest.mark.parametrize("value", ["", "linux", "-x64", "linux-", "plan9-x64"])
def test_parse_platform_rejects_invalid_values(value: str) -> None:
    with pytest.raises(ConfigurationError):
        TargetPlatform.parse(value)


def test_platform_renders_canonical_string() -> None:
    assert str(TargetPlatform.parse("Win-X64")) == "windows-x64"


@pytest.mark.parametrize("suffix", [".dll", ".diz", ".pdb", ".map"])
def test_windows_relocates_library_suffixes_to_bin(suffix: str) -> None:
    assert installed_native_path(f"lib/foo{suffix}", WINDOWS) == f"bin/foo{suffix}"


@pytest.mark.parametrize("path", ["lib/libfoo.so", "lib/foo.lib", "conf/foo.dll", "lib/server/jvm.cfg"])
def test_windows_keeps_other_native_paths(path: str) -> None:
    assert installed_native_path(path, WINDOWS) == path


def test_windows_relocation_preserves_nested_directories() -> None:
    assert installed_native_path("lib/server/jvm.dll", WINDOWS) == "bin/server/jvm.dll"


def test_non_windows_never_relocates() -> None:
    assert installed_native_path("lib/foo.dll", LINUX) == "lib/foo.dll"
