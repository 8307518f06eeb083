# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsing of ``<os>-<arch>`` target platform strings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import ConfigurationError
from .constants import BIN_DIRNAME, LIB_DIRNAME, OS_ALIASES, WINDOWS_RELOCATED_LIB_SUFFIXES


class OperatingSystem(str, Enum):
    """Enumerate operating systems that influence image layout."""

    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"
    AIX = "aix"


@dataclass(frozen=True, slots=True)
class TargetPlatform:
    """Describe the platform an image is assembled for.

    Attributes:
        os: Operating system of the target.
        arch: CPU architecture token, lower-cased.
    """

    os: OperatingSystem
    arch: str

    @classmethod
    def parse(cls, value: str) -> TargetPlatform:
        """Parse a platform string such as ``linux-x64`` or ``windows-aarch64``.

        Args:
            value: Platform string of the form ``<os>-<arch>``.

        Returns:
            TargetPlatform: Parsed platform.

        Raises:
            ConfigurationError: If the string is malformed or names an unknown OS.
        """

        os_token, sep, arch = value.strip().lower().partition("-")
        if not sep or not os_token or not arch:
            raise ConfigurationError(f"malformed target platform {value!r}; expected '<os>-<arch>'")
        canonical = OS_ALIASES.get(os_token)
        if canonical is None:
            raise ConfigurationError(f"unknown operating system {os_token!r} in target platform {value!r}")
        return cls(os=OperatingSystem(canonical), arch=arch)

    @property
    def is_windows(self) -> bool:
        """Return whether the platform installs native libraries the Windows way.

        Returns:
            bool: ``True`` when the operating system is Windows.
        """

        return self.os is OperatingSystem.WINDOWS

    def __str__(self) -> str:
        return f"{self.os.value}-{self.arch}"


def installed_native_path(module_path: str, platform: TargetPlatform) -> str:
    """Return where a native library lands once installed for ``platform``.

    Windows images move ``lib/`` libraries with one of the relocated suffixes
    into ``bin/``; every other platform and suffix keeps its path.

    Args:
        module_path: Native library path relative to the module root.
        platform: Target platform of the image.

    Returns:
        str: Installed path relative to the image root.
    """

    if not platform.is_windows:
        return module_path
    if not module_path.endswith(WINDOWS_RELOCATED_LIB_SUFFIXES):
        return module_path
    lib_prefix = f"{LIB_DIRNAME}/"
    if module_path.startswith(lib_prefix):
        return f"{BIN_DIRNAME}/{module_path[len(lib_prefix):]}"
    return module_path


__all__ = ["OperatingSystem", "TargetPlatform", "installed_native_path"]
