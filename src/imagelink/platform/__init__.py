# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Target platform model and native-library placement rules."""

from __future__ import annotations

from .constants import BIN_DIRNAME, LIB_DIRNAME, WINDOWS_RELOCATED_LIB_SUFFIXES
from .target import OperatingSystem, TargetPlatform, installed_native_path

__all__ = [
    "BIN_DIRNAME",
    "LIB_DIRNAME",
    "WINDOWS_RELOCATED_LIB_SUFFIXES",
    "OperatingSystem",
    "TargetPlatform",
    "installed_native_path",
]
