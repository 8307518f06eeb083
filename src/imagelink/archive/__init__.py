# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Virtual archives reconstructed from an already assembled image."""

from __future__ import annotations

from .entries import ArchiveEntry, EntrySource, InstalledFileSource, LiveModuleSource
from .virtual import VirtualArchive

__all__ = (
    "ArchiveEntry",
    "EntrySource",
    "InstalledFileSource",
    "LiveModuleSource",
    "VirtualArchive",
)
