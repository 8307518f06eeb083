# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocols shared between imagelink and its host pipeline."""

from __future__ import annotations

from .archive import Archive, ArchiveEntryView
from .modules import ContentSource, ModuleReader, ModuleResolver

__all__ = ["Archive", "ArchiveEntryView", "ContentSource", "ModuleReader", "ModuleResolver"]
