# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Contracts for archive sources consumed by the assembly pipeline."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable

from ..resources import ResourceType


@runtime_checkable
class ArchiveEntryView(Protocol):
    """Describe one lazily readable archive entry."""

    @property
    @abstractmethod
    def path(self) -> str:
        """Return the module-relative entry path."""
        raise NotImplementedError("ArchiveEntryView.path must be implemented")

    @property
    @abstractmethod
    def type(self) -> ResourceType:
        """Return the resource type of the entry."""
        raise NotImplementedError("ArchiveEntryView.type must be implemented")

    @abstractmethod
    def size(self) -> int:
        """Return the entry size in bytes, resolved on each call."""
        raise NotImplementedError("ArchiveEntryView.size must be implemented")

    @abstractmethod
    def open_stream(self) -> BinaryIO:
        """Return a fresh binary stream over the entry content."""
        raise NotImplementedError("ArchiveEntryView.open_stream must be implemented")


@runtime_checkable
class Archive(Protocol):
    """Expose the resources of one module to the assembly pipeline."""

    @property
    @abstractmethod
    def module_name(self) -> str:
        """Return the name of the module backing the archive."""
        raise NotImplementedError("Archive.module_name must be implemented")

    @property
    @abstractmethod
    def root_path(self) -> Path:
        """Return the filesystem root the archive reads from."""
        raise NotImplementedError("Archive.root_path must be implemented")

    @abstractmethod
    def open(self) -> None:
        """Prepare the archive for reading; repeated calls are no-ops."""
        raise NotImplementedError("Archive.open must be implemented")

    @abstractmethod
    def close(self) -> None:
        """Release in-memory state; repeated calls are no-ops."""
        raise NotImplementedError("Archive.close must be implemented")

    @abstractmethod
    def entries(self) -> Iterator[ArchiveEntryView]:
        """Return a lazy iterator over the archive entries."""
        raise NotImplementedError("Archive.entries must be implemented")


__all__ = ["Archive", "ArchiveEntryView"]
