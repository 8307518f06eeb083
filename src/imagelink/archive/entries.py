# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reconstructed archive entries and their lazily resolved byte sources."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Final, TypeAlias

from ..errors import ConfigurationError, ResourceIOError
from ..interfaces.modules import ModuleResolver
from ..resources import ResourceType

_READ_CHUNK: Final[int] = 1024 * 1024


@dataclass(frozen=True, slots=True)
class InstalledFileSource:
    """Locate entry bytes as a file below the installed image root.

    Attributes:
        root: Installation root shared by every module of the image.
        relative_path: Path of the file relative to ``root``.
    """

    root: Path
    relative_path: str

    @property
    def file(self) -> Path:
        """Return the absolute location of the file."""

        return self.root / self.relative_path


@dataclass(frozen=True, slots=True)
class LiveModuleSource:
    """Locate entry bytes through the module's live resource reader.

    Attributes:
        resolver: Capability resolving the module on every access.
        module_name: Module owning the resource.
        path: Module-relative resource path.
    """

    resolver: ModuleResolver
    module_name: str
    path: str


EntrySource: TypeAlias = InstalledFileSource | LiveModuleSource


@dataclass(frozen=True, slots=True)
class ArchiveEntry:
    """Describe one entry of a reconstructed module archive.

    Bytes are never cached; :meth:`size` and :meth:`open_stream` resolve the
    source on each call.

    Attributes:
        path: Module-relative entry path.
        type: Resource type of the entry.
        source: Backing store the entry reads from.
    """

    path: str
    type: ResourceType
    source: EntrySource

    def size(self) -> int:
        """Return the current size of the entry in bytes.

        Returns:
            int: Number of content bytes.

        Raises:
            ResourceIOError: If the backing file or resource cannot be read.
            ConfigurationError: If the owning module is no longer resolvable.
        """

        source = self.source
        if isinstance(source, InstalledFileSource):
            try:
                return source.file.stat().st_size
            except OSError as exc:
                raise ResourceIOError(f"cannot stat installed file {source.file}") from exc
        total = 0
        with _open_live(source) as stream:
            while chunk := stream.read(_READ_CHUNK):
                total += len(chunk)
        return total

    def open_stream(self) -> BinaryIO:
        """Return a fresh binary stream over the entry content.

        Returns:
            BinaryIO: Stream the caller must close.

        Raises:
            ResourceIOError: If the backing file or resource cannot be opened.
            ConfigurationError: If the owning module is no longer resolvable.
        """

        source = self.source
        if isinstance(source, InstalledFileSource):
            try:
                return source.file.open("rb")
            except OSError as exc:
                raise ResourceIOError(f"cannot open installed file {source.file}") from exc
        return _open_live(source)

    def read_bytes(self) -> bytes:
        """Return the full content of the entry."""

        with self.open_stream() as stream:
            return stream.read()


def _open_live(source: LiveModuleSource) -> BinaryIO:
    """Re-resolve ``source``'s module and open its resource.

    Args:
        source: Live module source to open.

    Returns:
        BinaryIO: Stream over the resource bytes.

    Raises:
        ConfigurationError: If the module cannot be resolved.
        ResourceIOError: If the module no longer provides the resource.
    """

    reader = source.resolver.resolve(source.module_name)
    if reader is None:
        raise ConfigurationError(f"module {source.module_name!r} not part of the installed platform")
    try:
        stream = reader.open_path(source.path)
    except OSError as exc:
        raise ResourceIOError(f"cannot open {source.path!r} in module {source.module_name!r}") from exc
    if stream is None:
        raise ResourceIOError(f"module {source.module_name!r} has no resource {source.path!r}")
    return stream


__all__ = ["ArchiveEntry", "EntrySource", "InstalledFileSource", "LiveModuleSource"]
