# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resource entries flowing through an image-assembly pass."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Final

from .errors import ResourceIOError

if TYPE_CHECKING:
    from .interfaces.modules import ContentSource

PATH_SEPARATOR: Final[str] = "/"


class ResourceType(IntEnum):
    """Enumerate resource kinds; the ordinal values are persisted in catalogs."""

    CLASS_OR_RESOURCE = 0
    CONFIG = 1
    HEADER_FILE = 2
    LEGAL_NOTICE = 3
    MAN_PAGE = 4
    NATIVE_CMD = 5
    NATIVE_LIB = 6
    TOP = 7

    @property
    def is_primary(self) -> bool:
        """Return whether the type names class or generic resource content.

        Returns:
            bool: ``True`` for :attr:`CLASS_OR_RESOURCE`.
        """

        return self is ResourceType.CLASS_OR_RESOURCE


NON_PRIMARY_TYPES: Final[frozenset[ResourceType]] = frozenset(
    {
        ResourceType.CONFIG,
        ResourceType.HEADER_FILE,
        ResourceType.LEGAL_NOTICE,
        ResourceType.MAN_PAGE,
        ResourceType.NATIVE_CMD,
        ResourceType.NATIVE_LIB,
    },
)


def module_name_of(path: str) -> str:
    """Return the module component of an absolute ``/<module>/...`` path.

    Args:
        path: Entry path including the leading module segment.

    Returns:
        str: Module name encoded in ``path``.

    Raises:
        ValueError: If ``path`` does not start with a ``/<module>/`` prefix.
    """

    if not path.startswith(PATH_SEPARATOR):
        raise ValueError(f"resource path must start with '/': {path!r}")
    module, sep, remainder = path[1:].partition(PATH_SEPARATOR)
    if not module or not sep or not remainder:
        raise ValueError(f"resource path lacks a module prefix: {path!r}")
    return module


@dataclass(frozen=True, slots=True)
class ResourceEntry:
    """Describe one resource of a module as seen by the assembly pipeline.

    Attributes:
        module_name: Name of the owning module.
        path: Absolute entry path in the form ``/<module>/<module path>``.
        type: Resource kind of the entry.
        data: In-memory content; exactly one of ``data``, ``file`` and ``source`` is set.
        file: Filesystem location of the content, read on demand.
        source: Lazily resolved content, e.g. an entry of a reconstructed archive.
    """

    module_name: str
    path: str
    type: ResourceType = ResourceType.CLASS_OR_RESOURCE
    data: bytes | None = field(default=None, repr=False)
    file: Path | None = None
    source: ContentSource | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the module prefix and content source."""

        if module_name_of(self.path) != self.module_name:
            raise ValueError(f"path {self.path!r} does not belong to module {self.module_name!r}")
        if sum(backing is not None for backing in (self.data, self.file, self.source)) != 1:
            raise ValueError("exactly one of 'data', 'file' or 'source' must be supplied")

    @classmethod
    def create(
        cls,
        path: str,
        data: bytes,
        type: ResourceType = ResourceType.CLASS_OR_RESOURCE,
    ) -> ResourceEntry:
        """Return an in-memory entry deriving the module name from ``path``.

        Args:
            path: Absolute entry path ``/<module>/<module path>``.
            data: Entry content.
            type: Resource kind of the entry.

        Returns:
            ResourceEntry: Newly created entry.
        """

        return cls(module_name=module_name_of(path), path=path, type=type, data=bytes(data))

    @classmethod
    def from_file(
        cls,
        path: str,
        file: Path,
        type: ResourceType = ResourceType.CLASS_OR_RESOURCE,
    ) -> ResourceEntry:
        """Return an entry whose content is read from ``file`` when requested.

        Args:
            path: Absolute entry path ``/<module>/<module path>``.
            file: Filesystem location holding the content.
            type: Resource kind of the entry.

        Returns:
            ResourceEntry: Newly created file-backed entry.
        """

        return cls(module_name=module_name_of(path), path=path, type=type, file=file)

    @classmethod
    def from_source(
        cls,
        path: str,
        source: ContentSource,
        type: ResourceType = ResourceType.CLASS_OR_RESOURCE,
    ) -> ResourceEntry:
        """Return an entry whose content is resolved through ``source`` on each read."""

        return cls(module_name=module_name_of(path), path=path, type=type, source=source)

    @property
    def module_path(self) -> str:
        """Return the entry path relative to the module root.

        Returns:
            str: Path with the leading ``/<module>/`` prefix removed.
        """

        return self.path[len(self.module_name) + 2 :]

    def content_length(self) -> int:
        """Return the number of content bytes.

        Returns:
            int: Content size in bytes.

        Raises:
            ResourceIOError: If the backing file cannot be inspected.
        """

        if self.data is not None:
            return len(self.data)
        if self.source is not None:
            return self.source.size()
        assert self.file is not None
        try:
            return self.file.stat().st_size
        except OSError as exc:
            raise ResourceIOError(f"{self.path}: cannot stat {self.file}") from exc

    def open_stream(self) -> BinaryIO:
        """Return a binary stream over the entry content.

        Returns:
            BinaryIO: Stream positioned at the start of the content.

        Raises:
            ResourceIOError: If the backing file cannot be opened.
        """

        if self.data is not None:
            return io.BytesIO(self.data)
        if self.source is not None:
            return self.source.open_stream()
        assert self.file is not None
        try:
            return self.file.open("rb")
        except OSError as exc:
            raise ResourceIOError(f"{self.path}: cannot open {self.file}") from exc

    def read_bytes(self) -> bytes:
        """Return the full entry content.

        Returns:
            bytes: Content of the entry.
        """

        with self.open_stream() as stream:
            return stream.read()


__all__ = (
    "NON_PRIMARY_TYPES",
    "PATH_SEPARATOR",
    "ResourceEntry",
    "ResourceType",
    "module_name_of",
)
