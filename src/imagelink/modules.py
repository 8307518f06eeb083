# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Module resolvers backed by exploded images or in-memory resources."""

from __future__ import annotations

import io
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import BinaryIO, Final

from .errors import ResourceIOError

MODULES_DIRNAME: Final[str] = "modules"


class DirectoryModuleReader:
    """Read module resources stored as plain files below a directory."""

    def __init__(self, module_dir: Path) -> None:
        """Bind the reader to ``module_dir``.

        Args:
            module_dir: Directory holding the module's resources.
        """

        self._module_dir = module_dir

    @property
    def module_dir(self) -> Path:
        """Return the directory the reader serves."""

        return self._module_dir

    def list_paths(self) -> Iterator[str]:
        """Yield sorted POSIX paths of every file relative to the module directory.

        Raises:
            ResourceIOError: If the directory cannot be walked.
        """

        try:
            files = sorted(path for path in self._module_dir.rglob("*") if path.is_file())
        except OSError as exc:
            raise ResourceIOError(f"cannot list resources below {self._module_dir}") from exc
        for file in files:
            yield file.relative_to(self._module_dir).as_posix()

    def open_path(self, path: str) -> BinaryIO | None:
        """Open ``path`` relative to the module directory.

        Args:
            path: Module-relative resource path.

        Returns:
            BinaryIO | None: Binary stream, or ``None`` when no such file exists
            inside the module directory.

        Raises:
            ResourceIOError: If an existing file cannot be opened.
        """

        candidate = self._module_dir / path
        if not candidate.resolve().is_relative_to(self._module_dir.resolve()):
            return None
        if not candidate.is_file():
            return None
        try:
            return candidate.open("rb")
        except OSError as exc:
            raise ResourceIOError(f"cannot open {candidate}") from exc


class ImageModuleResolver:
    """Resolve modules of an exploded image laid out as ``<root>/modules/<name>/``."""

    def __init__(self, image_root: Path) -> None:
        """Bind the resolver to ``image_root``.

        Args:
            image_root: Root directory of the installed image.
        """

        self.image_root = image_root

    def module_dir(self, module_name: str) -> Path:
        """Return the directory that holds ``module_name``'s resources."""

        return self.image_root / MODULES_DIRNAME / module_name

    def resolve(self, module_name: str) -> DirectoryModuleReader | None:
        """Return a reader for ``module_name`` when installed in the image."""

        module_dir = self.module_dir(module_name)
        if not module_name or not module_dir.is_dir():
            return None
        return DirectoryModuleReader(module_dir)

    def module_names(self) -> tuple[str, ...]:
        """Return the sorted names of all installed modules."""

        modules_root = self.image_root / MODULES_DIRNAME
        if not modules_root.is_dir():
            return ()
        return tuple(sorted(path.name for path in modules_root.iterdir() if path.is_dir()))


class InMemoryModuleReader:
    """Serve module resources from a ``path -> bytes`` mapping."""

    def __init__(self, resources: Mapping[str, bytes]) -> None:
        self._resources = resources

    def list_paths(self) -> Iterator[str]:
        return iter(sorted(self._resources))

    def open_path(self, path: str) -> BinaryIO | None:
        data = self._resources.get(path)
        if data is None:
            return None
        return io.BytesIO(data)


class InMemoryModuleResolver:
    """Resolve modules held in memory; the mapping may change between calls."""

    def __init__(self, modules: Mapping[str, Mapping[str, bytes]] | None = None) -> None:
        """Initialise the resolver.

        Args:
            modules: Module name to ``path -> bytes`` resource mapping.
        """

        self.modules: dict[str, dict[str, bytes]] = {
            name: dict(resources) for name, resources in (modules or {}).items()
        }

    def resolve(self, module_name: str) -> InMemoryModuleReader | None:
        resources = self.modules.get(module_name)
        if resources is None:
            return None
        return InMemoryModuleReader(resources)


__all__ = [
    "MODULES_DIRNAME",
    "DirectoryModuleReader",
    "ImageModuleResolver",
    "InMemoryModuleReader",
    "InMemoryModuleResolver",
]
