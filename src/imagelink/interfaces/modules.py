# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Contracts for resolving installed modules and reading their resources."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable
from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class ModuleReader(Protocol):
    """Read the live primary resources of one installed module."""

    @abstractmethod
    def list_paths(self) -> Iterable[str]:
        """Return every resource path of the module.

        Returns:
            Iterable[str]: Module-relative POSIX paths.
        """
        raise NotImplementedError("ModuleReader.list_paths must be implemented")

    @abstractmethod
    def open_path(self, path: str) -> BinaryIO | None:
        """Open the resource stored at ``path``.

        Args:
            path: Module-relative resource path.

        Returns:
            BinaryIO | None: Binary stream, or ``None`` when the resource is absent.
        """
        raise NotImplementedError("ModuleReader.open_path must be implemented")


@runtime_checkable
class ModuleResolver(Protocol):
    """Resolve module names against the installed platform."""

    @abstractmethod
    def resolve(self, module_name: str) -> ModuleReader | None:
        """Return a reader for ``module_name`` or ``None`` when not installed.

        Args:
            module_name: Name of the module to resolve.

        Returns:
            ModuleReader | None: Reader over the module's live resources.
        """
        raise NotImplementedError("ModuleResolver.resolve must be implemented")


@runtime_checkable
class ContentSource(Protocol):
    """Provide resource bytes that are resolved on every access."""

    @abstractmethod
    def size(self) -> int:
        """Return the current content size in bytes."""
        raise NotImplementedError("ContentSource.size must be implemented")

    @abstractmethod
    def open_stream(self) -> BinaryIO:
        """Return a fresh binary stream over the content."""
        raise NotImplementedError("ContentSource.open_stream must be implemented")


__all__ = ["ContentSource", "ModuleReader", "ModuleResolver"]
