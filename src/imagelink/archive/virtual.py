# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reconstruct a module archive from its catalog and live resource reader."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from ..catalog.parser import parse_catalog
from ..catalog.types import CATALOG_FILENAME
from ..errors import ConfigurationError, MissingCatalogError, ResourceIOError
from ..interfaces.modules import ModuleReader, ModuleResolver
from ..modules import ImageModuleResolver
from ..resources import ResourceType
from .entries import ArchiveEntry, InstalledFileSource, LiveModuleSource

LOGGER = logging.getLogger(__name__)


class VirtualArchive:
    """Expose a module's full resource listing without its original packaged form.

    Non-primary entries come from the module's catalog and read from the base
    image root; primary entries come from the module's live reader. Entries are
    collected on first use and discarded again by :meth:`close`.
    """

    def __init__(
        self,
        module_name: str,
        base_root: Path,
        *,
        resolver: ModuleResolver | None = None,
        require_catalog: bool = True,
    ) -> None:
        """Bind the archive to ``module_name`` within the image at ``base_root``.

        Args:
            module_name: Module to reconstruct.
            base_root: Installation root of the already assembled image.
            resolver: Module resolution capability; defaults to an
                :class:`~imagelink.modules.ImageModuleResolver` over ``base_root``.
            require_catalog: When ``False``, a module without a catalog is
                treated as having no non-primary resources.

        Raises:
            ConfigurationError: If the module is not installed.
        """

        self._module_name = module_name
        self._base_root = base_root
        self._resolver: ModuleResolver = resolver if resolver is not None else ImageModuleResolver(base_root)
        self._require_catalog = require_catalog
        self._resolve_reader()
        self._entries: list[ArchiveEntry] = []
        self._populated = False

    @property
    def module_name(self) -> str:
        """Return the name of the reconstructed module."""

        return self._module_name

    @property
    def root_path(self) -> Path:
        """Return the installation root non-primary entries resolve against."""

        return self._base_root

    def open(self) -> None:
        """Collect entries unless they are already populated."""

        if not self._populated:
            self._collect()

    def close(self) -> None:
        """Discard the collected entries; the next use rebuilds them."""

        self._entries = []
        self._populated = False

    def entries(self) -> Iterator[ArchiveEntry]:
        """Return a lazy iterator over every reconstructed entry.

        Returns:
            Iterator[ArchiveEntry]: Catalog entries followed by primary entries.
        """

        self.open()
        return iter(tuple(self._entries))

    def __enter__(self) -> VirtualArchive:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _resolve_reader(self) -> ModuleReader:
        reader = self._resolver.resolve(self._module_name)
        if reader is None:
            raise ConfigurationError(f"module {self._module_name!r} not part of the installed platform")
        return reader

    def _collect(self) -> None:
        """Populate entries from the catalog and the live module reader."""

        reader = self._resolve_reader()
        collected = self._catalog_entries(reader)
        catalog_count = len(collected)
        try:
            primary_paths = list(reader.list_paths())
        except OSError as exc:
            raise ResourceIOError(f"cannot list resources of module {self._module_name!r}") from exc
        collected.extend(
            ArchiveEntry(
                path=path,
                type=ResourceType.CLASS_OR_RESOURCE,
                source=LiveModuleSource(self._resolver, self._module_name, path),
            )
            for path in primary_paths
        )
        self._entries = collected
        self._populated = True
        LOGGER.debug(
            "reconstructed %s: %d catalog and %d primary entries",
            self._module_name,
            catalog_count,
            len(collected) - catalog_count,
        )

    def _catalog_entries(self, reader: ModuleReader) -> list[ArchiveEntry]:
        try:
            stream = reader.open_path(CATALOG_FILENAME)
            if stream is None:
                if self._require_catalog:
                    raise MissingCatalogError(self._module_name)
                LOGGER.debug("module %s has no catalog", self._module_name)
                return []
            with stream:
                data = stream.read()
        except OSError as exc:
            raise ResourceIOError(f"cannot read catalog of module {self._module_name!r}") from exc
        return [
            ArchiveEntry(
                path=line.path,
                type=line.type,
                source=InstalledFileSource(self._base_root, line.path),
            )
            for line in parse_catalog(data)
        ]


__all__ = ["VirtualArchive"]
