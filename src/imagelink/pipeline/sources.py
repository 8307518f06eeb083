# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Build resource pools from exploded module source directories."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from ..interfaces.archive import Archive
from ..resources import PATH_SEPARATOR, ResourceEntry, ResourceType
from .pool import ModuleInfo, ResourcePool

LOGGER = logging.getLogger(__name__)

CLASSES_SECTION: Final[str] = "classes"

# Section directory name to the resource type of every file beneath it.
SECTION_TYPES: Final[dict[str, ResourceType]] = {
    CLASSES_SECTION: ResourceType.CLASS_OR_RESOURCE,
    "conf": ResourceType.CONFIG,
    "include": ResourceType.HEADER_FILE,
    "legal": ResourceType.LEGAL_NOTICE,
    "man": ResourceType.MAN_PAGE,
    "bin": ResourceType.NATIVE_CMD,
    "lib": ResourceType.NATIVE_LIB,
}


@dataclass(slots=True)
class ModuleSourceScanner:
    """Scan ``<source_root>/<module>/<section>/...`` trees into pipeline entries.

    Files under ``classes`` become primary entries rooted at the module
    (``/m/A.class``); files under any other known section keep the section
    directory in their path (``/m/lib/libm.so``). Unknown sections are skipped
    and listed in ``skipped_sections``.
    """

    source_root: Path
    skipped_sections: list[str] = field(default_factory=list)

    def module_directories(self) -> tuple[Path, ...]:
        """Return sorted module directories below the source root.

        Returns:
            tuple[Path, ...]: One directory per module.
        """

        if not self.source_root.is_dir():
            return ()
        return tuple(sorted(path for path in self.source_root.iterdir() if path.is_dir()))

    def module_entries(self, module_dir: Path) -> Iterator[ResourceEntry]:
        """Yield the entries of a single module directory in sorted order.

        Args:
            module_dir: Directory of one module.

        Yields:
            ResourceEntry: File-backed entries of the module.
        """

        module_name = module_dir.name
        for section_dir in sorted(path for path in module_dir.iterdir() if path.is_dir()):
            resource_type = SECTION_TYPES.get(section_dir.name)
            if resource_type is None:
                LOGGER.warning("ignoring unknown section %s of module %s", section_dir.name, module_name)
                self.skipped_sections.append(f"{module_name}/{section_dir.name}")
                continue
            for file in sorted(path for path in section_dir.rglob("*") if path.is_file()):
                if resource_type is ResourceType.CLASS_OR_RESOURCE:
                    relative = file.relative_to(section_dir).as_posix()
                else:
                    relative = file.relative_to(module_dir).as_posix()
                yield ResourceEntry.from_file(f"/{module_name}/{relative}", file, resource_type)

    def pool(self, target_platform: str | None) -> ResourcePool:
        """Return a pool holding every module's entries.

        Args:
            target_platform: Platform string attached to every scanned module.

        Returns:
            ResourcePool: Pool ordered by module then section then path.
        """

        entries: list[ResourceEntry] = []
        modules: list[ModuleInfo] = []
        for module_dir in self.module_directories():
            modules.append(ModuleInfo(name=module_dir.name, target_platform=target_platform))
            entries.extend(self.module_entries(module_dir))
        LOGGER.debug("scanned %d module(s), %d entries from %s", len(modules), len(entries), self.source_root)
        return ResourcePool(entries, modules=modules)


def scan_modules(source_root: Path, target_platform: str | None) -> ResourcePool:
    """Return a pool for the exploded modules under ``source_root``.

    Args:
        source_root: Directory holding one sub-directory per module.
        target_platform: Platform string attached to every module.

    Returns:
        ResourcePool: Pool of file-backed entries.
    """

    return ModuleSourceScanner(source_root).pool(target_platform)


def archive_pool(archives: Iterable[Archive], target_platform: str | None) -> ResourcePool:
    """Return a pool holding every entry of ``archives`` for another linking pass.

    Entries keep their archive type and read their bytes lazily through the
    archive entry, so the pool stays valid after the archives are closed.

    Args:
        archives: Archives, typically reconstructed from an existing image.
        target_platform: Platform string attached to every archive module.

    Returns:
        ResourcePool: Pool ordered by archive then archive entry order.
    """

    entries: list[ResourceEntry] = []
    modules: list[ModuleInfo] = []
    for archive in archives:
        module_name = archive.module_name
        modules.append(ModuleInfo(name=module_name, target_platform=target_platform))
        archive.open()
        try:
            entries.extend(
                ResourceEntry.from_source(
                    f"{PATH_SEPARATOR}{module_name}{PATH_SEPARATOR}{entry.path}",
                    entry,
                    entry.type,
                )
                for entry in archive.entries()
            )
        finally:
            archive.close()
    LOGGER.debug("reconstructed %d module(s) with %d entries", len(modules), len(entries))
    return ResourcePool(entries, modules=modules)


__all__ = ["SECTION_TYPES", "ModuleSourceScanner", "archive_pool", "scan_modules"]
