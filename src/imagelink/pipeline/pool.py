# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Minimal resource pool used to drive a single assembly pass."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from types import MappingProxyType

from ..errors import PipelineStateError
from ..resources import ResourceEntry

EntryTransform = Callable[[ResourceEntry], ResourceEntry | None]


@dataclass(frozen=True, slots=True)
class ModuleInfo:
    """Describe a module participating in the pass.

    Attributes:
        name: Module name.
        target_platform: Platform string recorded for the module, if any.
    """

    name: str
    target_platform: str | None = None


class ResourcePool:
    """Hold the ordered entries and module view of one pipeline stage."""

    def __init__(
        self,
        entries: Iterable[ResourceEntry] = (),
        *,
        modules: Iterable[ModuleInfo] = (),
    ) -> None:
        """Initialise the pool.

        Args:
            entries: Entries in pipeline order; paths must be unique.
            modules: Module metadata; modules only seen through entries get a
                bare :class:`ModuleInfo`.

        Raises:
            PipelineStateError: If two entries share a path.
        """

        self._entries: tuple[ResourceEntry, ...] = tuple(entries)
        seen: set[str] = set()
        for entry in self._entries:
            if entry.path in seen:
                raise PipelineStateError(f"resource {entry.path!r} already present in pool")
            seen.add(entry.path)
        view: dict[str, ModuleInfo] = {info.name: info for info in modules}
        for entry in self._entries:
            view.setdefault(entry.module_name, ModuleInfo(name=entry.module_name))
        self._modules = MappingProxyType(view)

    @property
    def modules(self) -> Mapping[str, ModuleInfo]:
        """Return the read-only module view of the pool.

        Returns:
            Mapping[str, ModuleInfo]: Module name to metadata.
        """

        return self._modules

    def find_module(self, name: str) -> ModuleInfo | None:
        """Return metadata for ``name`` when the module is part of the pool."""

        return self._modules.get(name)

    def entries(self) -> Iterator[ResourceEntry]:
        """Iterate entries in pipeline order."""

        return iter(self._entries)

    def find_entry(self, path: str) -> ResourceEntry | None:
        """Return the entry stored at ``path``, if present."""

        for entry in self._entries:
            if entry.path == path:
                return entry
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def builder(self) -> ResourcePoolBuilder:
        """Return an empty builder sharing this pool's module view.

        Returns:
            ResourcePoolBuilder: Builder for the next stage's pool.
        """

        return ResourcePoolBuilder(modules=self._modules.values())

    def transform_and_copy(
        self,
        transform: EntryTransform,
        builder: ResourcePoolBuilder,
        *,
        workers: int = 1,
    ) -> None:
        """Apply ``transform`` to every entry and add non-``None`` results to ``builder``.

        With ``workers > 1`` the transform runs concurrently across entries; the
        builder still receives results in input order. Exceptions raised by the
        transform propagate to the caller.

        Args:
            transform: Callable returning the entry to keep or ``None`` to drop it.
            builder: Builder receiving retained entries.
            workers: Number of worker threads used for the transform.
        """

        if workers <= 1:
            results: Iterable[ResourceEntry | None] = [transform(entry) for entry in self._entries]
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                results = list(executor.map(transform, self._entries))
        for result in results:
            if result is not None:
                builder.add(result)


class ResourcePoolBuilder:
    """Accumulate entries for the pool produced by a stage."""

    def __init__(self, *, modules: Iterable[ModuleInfo] = ()) -> None:
        """Initialise the builder with an optional module view."""

        self._modules = tuple(modules)
        self._entries: dict[str, ResourceEntry] = {}

    def add(self, entry: ResourceEntry) -> None:
        """Add ``entry`` to the pool under construction.

        Args:
            entry: Entry to append.

        Raises:
            PipelineStateError: If an entry with the same path was already added.
        """

        if entry.path in self._entries:
            raise PipelineStateError(f"resource {entry.path!r} already present in pool")
        self._entries[entry.path] = entry

    def build(self) -> ResourcePool:
        """Return the pool holding every added entry in insertion order."""

        return ResourcePool(self._entries.values(), modules=self._modules)


__all__ = ["EntryTransform", "ModuleInfo", "ResourcePool", "ResourcePoolBuilder"]
