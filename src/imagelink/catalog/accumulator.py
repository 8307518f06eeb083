# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Per-pass accumulation of catalog lines keyed by module name."""

from __future__ import annotations

from collections.abc import Mapping
from threading import Lock
from types import MappingProxyType

from ..errors import PipelineStateError
from .types import CatalogLine


class CatalogAccumulator:
    """Collect catalog lines for every module observed during one pipeline pass.

    Many classification workers may call :meth:`record` concurrently. The
    accumulator is sealed exactly once by the emitter, after which it only
    serves the frozen snapshot.
    """

    def __init__(self) -> None:
        """Initialise an empty, unsealed accumulator."""

        self._lines: dict[str, dict[str, None]] = {}
        self._lock = Lock()
        self._sealed = False

    def record(self, module_name: str, line: CatalogLine) -> None:
        """Add ``line`` to the in-progress catalog of ``module_name``.

        Recording the same line twice keeps a single copy.

        Args:
            module_name: Module the recorded resource belongs to.
            line: Catalog line describing the resource.

        Raises:
            PipelineStateError: If the accumulator has already been sealed.
        """

        rendered = line.render()
        with self._lock:
            if self._sealed:
                raise PipelineStateError(f"cannot record {rendered!r} for {module_name!r}: catalog pass already sealed")
            self._lines.setdefault(module_name, {})[rendered] = None

    @property
    def sealed(self) -> bool:
        """Return whether :meth:`seal` has been called.

        Returns:
            bool: ``True`` once the pass has completed.
        """

        with self._lock:
            return self._sealed

    def modules(self) -> tuple[str, ...]:
        """Return the modules with at least one recorded line, sorted by name.

        Returns:
            tuple[str, ...]: Sorted module names.
        """

        with self._lock:
            return tuple(sorted(self._lines))

    def seal(self) -> Mapping[str, tuple[str, ...]]:
        """Close the pass and return a read-only snapshot of all recorded lines.

        Sealing is idempotent; later calls return an equivalent snapshot.

        Returns:
            Mapping[str, tuple[str, ...]]: Module name to recorded lines in
            recording order.
        """

        with self._lock:
            self._sealed = True
            snapshot = {module: tuple(lines) for module, lines in self._lines.items()}
        return MappingProxyType(snapshot)

    def __len__(self) -> int:
        with self._lock:
            return len(self._lines)


__all__ = ["CatalogAccumulator"]
