# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Pipeline stage recording non-primary module resources into catalogs."""

from __future__ import annotations

import logging
from enum import Enum
from functools import partial
from typing import Final

from ..errors import ConfigurationError
from ..pipeline.pool import ResourcePool, ResourcePoolBuilder
from ..platform import TargetPlatform
from ..resources import ResourceEntry
from .accumulator import CatalogAccumulator
from .classifier import Decision, classify
from .emitter import emit_catalogs

LOGGER = logging.getLogger(__name__)

DEFAULT_ANCHOR_MODULE: Final[str] = "java.base"


class StageCategory(str, Enum):
    """Ordering category of a pipeline stage."""

    FILTER = "filter"
    TRANSFORMER = "transformer"
    ADDER = "adder"
    PROCESSOR = "processor"


class StageState(str, Enum):
    """Activation flags of a pipeline stage."""

    AUTO_ENABLED = "auto-enabled"
    FUNCTIONAL = "functional"
    DISABLED = "disabled"


class ModuleResourcesRecorder:
    """Record non-primary resources per module and add one catalog per module.

    The stage keeps every entry except stale catalogs from a previous pass and
    appends freshly emitted catalogs once all entries have been classified.
    """

    name: Final[str] = "add-module-resources"
    category: Final[StageCategory] = StageCategory.ADDER
    states: Final[frozenset[StageState]] = frozenset({StageState.AUTO_ENABLED, StageState.FUNCTIONAL})
    has_arguments: Final[bool] = False

    def __init__(self, *, anchor_module: str = DEFAULT_ANCHOR_MODULE, workers: int = 1) -> None:
        """Initialise the stage.

        Args:
            anchor_module: Module whose target platform describes the whole image.
            workers: Number of worker threads used to classify entries.
        """

        self.anchor_module = anchor_module
        self.workers = max(1, workers)

    def target_platform(self, pool: ResourcePool) -> TargetPlatform:
        """Return the target platform recorded on the anchor module of ``pool``.

        Args:
            pool: Input pool of the pass.

        Returns:
            TargetPlatform: Parsed target platform.

        Raises:
            ConfigurationError: If the anchor module is absent or has no platform.
        """

        info = pool.find_module(self.anchor_module)
        if info is None:
            raise ConfigurationError(f"{self.anchor_module} not part of the image")
        if not info.target_platform:
            raise ConfigurationError(f"{self.anchor_module} does not declare a target platform")
        return TargetPlatform.parse(info.target_platform)

    def transform(self, pool: ResourcePool, builder: ResourcePoolBuilder | None = None) -> ResourcePool:
        """Run one recording pass over ``pool``.

        Args:
            pool: Input pool holding every entry of the image.
            builder: Builder for the output pool; defaults to ``pool.builder()``.

        Returns:
            ResourcePool: Output pool with stale catalogs removed and new
            catalogs appended.
        """

        platform = self.target_platform(pool)
        out = builder if builder is not None else pool.builder()
        accumulator = CatalogAccumulator()
        record = partial(_record_entry, platform=platform, accumulator=accumulator)
        pool.transform_and_copy(record, out, workers=self.workers)
        catalogs = emit_catalogs(accumulator)
        for catalog in catalogs:
            out.add(catalog)
        LOGGER.info("%s: %d module catalog(s) for %s", self.name, len(catalogs), platform)
        return out.build()


def _record_entry(
    entry: ResourceEntry,
    *,
    platform: TargetPlatform,
    accumulator: CatalogAccumulator,
) -> ResourceEntry | None:
    """Classify ``entry`` and return it unless it must be dropped."""

    if classify(entry, platform, accumulator) is Decision.DROP:
        return None
    return entry


__all__ = [
    "DEFAULT_ANCHOR_MODULE",
    "ModuleResourcesRecorder",
    "StageCategory",
    "StageState",
]
