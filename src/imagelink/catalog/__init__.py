# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Module resource catalogs: recording, emission and parsing."""

from __future__ import annotations

from .accumulator import CatalogAccumulator
from .classifier import Decision, classify, recorded_path
from .emitter import emit_catalogs, render_catalog
from .parser import parse_catalog, parse_line
from .recorder import DEFAULT_ANCHOR_MODULE, ModuleResourcesRecorder, StageCategory, StageState
from .types import CATALOG_FILENAME, CatalogLine, catalog_path

__all__ = (
    "CATALOG_FILENAME",
    "CatalogAccumulator",
    "CatalogLine",
    "DEFAULT_ANCHOR_MODULE",
    "Decision",
    "ModuleResourcesRecorder",
    "StageCategory",
    "StageState",
    "catalog_path",
    "classify",
    "emit_catalogs",
    "parse_catalog",
    "parse_line",
    "recorded_path",
    "render_catalog",
)
