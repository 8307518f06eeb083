# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while recording and reconstructing module catalogs."""

from __future__ import annotations


class ImageLinkError(RuntimeError):
    """Base class for failures surfaced by catalog recording or reconstruction."""


class ConfigurationError(ImageLinkError):
    """Raised when a module or the target platform cannot be resolved."""


class CorruptCatalogError(ImageLinkError):
    """Raised when catalog content violates the machine-generated line format."""

    def __init__(self, message: str, *, line: str | None = None) -> None:
        """Create the error for ``message`` and the offending catalog ``line``.

        Args:
            message: Human-readable description of the violation.
            line: Raw catalog line that failed to parse, when known.
        """

        super().__init__(message if line is None else f"{message}: {line!r}")
        self.line = line


class MissingCatalogError(ImageLinkError):
    """Raised when a module lacks its catalog resource at reconstruction time."""

    def __init__(self, module_name: str) -> None:
        """Create the error for ``module_name``.

        Args:
            module_name: Module whose catalog resource could not be opened.
        """

        super().__init__(f"module {module_name!r} lacks its resource catalog")
        self.module_name = module_name


class ResourceIOError(ImageLinkError):
    """Raised when reading resource bytes from disk or a module reader fails."""


class PipelineStateError(ImageLinkError):
    """Raised when a pass is used out of order, e.g. recording after sealing."""


__all__ = (
    "ConfigurationError",
    "CorruptCatalogError",
    "ImageLinkError",
    "MissingCatalogError",
    "PipelineStateError",
    "ResourceIOError",
)
