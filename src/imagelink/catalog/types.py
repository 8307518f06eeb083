# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared constants and value types for module resource catalogs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from ..resources import NON_PRIMARY_TYPES, ResourceType

# Package-free so the name never collides with a class or resource contributed by a package.
CATALOG_FILENAME: Final[str] = "module_resources"
FIELD_SEPARATOR: Final[str] = "|"
LINE_SEPARATOR: Final[str] = "\n"
CATALOG_ENCODING: Final[str] = "utf-8"


def catalog_path(module_name: str) -> str:
    """Return the entry path of the catalog resource for ``module_name``.

    Args:
        module_name: Module owning the catalog.

    Returns:
        str: Absolute entry path ``/<module>/module_resources``.
    """

    return f"/{module_name}/{CATALOG_FILENAME}"


@dataclass(frozen=True, slots=True, order=True)
class CatalogLine:
    """Represent one ``<typeOrdinal>|<modulePath>`` catalog record.

    Attributes:
        type: Non-primary resource type of the recorded file.
        path: File path relative to the module root, which is also its path
            relative to the installed image root.
    """

    type: ResourceType
    path: str

    def __post_init__(self) -> None:
        """Reject primary or top-level types and empty paths."""

        if self.type not in NON_PRIMARY_TYPES:
            raise ValueError(f"catalog lines only hold non-primary types, got {self.type.name}")
        if not self.path:
            raise ValueError("catalog line path must not be empty")

    def render(self) -> str:
        """Return the textual form stored in the catalog.

        Returns:
            str: ``<typeOrdinal>|<modulePath>``.
        """

        return f"{int(self.type)}{FIELD_SEPARATOR}{self.path}"


__all__ = [
    "CATALOG_ENCODING",
    "CATALOG_FILENAME",
    "FIELD_SEPARATOR",
    "LINE_SEPARATOR",
    "CatalogLine",
    "catalog_path",
]
