# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Parse catalog bytes back into typed ``(path, type)`` records."""

from __future__ import annotations

from typing import Final

from ..errors import CorruptCatalogError
from ..resources import NON_PRIMARY_TYPES, PATH_SEPARATOR, ResourceType
from .types import CATALOG_ENCODING, FIELD_SEPARATOR, LINE_SEPARATOR, CatalogLine

PARENT_SEGMENT: Final[str] = ".."


def parse_line(line: str) -> CatalogLine:
    """Parse a single non-empty ``<typeOrdinal>|<modulePath>`` line.

    Args:
        line: Raw catalog line.

    Returns:
        CatalogLine: Typed catalog record.

    Raises:
        CorruptCatalogError: If the ordinal is not a plain decimal integer, does
            not name a non-primary type, or the path is missing, absolute or
            climbs out of the image root with ``..``.
    """

    ordinal_token, sep, path = line.partition(FIELD_SEPARATOR)
    if not sep:
        raise CorruptCatalogError("catalog line lacks a type separator", line=line)
    if not (ordinal_token.isascii() and ordinal_token.isdigit()):
        raise CorruptCatalogError("catalog line has a non-numeric type ordinal", line=line)
    ordinal = int(ordinal_token)
    try:
        resource_type = ResourceType(ordinal)
    except ValueError as exc:
        raise CorruptCatalogError("catalog line has an unknown type ordinal", line=line) from exc
    if resource_type is ResourceType.TOP:
        raise CorruptCatalogError("top-level files are never recorded in a module catalog", line=line)
    if resource_type not in NON_PRIMARY_TYPES:
        raise CorruptCatalogError("catalog line records a primary resource", line=line)
    if not path:
        raise CorruptCatalogError("catalog line has an empty path", line=line)
    segments = path.replace("\\", PATH_SEPARATOR).split(PATH_SEPARATOR)
    if not segments[0] or PARENT_SEGMENT in segments:
        raise CorruptCatalogError("catalog path escapes the image root", line=line)
    return CatalogLine(type=resource_type, path=path)


def parse_catalog(data: bytes) -> list[CatalogLine]:
    """Parse a complete catalog produced by the emitter.

    Args:
        data: UTF-8 encoded catalog content.

    Returns:
        list[CatalogLine]: Records in file order; empty lines are skipped.

    Raises:
        CorruptCatalogError: If the content is not UTF-8 or any line is malformed.
    """

    try:
        text = data.decode(CATALOG_ENCODING)
    except UnicodeDecodeError as exc:
        raise CorruptCatalogError("catalog is not valid UTF-8") from exc
    return [parse_line(line) for line in text.split(LINE_SEPARATOR) if line]


__all__ = ["parse_catalog", "parse_line"]
