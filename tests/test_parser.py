# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for catalog parsing."""

from __future__ import annotations

import pytest

from imagelink.catalog import CatalogLine, parse_catalog, parse_line
from imagelink.errors import CorruptCatalogError
from imagelink.resources import ResourceType


def test_parse_catalog_yields_typed_records() -> None:
    records = parse_catalog(b"1|conf/m.properties\n6|lib/libm.so")

    assert records == [
        CatalogLine(ResourceType.CONFIG, "conf/m.properties"),
        CatalogLine(ResourceType.NATIVE_LIB, "lib/libm.so"),
    ]


def test_empty_lines_are_skipped() -> None:
    assert parse_catalog(b"\n6|lib/libm.so\n\n") == [CatalogLine(ResourceType.NATIVE_LIB, "lib/libm.so")]
    assert parse_catalog(b"") == []


def test_only_the_first_separator_splits() -> None:
    assert parse_line("4|man/a|b.1") == CatalogLine(ResourceType.MAN_PAGE, "man/a|b.1")


@pytest.mark.parametrize(
    "line",
    [
        "notanumber|bin/foo",
        "|bin/foo",
        "6",
        "6|",
        "42|lib/foo",
        "-1|lib/foo",
        " 6|lib/foo",
        "+6|lib/foo",
        "6 |lib/foo",
        "\u0666|lib/foo",
        "6|/etc/libc.so",
        "6|\\windows\\system32\\x.dll",
        "6|../../etc/x",
        "6|lib/../../x",
        "1|conf\\..\\..\\x",
    ],
)
def test_malformed_lines_are_rejected(line: str) -> None:
    with pytest.raises(CorruptCatalogError) as excinfo:
        parse_catalog(line.encode("utf-8"))
    assert excinfo.value.line == line


def test_top_ordinal_is_rejected() -> None:
    with pytest.raises(CorruptCatalogError):
        parse_catalog(f"{int(ResourceType.TOP)}|release".encode("utf-8"))


def test_primary_ordinal_is_rejected() -> None:
    with pytest.raises(CorruptCatalogError):
        parse_catalog(b"0|A.class")


def test_non_utf8_catalog_is_rejected() -> None:
    with pytest.raises(CorruptCatalogError):
        parse_catalog(b"6|lib/\xff.so")


def test_dotted_names_inside_the_image_are_accepted() -> None:
    assert parse_line("6|lib/..hidden/.libm.so") == CatalogLine(ResourceType.NATIVE_LIB, "lib/..hidden/.libm.so")
