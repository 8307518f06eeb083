# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for catalog emission."""

from __future__ import annotations

import random
from collections.abc import Mapping

import pytest

from imagelink.catalog import CatalogAccumulator, CatalogLine, emit_catalogs, render_catalog
from imagelink.resources import ResourceType

RECORDS: tuple[tuple[str, CatalogLine], ...] = (
    ("m", CatalogLine(ResourceType.NATIVE_LIB, "lib/libm.so")),
    ("m", CatalogLine(ResourceType.CONFIG, "conf/m.properties")),
    ("m", CatalogLine(ResourceType.LEGAL_NOTICE, "legal/m/LICENSE")),
    ("java.base", CatalogLine(ResourceType.NATIVE_CMD, "bin/java")),
    ("java.base", CatalogLine(ResourceType.NATIVE_LIB, "lib/libjava.so")),
    ("java.base", CatalogLine(ResourceType.HEADER_FILE, "include/jni.h")),
)


def _emit(records: tuple[tuple[str, CatalogLine], ...]) -> dict[str, bytes]:
    accumulator = CatalogAccumulator()
    for module_name, line in records:
        accumulator.record(module_name, line)
    return {entry.path: entry.read_bytes() for entry in emit_catalogs(accumulator)}


def test_emits_one_sorted_catalog_per_module() -> None:
    accumulator = CatalogAccumulator()
    for module_name, line in RECORDS:
        accumulator.record(module_name, line)

    catalogs = emit_catalogs(accumulator)

    assert [entry.path for entry in catalogs] == ["/java.base/module_resources", "/m/module_resources"]
    assert all(entry.type is ResourceType.CLASS_OR_RESOURCE for entry in catalogs)
    assert catalogs[1].read_bytes() == b"1|conf/m.properties\n3|legal/m/LICENSE\n6|lib/libm.so"
    assert catalogs[0].read_bytes() == b"2|include/jni.h\n5|bin/java\n6|lib/libjava.so"


def test_output_does_not_depend_on_recording_order() -> None:
    expected = _emit(RECORDS)
    shuffled = list(RECORDS)
    for seed in range(5):
        random.Random(seed).shuffle(shuffled)
        assert _emit(tuple(shuffled)) == expected


def test_emission_seals_the_accumulator() -> None:
    accumulator = CatalogAccumulator()
    accumulator.record("m", CatalogLine(ResourceType.CONFIG, "conf/a"))

    emit_catalogs(accumulator)

    assert accumulator.sealed


def test_empty_accumulator_emits_nothing() -> None:
    assert emit_catalogs(CatalogAccumulator()) == []


def test_module_without_lines_is_an_invariant_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    accumulator = CatalogAccumulator()

    def _broken_seal() -> Mapping[str, tuple[str, ...]]:
        return {"m": ()}

    monkeypatch.setattr(accumulator, "seal", _broken_seal)

    with pytest.raises(AssertionError):
        emit_catalogs(accumulator)


def test_render_catalog_has_no_trailing_newline() -> None:
    assert render_catalog(["6|lib/b.so", "6|lib/a.so"]) == b"6|lib/a.so\n6|lib/b.so"
