# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring imagelink commands."""

from __future__ import annotations

import typer

from . import image, record

app = typer.Typer(
    name="imagelink",
    help="Record and replay module resource catalogs for image-based linking.",
    no_args_is_help=True,
    add_completion=False,
)
record.register(app)
image.register(app)

__all__ = ["app"]
