# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI commands inspecting catalogs and reconstructed archives of an image."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..archive import VirtualArchive
from ..catalog import CATALOG_FILENAME, CatalogLine, parse_catalog
from ..errors import ConfigurationError, ImageLinkError, MissingCatalogError
from ..modules import ImageModuleResolver
from .shared import EMOJI_OPTION, CLIError, build_cli_logger, exit_on_error

IMAGE_ARGUMENT = Annotated[
    Path,
    typer.Argument(help="Root directory of an assembled image."),
]
MODULE_ARGUMENT = Annotated[
    str,
    typer.Argument(help="Module name."),
]
SIZES_OPTION = Annotated[
    bool,
    typer.Option("--sizes", help="Resolve and print the size of every entry."),
]


def read_module_catalog(image: Path, module_name: str) -> list[CatalogLine]:
    """Return the parsed catalog of ``module_name`` in the image at ``image``.

    Args:
        image: Image root directory.
        module_name: Module whose catalog should be read.

    Returns:
        list[CatalogLine]: Catalog records in file order.

    Raises:
        ConfigurationError: If the module is not installed in the image.
        MissingCatalogError: If the module has no catalog.
    """

    reader = ImageModuleResolver(image).resolve(module_name)
    if reader is None:
        raise ConfigurationError(f"module {module_name!r} not part of the image at {image}")
    stream = reader.open_path(CATALOG_FILENAME)
    if stream is None:
        raise MissingCatalogError(module_name)
    with stream:
        return parse_catalog(stream.read())


def show_command(
    image: IMAGE_ARGUMENT,
    module: MODULE_ARGUMENT,
    emoji: EMOJI_OPTION = None,
) -> None:
    """Print the catalog records of MODULE."""

    logger = build_cli_logger(emoji=emoji if emoji is not None else True)
    try:
        lines = read_module_catalog(image, module)
    except ImageLinkError as exc:
        raise exit_on_error(exc, logger) from exc
    for line in lines:
        logger.echo(f"{line.type.name}\t{line.path}")


def entries_command(
    image: IMAGE_ARGUMENT,
    module: MODULE_ARGUMENT,
    sizes: SIZES_OPTION = False,
    emoji: EMOJI_OPTION = None,
) -> None:
    """Reconstruct MODULE from the image and print its entries."""

    logger = build_cli_logger(emoji=emoji if emoji is not None else True)
    try:
        if not image.is_dir():
            raise CLIError(f"image directory {image} does not exist")
        with VirtualArchive(module, image) as archive:
            for entry in archive.entries():
                row = f"{entry.type.name}\t{entry.path}"
                if sizes:
                    row = f"{row}\t{entry.size()}"
                logger.echo(row)
    except (CLIError, ImageLinkError) as exc:
        raise exit_on_error(exc, logger) from exc


def register(app: typer.Typer) -> None:
    """Register the ``show`` and ``entries`` commands on ``app``."""

    app.command(name="show")(show_command)
    app.command(name="entries")(entries_command)


__all__ = ["entries_command", "read_module_catalog", "register", "show_command"]
