# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI commands linking exploded images and recording their module catalogs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from ..archive import VirtualArchive
from ..catalog import ModuleResourcesRecorder
from ..config import LinkSettings
from ..errors import ImageLinkError
from ..layout import WrittenImage, write_image
from ..modules import ImageModuleResolver
from ..pipeline import ModuleSourceScanner, ResourcePool, archive_pool
from ..platform import TargetPlatform
from .shared import (
    CONFIG_ROOT_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    CLIError,
    CLILogger,
    build_cli_logger,
    exit_on_error,
    resolve_settings,
)

SOURCE_ARGUMENT = Annotated[
    Path,
    typer.Argument(help="Directory holding one exploded module per sub-directory."),
]
IMAGE_ARGUMENT = Annotated[
    Path,
    typer.Argument(help="Root of an image previously written by record or relink."),
]
OUTPUT_OPTION = Annotated[
    Path,
    typer.Option("--output", "-o", help="Root of the image to write."),
]
PLATFORM_OPTION = Annotated[
    str | None,
    typer.Option("--platform", help="Target platform such as linux-x64 or windows-x64."),
]
WORKERS_OPTION = Annotated[
    int | None,
    typer.Option("--workers", "-j", min=1, help="Worker threads used to classify entries."),
]
ANCHOR_OPTION = Annotated[
    str | None,
    typer.Option("--anchor-module", help="Module whose target platform describes the image."),
]
ALLOW_MISSING_OPTION = Annotated[
    bool,
    typer.Option(
        "--allow-missing-catalogs",
        help="Treat modules without a catalog as having no native or config files.",
    ),
]


def _start(
    config_root: Path,
    *,
    emoji: bool | None,
    debug: bool,
    **overrides: object,
) -> tuple[CLILogger, LinkSettings]:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    logger = build_cli_logger(emoji=emoji if emoji is not None else True, debug=debug)
    try:
        settings = resolve_settings(config_root, emoji=emoji, **overrides)
    except CLIError as exc:
        raise exit_on_error(exc, logger) from exc
    logger.use_emoji = settings.emoji
    return logger, settings


def _link(pool: ResourcePool, output: Path, settings: LinkSettings, logger: CLILogger) -> WrittenImage:
    """Run the recorder over ``pool`` and install the result below ``output``."""

    assert settings.target_platform is not None
    recorder = ModuleResourcesRecorder(anchor_module=settings.anchor_module, workers=settings.workers)
    logger.debug(f"entries={len(pool)} workers={settings.workers}")
    linked = recorder.transform(pool)
    return write_image(linked, output, TargetPlatform.parse(settings.target_platform))


def _summarise(written: WrittenImage, logger: CLILogger) -> None:
    for path in written.catalogs:
        logger.echo(str(path))
    logger.ok(
        f"Wrote {len(written.files)} file(s) and {len(written.catalogs)} module catalog(s) to {written.root}",
    )


def record_command(
    source: SOURCE_ARGUMENT,
    output: OUTPUT_OPTION,
    platform: PLATFORM_OPTION = None,
    workers: WORKERS_OPTION = None,
    anchor_module: ANCHOR_OPTION = None,
    config_root: CONFIG_ROOT_OPTION = Path("."),
    emoji: EMOJI_OPTION = None,
    debug: DEBUG_OPTION = False,
) -> None:
    """Link the modules below SOURCE into an image at OUTPUT, recording catalogs."""

    logger, settings = _start(
        config_root,
        emoji=emoji,
        debug=debug,
        target_platform=platform,
        workers=workers,
        anchor_module=anchor_module,
    )
    try:
        if not source.is_dir():
            raise CLIError(f"module source directory {source} does not exist")
        if settings.target_platform is None:
            raise CLIError("no target platform configured; pass --platform")
        scanner = ModuleSourceScanner(source)
        pool = scanner.pool(settings.target_platform)
        for section in scanner.skipped_sections:
            logger.warn(f"Skipped unknown section {section}")
        logger.info(f"Scanned {len(pool.modules)} module(s) for {settings.target_platform}")
        written = _link(pool, output, settings, logger)
    except (CLIError, ImageLinkError) as exc:
        raise exit_on_error(exc, logger) from exc
    _summarise(written, logger)


def relink_command(
    image: IMAGE_ARGUMENT,
    output: OUTPUT_OPTION,
    platform: PLATFORM_OPTION = None,
    workers: WORKERS_OPTION = None,
    anchor_module: ANCHOR_OPTION = None,
    allow_missing_catalogs: ALLOW_MISSING_OPTION = False,
    config_root: CONFIG_ROOT_OPTION = Path("."),
    emoji: EMOJI_OPTION = None,
    debug: DEBUG_OPTION = False,
) -> None:
    """Reconstruct every module of IMAGE and link them again into OUTPUT."""

    logger, settings = _start(
        config_root,
        emoji=emoji,
        debug=debug,
        target_platform=platform,
        workers=workers,
        anchor_module=anchor_module,
    )
    try:
        if not image.is_dir():
            raise CLIError(f"image directory {image} does not exist")
        if settings.target_platform is None:
            raise CLIError("no target platform configured; pass --platform")
        if output.resolve() == image.resolve():
            raise CLIError("output must differ from the image being reconstructed")
        archives = [
            VirtualArchive(name, image, require_catalog=not allow_missing_catalogs)
            for name in ImageModuleResolver(image).module_names()
        ]
        pool = archive_pool(archives, settings.target_platform)
        logger.info(f"Reconstructed {len(pool.modules)} module(s) from {image}")
        written = _link(pool, output, settings, logger)
    except (CLIError, ImageLinkError) as exc:
        raise exit_on_error(exc, logger) from exc
    _summarise(written, logger)


def register(app: typer.Typer) -> None:
    """Register the ``record`` and ``relink`` commands on ``app``."""

    app.command(name="record")(record_command)
    app.command(name="relink")(relink_command)


__all__ = ["record_command", "register", "relink_command"]
