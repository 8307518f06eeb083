# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, option types)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.text import Text

from ..config import ConfigError, LinkSettings, load_settings
from ..errors import ImageLinkError
from ..logging import Status, report

EMOJI_OPTION = Annotated[
    bool | None,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
CONFIG_ROOT_OPTION = Annotated[
    Path,
    typer.Option("--config-root", help="Directory holding imagelink.toml or pyproject.toml."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Print debug details."),
]


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Status and data output of one command invocation.

    Status lines go through :func:`imagelink.logging.report`; data rows go
    through ``typer.echo`` so they stay free of glyphs and styling.
    """

    console: Console
    use_emoji: bool
    debug_enabled: bool = False
    use_color: bool | None = None

    def status(self, status: Status, message: str) -> None:
        report(status, message, use_emoji=self.use_emoji, use_color=self.use_color)

    def fail(self, message: str) -> None:
        self.status(Status.FAIL, message)

    def warn(self, message: str) -> None:
        self.status(Status.WARN, message)

    def info(self, message: str) -> None:
        self.status(Status.INFO, message)

    def ok(self, message: str) -> None:
        self.status(Status.OK, message)

    def echo(self, message: str) -> None:
        typer.echo(message)

    def debug(self, message: str) -> None:
        """Print ``message`` dimmed when ``--debug`` was given."""

        if self.debug_enabled:
            self.console.print(Text(f"[debug] {message}", style="dim"))


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided emoji preference.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    console = Console(no_color=no_color, highlight=False)
    return CLILogger(
        console=console,
        use_emoji=emoji,
        debug_enabled=debug,
        use_color=False if no_color else None,
    )


def resolve_settings(config_root: Path, **overrides: object) -> LinkSettings:
    """Load settings below ``config_root`` and apply CLI overrides.

    Args:
        config_root: Directory searched for configuration files.
        **overrides: Non-``None`` values replacing configured ones.

    Returns:
        LinkSettings: Effective settings.

    Raises:
        CLIError: If configuration cannot be loaded or validated.
    """

    try:
        return load_settings(config_root).with_overrides(**overrides)
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc


def exit_on_error(exc: CLIError | ImageLinkError, logger: CLILogger) -> typer.Exit:
    """Report ``exc`` and return the ``typer.Exit`` the command should raise.

    Args:
        exc: Failure raised while executing the command.
        logger: Logger used to report the failure.

    Returns:
        typer.Exit: Exit signal carrying the failure status.
    """

    logger.fail(str(exc))
    code = exc.exit_code if isinstance(exc, CLIError) else 1
    return typer.Exit(code=code)


__all__ = [
    "CLIError",
    "CLILogger",
    "CONFIG_ROOT_OPTION",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "build_cli_logger",
    "exit_on_error",
    "resolve_settings",
]
