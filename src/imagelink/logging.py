# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Status lines printed by imagelink commands, with optional colour and emoji."""

from __future__ import annotations

import sys
from enum import Enum
from functools import cache

from rich.console import Console
from rich.text import Text


class Status(Enum):
    """Kinds of status line together with their glyph and colour."""

    INFO = ("ℹ️ ", "cyan")
    OK = ("✅ ", "green")
    WARN = ("⚠️ ", "yellow")
    FAIL = ("❌ ", "red")

    def __init__(self, glyph: str, style: str) -> None:
        self.glyph = glyph
        self.style = style


def stdout_is_terminal() -> bool:
    """Return whether stdout is attached to a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@cache
def status_console(*, color: bool, emoji: bool) -> Console:
    """Return the shared console used for status lines.

    Consoles write to whatever ``sys.stdout`` is at print time, so one
    instance per colour and emoji combination is enough.

    Args:
        color: Whether ANSI colour may be emitted.
        emoji: Whether Rich may substitute emoji codes.

    Returns:
        Console: Console for the requested combination.
    """

    return Console(
        color_system="auto" if color else None,
        no_color=not color,
        emoji=emoji,
        soft_wrap=True,
        highlight=False,
    )


def report(status: Status, message: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``message`` as a status line.

    Args:
        status: Kind of the line; selects the glyph and colour.
        message: Text to print.
        use_emoji: Whether to prefix the status glyph.
        use_color: Force colour on or off; defaults to terminal detection.
    """

    color = stdout_is_terminal() if use_color is None else use_color
    text = Text(f"{status.glyph if use_emoji else ''}{message}")
    if color:
        text.stylize(status.style)
    status_console(color=color, emoji=use_emoji).print(text)


__all__ = ["Status", "report", "status_console", "stdout_is_terminal"]
