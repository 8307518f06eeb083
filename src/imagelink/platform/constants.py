# SPDX-License-Identifier: MIT
"""Directory and suffix conventions for installed runtime images."""

from __future__ import annotations

from typing import Final

LIB_DIRNAME: Final[str] = "lib"
BIN_DIRNAME: Final[str] = "bin"

# Native libraries with these suffixes are installed into ``bin`` on Windows.
WINDOWS_RELOCATED_LIB_SUFFIXES: Final[tuple[str, ...]] = (".dll", ".diz", ".pdb", ".map")

OS_ALIASES: Final[dict[str, str]] = {
    "windows": "windows",
    "win": "windows",
    "linux": "linux",
    "macos": "macos",
    "macosx": "macos",
    "darwin": "macos",
    "osx": "macos",
    "aix": "aix",
}

__all__ = [
    "BIN_DIRNAME",
    "LIB_DIRNAME",
    "OS_ALIASES",
    "WINDOWS_RELOCATED_LIB_SUFFIXES",
]
