# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and TOML loading for imagelink commands."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .catalog.recorder import DEFAULT_ANCHOR_MODULE
from .errors import ConfigurationError
from .platform import TargetPlatform

CONFIG_FILENAME: Final[str] = "imagelink.toml"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "imagelink"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class LinkSettings(BaseModel):
    """Settings shared by the record and reconstruction commands."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    anchor_module: str = DEFAULT_ANCHOR_MODULE
    target_platform: str | None = None
    workers: int = Field(default=1, ge=1)
    emoji: bool = True

    @field_validator("target_platform")
    @classmethod
    def _check_platform(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            return str(TargetPlatform.parse(value))
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("anchor_module")
    @classmethod
    def _check_anchor(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("anchor_module must not be empty")
        return stripped

    def with_overrides(self, **overrides: Any) -> LinkSettings:
        """Return a copy with every non-``None`` override applied.

        Args:
            **overrides: Field values supplied on the command line.

        Returns:
            LinkSettings: Updated settings.

        Raises:
            ConfigError: If an override fails validation.
        """

        payload = self.model_dump()
        payload.update({key: value for key, value in overrides.items() if value is not None})
        return _validate(payload, source="command line")


def load_settings(root: Path) -> LinkSettings:
    """Load settings from ``imagelink.toml`` or ``[tool.imagelink]`` below ``root``.

    ``imagelink.toml`` wins when both files exist; defaults apply when neither does.

    Args:
        root: Directory searched for configuration files.

    Returns:
        LinkSettings: Validated settings.

    Raises:
        ConfigError: If a configuration file cannot be parsed or validated.
    """

    config_file = root / CONFIG_FILENAME
    if config_file.is_file():
        return _validate(_read_toml(config_file), source=str(config_file))
    pyproject = root / PYPROJECT_FILENAME
    if pyproject.is_file():
        document = _read_toml(pyproject)
        tool = document.get(PYPROJECT_TOOL_KEY, {})
        section = tool.get(PYPROJECT_SECTION_KEY, {}) if isinstance(tool, Mapping) else {}
        if not isinstance(section, Mapping):
            raise ConfigError(f"[tool.imagelink] in {pyproject} must be a table")
        return _validate(section, source=str(pyproject))
    return LinkSettings()


def _read_toml(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"failed to read configuration at {path}: {exc}") from exc


def _validate(payload: Mapping[str, Any], *, source: str) -> LinkSettings:
    try:
        return LinkSettings.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration in {source}: {exc}") from exc


__all__ = ["CONFIG_FILENAME", "ConfigError", "LinkSettings", "load_settings"]
