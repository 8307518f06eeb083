# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""imagelink: record and replay module resource catalogs for image-based linking."""

from __future__ import annotations

__all__: list[str] = ["__version__"]

__version__: str = "0.1.0"
