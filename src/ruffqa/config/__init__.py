# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration models and loaders."""

from __future__ import annotations

from .loader import load_config, load_from_sources
from .models import Config, ConfigError, ExecutionConfig, SeverityConfig

__all__ = [
    "Config",
    "ConfigError",
    "ExecutionConfig",
    "SeverityConfig",
    "load_config",
    "load_from_sources",
]
