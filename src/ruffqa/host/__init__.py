# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Terminal host adapters: file-backed documents and console reporting."""

from __future__ import annotations

from .documents import FileDocument
from .reporting import ConsoleNotifier, ConsoleReporter

__all__ = ["ConsoleNotifier", "ConsoleReporter", "FileDocument"]
