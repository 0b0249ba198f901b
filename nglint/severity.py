"""Severity definitions for lint findings."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Enumerate the supported severity levels for findings."""

    ERROR = "error"
    WARNING = "warning"
