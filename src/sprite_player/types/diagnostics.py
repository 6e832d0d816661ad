"""Diagnostic records and error types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DiagnosticCategory(Enum):
    """What kind of problem a diagnostic reports."""

    CONFIGURATION_WARNING = "configuration_warning"
    PLAYBACK_ERROR = "playback_error"
    BOUNDS_WARNING = "bounds_warning"
    RESOURCE_ERROR = "resource_error"


class Severity(Enum):
    """How serious a diagnostic is."""

    WARNING = "warning"
    ERROR = "error"


CATEGORY_SEVERITY = {
    DiagnosticCategory.CONFIGURATION_WARNING: Severity.WARNING,
    DiagnosticCategory.PLAYBACK_ERROR: Severity.ERROR,
    DiagnosticCategory.BOUNDS_WARNING: Severity.WARNING,
    DiagnosticCategory.RESOURCE_ERROR: Severity.ERROR,
}


@dataclass(frozen=True)
class Diagnostic:
    """A single non-fatal problem report."""

    category: DiagnosticCategory
    message: str
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def severity(self) -> Severity:
        """Severity implied by the category."""
        return CATEGORY_SEVERITY[self.category]

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR


class SpriteError(Exception):
    """Base class for sprite player errors."""


class ConfigError(SpriteError):
    """Raised when a sprite configuration cannot be parsed."""


class ResourceError(SpriteError):
    """Raised when sheet image dimensions cannot be resolved."""
