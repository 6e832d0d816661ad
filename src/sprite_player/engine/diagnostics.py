"""Diagnostics channel with listener support."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from sprite_player.types import Diagnostic, DiagnosticCategory, Severity

logger = logging.getLogger(__name__)

DiagnosticListener = Callable[[Diagnostic], None]


class DiagnosticsChannel:
    """Collects diagnostics, logs them and notifies listeners."""

    def __init__(self, max_records: int = 256):
        """Initialize the channel.

        Args:
            max_records: Number of recent diagnostics kept in ``records``.
        """
        self._max_records = max_records
        self._records: list[Diagnostic] = []
        self._listeners: list[DiagnosticListener] = []

    @property
    def records(self) -> list[Diagnostic]:
        """Recent diagnostics, oldest first."""
        return list(self._records)

    def subscribe(self, listener: DiagnosticListener) -> Callable[[], None]:
        """Subscribe to diagnostics.

        Args:
            listener: Called with every emitted diagnostic.

        Returns:
            An unsubscribe function. Calling it twice is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, diagnostic: Diagnostic) -> Diagnostic:
        """Record, log and broadcast a diagnostic."""
        self._records.append(diagnostic)
        if len(self._records) > self._max_records:
            del self._records[0]

        level = logging.ERROR if diagnostic.severity is Severity.ERROR else logging.WARNING
        logger.log(level, "%s: %s", diagnostic.category.value, diagnostic.message)

        for listener in list(self._listeners):
            try:
                listener(diagnostic)
            except Exception:
                logger.exception("Diagnostic listener %r failed", listener)

        return diagnostic

    def report(
        self,
        category: DiagnosticCategory,
        message: str,
        **context: Any,
    ) -> Diagnostic:
        """Build and emit a diagnostic."""
        return self.emit(Diagnostic(category=category, message=message, context=context))

    def clear(self) -> None:
        """Forget recorded diagnostics."""
        self._records.clear()

    def of_category(self, category: DiagnosticCategory) -> list[Diagnostic]:
        """Recorded diagnostics with the given category."""
        return [d for d in self._records if d.category is category]


def report_to(
    channel: Optional[DiagnosticsChannel],
    category: DiagnosticCategory,
    message: str,
    **context: Any,
) -> Diagnostic:
    """Emit on ``channel`` if given, otherwise only log."""
    if channel is not None:
        return channel.report(category, message, **context)

    diagnostic = Diagnostic(category=category, message=message, context=context)
    level = logging.ERROR if diagnostic.is_error else logging.WARNING
    logger.log(level, "%s: %s", category.value, message)
    return diagnostic
