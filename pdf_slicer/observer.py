"""Observer interface through which the engine reports busy state and events."""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from .utils import get_logger


class EngineObserver(Protocol):
    """Receives synchronous notifications from engine operations."""

    def on_busy_changed(self, busy: bool) -> None:
        ...

    def on_event(self, message: str) -> None:
        ...


class NullObserver:
    """Observer that ignores every notification."""

    def on_busy_changed(self, busy: bool) -> None:
        return None

    def on_event(self, message: str) -> None:
        return None


class LoggingObserver:
    """Forward notifications to a logger."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or get_logger("pdf_slicer.events")

    def on_busy_changed(self, busy: bool) -> None:
        self.logger.debug("Busy: %s", busy)

    def on_event(self, message: str) -> None:
        self.logger.info(message)


class RecordingObserver:
    """Keep every notification in memory, e.g. to build an activity log."""

    def __init__(self) -> None:
        self.busy_changes: List[bool] = []
        self.events: List[str] = []

    @property
    def busy(self) -> bool:
        return bool(self.busy_changes) and self.busy_changes[-1]

    def on_busy_changed(self, busy: bool) -> None:
        self.busy_changes.append(busy)

    def on_event(self, message: str) -> None:
        self.events.append(message)


__all__ = ["EngineObserver", "NullObserver", "LoggingObserver", "RecordingObserver"]
