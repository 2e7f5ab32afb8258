"""
Sinks for the non-fatal anomalies met while decoding.

The decoder never logs directly: it reports events to an observer, which
decides where they go. Events are short snake_case names with a details
dictionary, the same shape the server's ring buffer stores.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional


class DecodeObserver:
    """Observer that ignores every event. Subclass it to record anomalies."""

    def warning(self, event: str, details: Optional[dict[str, Any]] = None) -> None:
        pass

    def error(self, event: str, details: Optional[dict[str, Any]] = None) -> None:
        pass


class LoggingObserver(DecodeObserver):
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("bobassistant.decoder")

    def warning(self, event: str, details: Optional[dict[str, Any]] = None) -> None:
        self.logger.warning(event, extra={"details": details or {}})

    def error(self, event: str, details: Optional[dict[str, Any]] = None) -> None:
        self.logger.error(event, extra={"details": details or {}})


@dataclass
class DecodeEvent:
    level: str
    event: str
    details: dict[str, Any] = field(default_factory=dict)


class CollectingObserver(DecodeObserver):
    """Keeps every reported event in memory, in order."""

    def __init__(self) -> None:
        self.events: list[DecodeEvent] = []

    def warning(self, event: str, details: Optional[dict[str, Any]] = None) -> None:
        self.events.append(DecodeEvent("WARNING", event, dict(details or {})))

    def error(self, event: str, details: Optional[dict[str, Any]] = None) -> None:
        self.events.append(DecodeEvent("ERROR", event, dict(details or {})))

    def names(self, level: Optional[str] = None) -> list[str]:
        return [e.event for e in self.events if level is None or e.level == level]


__all__ = ["CollectingObserver", "DecodeEvent", "DecodeObserver", "LoggingObserver"]
