import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional


class RingBufferHandler(logging.Handler):
    """Keeps the most recent structured events in memory for the ``/logs`` route."""

    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "logger": record.name,
            "ts": record.created,
            "details": dict(getattr(record, "details", None) or {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self, limit: Optional[int] = None) -> List[Dict]:
        with self._lock:
            events = list(self._events)
        return events[-limit:] if limit else events

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def find_ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def create_logger(name: str, ring_size: int, level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(name)
    if find_ring_buffer(logger) is not None:
        return logger
    logger.setLevel(level.upper())
    handler = RingBufferHandler(max_entries=ring_size)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
