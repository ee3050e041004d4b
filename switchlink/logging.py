import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

from switchlink.core.binary import format_payload


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str, ring_size: int, level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    # The ring size is fixed by the first call for a given name.
    if get_ring_buffer(logger) is not None:
        return logger
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def get_ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def payload_details(model: object, data: bytes, **extra) -> dict:
    details = {"model": getattr(model, "name", model), "payload": format_payload(data), "length": len(data)}
    details.update(extra)
    return details
