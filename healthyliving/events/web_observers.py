"""Web-facing observers for screen events.

ToastFeed subscribes to a screen's EventBus for `images.load_failed` and
keeps a small in-memory ring buffer of toast notifications that the page
polls. One feed is created per application, next to its screen.

Design:
  * Each toast gets an auto-increment integer id (cursor). The page asks
    only for ids newer than the last one it showed, so every toast is shown
    exactly once per page.
  * A Lock guards the buffer; image loads finish on the event loop while
    polling requests may be served from the threadpool.
  * max_events caps memory use.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone

from healthyliving.utilities.config import MAX_NOTIFICATIONS
from healthyliving.utilities.constants import IMAGE_ERROR_NOTICE
from .Event_Bus import IMAGE_LOAD_FAILED, EventBus

logger = logging.getLogger(__name__)


class ToastFeed:
    def __init__(self, max_events: int = MAX_NOTIFICATIONS):
        self.max_events = max_events
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._bus: Optional[EventBus] = None

    def _record(self, event_name: str, payload: Any):  # signature expected by EventBus
        recipe = payload.get('recipe') if isinstance(payload, dict) else None
        message = payload.get('message', '') if isinstance(payload, dict) else str(payload)
        with self._lock:
            evt = {
                'id': self._next_id,
                'type': event_name,
                'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
                'name': getattr(recipe, 'name', ''),
                'key': getattr(recipe, 'key', ''),
                'text': IMAGE_ERROR_NOTICE.format(message=message),
            }
            self._events.append(evt)
            self._next_id += 1
            if len(self._events) > self.max_events:
                del self._events[: len(self._events) - self.max_events]
        logger.debug(f"Toast recorded: {evt['text']}")

    def start(self, bus: EventBus):
        """Idempotent start: subscribe the recorder to `bus`."""
        if self._bus is bus:
            return
        self.stop()
        bus.subscribe(IMAGE_LOAD_FAILED, self._record)
        self._bus = bus

    def stop(self):
        if self._bus is not None:
            self._bus.unsubscribe(IMAGE_LOAD_FAILED, self._record)
            self._bus = None

    def get_events(self, since: int | None = None) -> Dict[str, Any]:
        """Return toasts newer than 'since' (exclusive).

        If since is None, returns every buffered toast.
        Response includes next_cursor (largest id) so the page can poll with since=next_cursor.
        """
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['ToastFeed']
