"""Simple Event Bus / Observer implementation for the recipe screen.

Event names:
  recipes.added       -> payload {"recipe": Recipe}
  recipes.removed     -> payload {"recipe": Recipe}
  recipes.rejected    -> payload {"name": str, "url": str, "reason": "duplicate" | "empty"}
  images.load_failed  -> payload {"recipe": Recipe, "message": str}
  screen.rendered     -> payload render tree (dict)

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
RECIPE_ADDED = "recipes.added"
RECIPE_REMOVED = "recipes.removed"
RECIPE_REJECTED = "recipes.rejected"
IMAGE_LOAD_FAILED = "images.load_failed"
SCREEN_RENDERED = "screen.rendered"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception(f"Error delivering {event_name} to {cb}")


# Process-wide bus used by the application screen
GLOBAL_EVENT_BUS = EventBus()
