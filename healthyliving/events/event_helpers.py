"""Event helper utilities.

Typed wrappers around EventBus.publish for the screen events, so callers
never build payload dicts by hand.

Quick import:
    from healthyliving.events.event_helpers import (
        publish_recipe_added, publish_recipe_removed, publish_recipe_rejected,
        publish_image_load_failed, publish_screen_rendered
    )
"""
from __future__ import annotations
from typing import Any, Dict

from healthyliving.domain.Recipe import Recipe
from .Event_Bus import (
    EventBus,
    RECIPE_ADDED, RECIPE_REMOVED, RECIPE_REJECTED, IMAGE_LOAD_FAILED, SCREEN_RENDERED,
)

__all__ = [
    'publish_recipe_added', 'publish_recipe_removed', 'publish_recipe_rejected',
    'publish_image_load_failed', 'publish_screen_rendered',
]


def publish_recipe_added(bus: EventBus, recipe: Recipe):
    bus.publish(RECIPE_ADDED, {'recipe': recipe})


def publish_recipe_removed(bus: EventBus, recipe: Recipe):
    bus.publish(RECIPE_REMOVED, {'recipe': recipe})


def publish_recipe_rejected(bus: EventBus, name: str, url: str, reason: str):
    """Publish a recipes.rejected event (reason is 'duplicate' or 'empty')."""
    bus.publish(RECIPE_REJECTED, {'name': name, 'url': url, 'reason': reason})


def publish_image_load_failed(bus: EventBus, recipe: Recipe, message: str):
    bus.publish(IMAGE_LOAD_FAILED, {'recipe': recipe, 'message': message})


def publish_screen_rendered(bus: EventBus, tree: Dict[str, Any]):
    bus.publish(SCREEN_RENDERED, tree)
