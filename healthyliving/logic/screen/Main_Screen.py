"""State container for the single recipe screen.

MainScreen owns the recipe book, the input drafts, the status message and
the per-recipe image loads. Every mutating operation finishes with one
render pass: the new render tree is published as `screen.rendered` and
handed to every subscribed listener.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

from healthyliving.domain.Input_Stage import InputStage
from healthyliving.domain.Recipe import Recipe
from healthyliving.domain.Recipe_Book import RecipeBook
from healthyliving.domain.exceptions import DuplicateNameError, EmptyFieldError
from healthyliving.events.Event_Bus import GLOBAL_EVENT_BUS, SCREEN_RENDERED, EventBus
from healthyliving.events.event_helpers import (
    publish_image_load_failed,
    publish_recipe_added,
    publish_recipe_rejected,
    publish_recipe_removed,
    publish_screen_rendered,
)
from healthyliving.infra.Image_Loader import ImageLoader, ImageLoads
from healthyliving.logic.screen.render import render_screen
from healthyliving.utilities.constants import (
    RESULT_ADDED, RESULT_DUPLICATE, RESULT_EMPTY,
    STATUS_ADDED, STATUS_DUPLICATE, STATUS_INCOMPLETE, STATUS_REMOVED,
)

logger = logging.getLogger(__name__)

RenderListener = Callable[[Dict[str, Any]], None]


class MainScreen:
    def __init__(self, image_loader: Optional[ImageLoader] = None,
                 event_bus: Optional[EventBus] = None):
        self.book = RecipeBook()
        self.stage = InputStage()
        self.status_message = ""
        self._event_bus = event_bus if event_bus is not None else GLOBAL_EVENT_BUS
        self.images = ImageLoads(image_loader or ImageLoader(), on_error=self._image_failed)
        self._listeners: Dict[RenderListener, Callable[[str, Any], None]] = {}

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    # --- Render loop ------------------------------------------------------
    def render(self) -> Dict[str, Any]:
        return render_screen(self.book, self.stage, self.status_message, self.images.state)

    def subscribe(self, listener: RenderListener):
        '''Call `listener(tree)` after every state change.'''
        if listener in self._listeners:
            return
        def _deliver(event_name, tree):
            listener(tree)
        self._listeners[listener] = _deliver
        self._event_bus.subscribe(SCREEN_RENDERED, _deliver)

    def unsubscribe(self, listener: RenderListener):
        deliver = self._listeners.pop(listener, None)
        if deliver is not None:
            self._event_bus.unsubscribe(SCREEN_RENDERED, deliver)

    def _changed(self) -> Dict[str, Any]:
        tree = self.render()
        publish_screen_rendered(self._event_bus, tree)
        return tree

    # --- Draft handlers ---------------------------------------------------
    def set_name_draft(self, value: str) -> Dict[str, Any]:
        self.stage.set_name_draft(value)
        return self._changed()

    def set_url_draft(self, value: str) -> Dict[str, Any]:
        self.stage.set_url_draft(value)
        return self._changed()

    def can_submit(self) -> bool:
        return self.stage.can_submit()

    # --- Actions ----------------------------------------------------------
    def submit(self) -> Optional[str]:
        '''
        Handle a tap on the submit control.

        Returns None without touching state while the control is disabled,
        otherwise 'added', 'duplicate' or 'empty'.
        '''
        if not self.stage.can_submit():
            logger.debug("Submit ignored: control disabled")
            return None
        name, url = self.stage.name_draft, self.stage.url_draft
        try:
            recipe = self.book.add(name, url)
        except EmptyFieldError as e:
            # Unreachable while can_submit() gates; the book stays authoritative.
            logger.info(f"Recipe rejected: {e}")
            self.status_message = STATUS_INCOMPLETE
            publish_recipe_rejected(self._event_bus, name, url, RESULT_EMPTY)
            result = RESULT_EMPTY
        except DuplicateNameError as e:
            logger.info(f"Recipe rejected: {e}")
            self.status_message = STATUS_DUPLICATE
            publish_recipe_rejected(self._event_bus, name, url, RESULT_DUPLICATE)
            result = RESULT_DUPLICATE
        else:
            self.stage.reset_after_submit()
            self.status_message = STATUS_ADDED
            publish_recipe_added(self._event_bus, recipe)
            result = RESULT_ADDED
        self._changed()
        return result

    def tap(self, recipe: Recipe) -> Dict[str, Any]:
        '''Remove the tapped recipe and drop its image load.'''
        if recipe in self.book:
            self.book.remove(recipe)
            self.images.cancel(recipe.key)
        self.status_message = STATUS_REMOVED.format(name=recipe.name)
        publish_recipe_removed(self._event_bus, recipe)
        return self._changed()

    def recipes(self) -> List[Recipe]:
        return self.book.get_items()

    # --- Image loads ------------------------------------------------------
    def _image_failed(self, key: str, message: str):
        recipe = self.book.find(key)
        if recipe is None:
            return
        publish_image_load_failed(self._event_bus, recipe, message)
        self._changed()
