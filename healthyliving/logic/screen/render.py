"""Pure projection of the screen state into a render tree.

The tree is a plain dict so it can be returned as JSON and handed to the
Jinja2 template unchanged. Nothing here mutates state.
"""
from typing import Any, Callable, Dict
from urllib.parse import quote

from healthyliving.domain.Input_Stage import InputStage
from healthyliving.domain.Recipe import Recipe
from healthyliving.domain.Recipe_Book import RecipeBook
from healthyliving.utilities.constants import (
    IMAGE_LOADING, IMAGE_SIZE_PX, NAME_LABEL, SUBMIT_LABEL, TITLE_MAX_LINES, URL_LABEL,
)


def image_path(recipe: Recipe) -> str:
    return "/images/" + quote(recipe.key, safe="")


def render_row(recipe: Recipe, image_state: str) -> Dict[str, Any]:
    return {
        "key": recipe.key,
        "name": recipe.name,
        "title": {"text": recipe.name, "max_lines": TITLE_MAX_LINES, "overflow": "ellipsis"},
        "image": {
            "src": image_path(recipe),
            "url": recipe.url,
            "state": image_state,
            "size": IMAGE_SIZE_PX,
            "content_scale": "crop",
            "crossfade": True,
            "content_description": recipe.name,
        },
        "remove": {"method": "DELETE", "path": "/api/recipes/" + quote(recipe.key, safe="")},
    }


def render_screen(book: RecipeBook, stage: InputStage, status_message: str,
                  image_state: Callable[[str], str] = lambda key: IMAGE_LOADING) -> Dict[str, Any]:
    """Build the render tree for the current state.

    `image_state` maps a recipe key to 'loading', 'ready' or 'error'.
    The status line is None when the message is blank, which hides it.
    """
    return {
        "inputs": [
            {"id": "name", "label": NAME_LABEL, "value": stage.name_draft, "single_line": True},
            {"id": "url", "label": URL_LABEL, "value": stage.url_draft, "single_line": True},
        ],
        "submit": {"label": SUBMIT_LABEL, "enabled": stage.can_submit()},
        "status": status_message if status_message.strip() else None,
        "items": [render_row(r, image_state(r.key)) for r in book],
    }
