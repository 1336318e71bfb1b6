"""Draft, submit and remove endpoints for the recipe screen.

Handlers are `async def` so every state change runs on the event loop,
one at a time, like taps on a single UI thread.
"""
import logging
from fastapi import APIRouter, HTTPException, Request

from healthyliving.logic.screen.Main_Screen import MainScreen
from healthyliving.utilities.validators import DraftInput, SubmitResult

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


def get_screen(request: Request) -> MainScreen:
    return request.app.state.screen


@router.get("/screen")
async def screen_tree(request: Request):
    """Return the current render tree."""
    return get_screen(request).render()


# === onChange handlers ===
@router.put("/drafts/name")
async def change_name_draft(request: Request, draft: DraftInput):
    return get_screen(request).set_name_draft(draft.value)


@router.put("/drafts/url")
async def change_url_draft(request: Request, draft: DraftInput):
    return get_screen(request).set_url_draft(draft.value)


# === Submit ===
@router.post("/recipes")
async def submit_recipe(request: Request):
    screen = get_screen(request)
    result = screen.submit()
    if result is None:
        raise HTTPException(status_code=409, detail="Submit is disabled: enter a name and an https:// URL")
    outcome = SubmitResult(result=result, status=screen.status_message)
    return {**outcome.model_dump(), "screen": screen.render()}


# === Tap to remove ===
@router.delete("/recipes/{key:path}")
async def remove_recipe(request: Request, key: str):
    screen = get_screen(request)
    recipe = screen.book.find(key)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"No recipe with key '{key}'")
    return screen.tap(recipe)
