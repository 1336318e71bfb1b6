"""Image proxy and toast polling for the recipe rows."""
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request, Response

from healthyliving.domain.exceptions import ImageLoadCancelled

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/images/{key:path}")
async def recipe_image(request: Request, key: str):
    """Load the image of one recipe row through the screen's image loads."""
    screen = request.app.state.screen
    recipe = screen.book.find(key)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"No recipe with key '{key}'")
    try:
        result = await screen.images.fetch(recipe.key, recipe.url)
    except ImageLoadCancelled:
        raise HTTPException(status_code=404, detail=f"Recipe '{recipe.name}' was removed")
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.error)
    return Response(content=result.content, media_type=result.content_type,
                    headers={"Cache-Control": "no-store"})


@router.get("/api/notifications")
def notifications(
    request: Request,
    since: Optional[int] = Query(default=None, description="Return toasts with id greater than this value")
):
    """
    Return image-failure toasts.

    Client polling strategy:
        1. First call with since=0.
        2. Show each returned toast once and store 'next_cursor'.
        3. Subsequent polls: /api/notifications?since=<next_cursor>
    """
    return request.app.state.notifications.get_events(since)
