from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from typing import Optional
import logging

from healthyliving.events.Event_Bus import EventBus
from healthyliving.events.web_observers import ToastFeed
from healthyliving.infra.Image_Loader import ImageLoader
from healthyliving.logic.screen.Main_Screen import MainScreen
from healthyliving.utilities.config import DEBUG, TEMPLATES_DIR

# Routers
from healthyliving.api.routes import images, recipes

# Logging
logger = logging.getLogger("healthyliving_app")

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def create_app(image_loader: Optional[ImageLoader] = None,
               event_bus: Optional[EventBus] = None) -> FastAPI:
    """Build the application together with its one screen.

    The screen lives exactly as long as the application object; nothing is
    persisted.
    """
    app = FastAPI(title="Healthy Living Recipes", debug=DEBUG)
    app.include_router(recipes.router)
    app.include_router(images.router)

    screen = MainScreen(image_loader=image_loader,
                        event_bus=event_bus if event_bus is not None else EventBus())
    app.state.screen = screen
    notifications = ToastFeed()
    notifications.start(screen.event_bus)
    app.state.notifications = notifications
    logger.info("Recipe screen created")

    @app.get("/", response_class=HTMLResponse)
    def main_page(request: Request):
        resp = templates.TemplateResponse(
            request,
            "index.html",
            {
                "screen": request.app.state.screen.render(),
                "cursor": request.app.state.notifications.get_events(None)["next_cursor"],
            },
        )
        resp.headers["Cache-Control"] = "no-store"
        return resp

    return app


app = create_app()
