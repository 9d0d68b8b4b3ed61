"""Routes for the core module."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from cms.api.dependencies import api_controller, controller
from cms.api.schemas import ConfigValueRequest
from .controllers import ConfigController, PagesController, ThemesController

pages_router = APIRouter(tags=["pages"])
api_router = APIRouter(prefix="/api", tags=["api"])


@pages_router.get("/", response_class=HTMLResponse)
def home(pages: PagesController = Depends(controller(PagesController))):
    """Home page rendered through the active theme."""
    return pages.response.html(pages.home())


@pages_router.get("/about", response_class=HTMLResponse)
def about(pages: PagesController = Depends(controller(PagesController))):
    return pages.response.html(pages.about())


@pages_router.get("/landing", response_class=HTMLResponse)
def landing(pages: PagesController = Depends(controller(PagesController))):
    return pages.response.html(pages.landing())


@pages_router.get("/health", tags=["general"])
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@api_router.get("/themes")
def list_themes(themes: ThemesController = Depends(api_controller(ThemesController))):
    return themes.index()


@api_router.get("/themes/{theme_type}")
def list_themes_by_type(theme_type: str, themes: ThemesController = Depends(api_controller(ThemesController))):
    return themes.by_type(theme_type)


@api_router.get("/config")
def list_settings(settings: ConfigController = Depends(api_controller(ConfigController))):
    return settings.index()


@api_router.get("/config/{path}")
def get_setting(path: str, settings: ConfigController = Depends(api_controller(ConfigController))):
    return settings.show(path)


@api_router.put("/config/{path}")
def update_setting(
    path: str,
    request: ConfigValueRequest,
    settings: ConfigController = Depends(api_controller(ConfigController)),
):
    return settings.update(path, request.value)
