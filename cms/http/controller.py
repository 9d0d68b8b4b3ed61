"""Base controller for module pages rendered through the active theme."""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from fastapi.responses import HTMLResponse, JSONResponse

from cms import config
from cms.themes import UnknownThemeError

logger = logging.getLogger(__name__)

DEFAULT_THEME = "default"

# view type -> Theme render method
VIEW_SOURCES = {
    "theme": "scope",
    "app": "of",
    "custom": "load",
}
MODULE_VIEW_TYPE = "module"
FALLBACK_VIEW_SOURCE = "watch"


def resolve_view_type(view_type: Optional[str]) -> Tuple[str, Optional[str], bool]:
    """
    Map a view type onto the theme render method that loads it.

    'theme', 'app' and 'custom' map directly. Anything starting with 'module'
    is a module view; 'module:<name>' targets another module's views. All
    other types fall back to 'watch'. Matching ignores case.

    Returns:
        (render method, module override or None, whether it is a module view)
    """
    view_type = (view_type or "").lower()

    if view_type in VIEW_SOURCES:
        return VIEW_SOURCES[view_type], None, False

    if view_type.startswith(MODULE_VIEW_TYPE):
        module = None
        if ":" in view_type:
            module = view_type.split(":", 1)[1] or None
        return "of", module, True

    return FALLBACK_VIEW_SOURCE, None, False


@dataclass(frozen=True)
class ViewRequest:
    """The view, data and render method for a single set_view call."""
    view: str
    data: Dict[str, Any] = field(default_factory=dict)
    type: str = "of"


@dataclass
class RequestContext:
    """Per-request collaborators exposed to controllers."""
    request: Any = None
    user: Any = None
    auth: Any = None


class ResponseFactory:
    """Builds HTTP responses for controllers."""

    def html(self, content: str, status: int = 200) -> HTMLResponse:
        return HTMLResponse(content, status_code=status)

    def json(self, data: Any, status: int = 200) -> JSONResponse:
        return JSONResponse(data, status_code=status)


class BaseController:
    """
    Base class for module controllers.

    Subclasses declare the module they belong to with `module_name`; the
    active theme and layout may be overridden with `theme_name` and `layout`.
    """

    module_name: Optional[str] = None
    theme_name: Optional[str] = None
    layout: str = "basic"

    def __init__(self, app, context: Optional[RequestContext] = None):
        self.app = app
        self.context = context or RequestContext()
        self.theme = None
        self.module: Optional[str] = None
        self.view_request: Optional[ViewRequest] = None
        self._response = ResponseFactory()
        self._measure_started = None

        self.set_dependencies()
        self.boot()
        self.start_measure()

    def set_dependencies(self):
        """Resolve the theme, layout and current module."""
        if self.theme_name is None:
            self.theme_name = config.get("themes.frontend", DEFAULT_THEME)

        theme = self.app.make("theme")
        try:
            self.theme = theme.uses(self.theme_name).layout(self.layout)
        except UnknownThemeError:
            logger.warning(f"Unknown theme '{self.theme_name}', using '{DEFAULT_THEME}'")
            self.theme_name = DEFAULT_THEME
            self.theme = theme.uses(DEFAULT_THEME).layout(self.layout)

        self.module = self.get_module()

    def boot(self):
        pass

    def get_module(self) -> Optional[str]:
        """Look up this controller's module and share it with the views."""
        module = self.app.modules.find(self.module_name)
        if module is None and self.module_name:
            logger.warning(f"Module '{self.module_name}' is not registered")
        self.theme.share("_module", module)
        return module.name if module else self.module_name

    def set_theme(self, theme: Optional[str] = None) -> bool:
        """
        Switch to another theme.

        Returns:
            False if no theme was given or it does not exist
        """
        if theme is None:
            return False
        if self.theme.exists(theme):
            self.theme_name = theme
            self.theme.uses(theme)
            return True
        return False

    def set_title(self, title: str, separator: str = " | ") -> bool:
        if self.theme is None:
            return False
        self.theme.prepend_title(f"{title}{separator}")
        return True

    def set_layout(self, layout: Optional[str] = None) -> bool:
        """
        Switch layout, provided the active theme can render it.

        Returns:
            False if no layout was given or its file is missing
        """
        if layout is None:
            return False
        if self.theme.has_layout(layout):
            self.layout = layout
            self.theme.layout(layout)
            return True
        return False

    def get_module_namespace(self, var: Optional[str] = None, module: Optional[str] = None) -> str:
        """
        Namespace a name with a module, e.g. 'blog::posts.index'.

        Args:
            var: Name to namespace; the bare module name is returned without it
            module: Module to use instead of the current one
        """
        module = (self.module if module is None else module) or ""
        module = module.lower()
        if var is not None:
            return f"{module}::{var}"
        return module

    def set_view(self, view: str, data: Optional[Dict[str, Any]] = None, type: str = MODULE_VIEW_TYPE) -> str:
        """
        Render a view through the theme and return the output.

        Args:
            view: Dotted view name, or a file path for custom views
            data: Variables passed to the view
            type: Where the view lives: module, module:<name>, theme, app or custom
        """
        method, module, is_module_view = resolve_view_type(type)
        if is_module_view:
            view = self.get_module_namespace(view, module)

        self.view_request = ViewRequest(view=view, data=dict(data or {}), type=method)
        logger.debug(f"Rendering view {view} via {method}")

        render = getattr(self.theme, method)
        return render(self.view_request.view, self.view_request.data).render()

    @property
    def user(self):
        """The authenticated user, if any."""
        return self.context.user

    @property
    def auth(self):
        return self.context.auth

    @property
    def response(self) -> ResponseFactory:
        return self._response

    def start_measure(self):
        """Start timing this controller's run, except when testing."""
        if self.app.environment() == "testing":
            return
        self._measure_started = time.perf_counter()

    def close(self):
        """Stop timing and log how long the controller ran."""
        if self._measure_started is None:
            return
        elapsed = (time.perf_counter() - self._measure_started) * 1000
        self._measure_started = None
        logger.debug(f"module_timer: {type(self).__name__} ran for {elapsed:.2f}ms")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
