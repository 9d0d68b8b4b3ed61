"""Theme-aware view rendering on top of Jinja2."""

import logging
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from jinja2 import Environment, FileSystemLoader, PrefixLoader, TemplateNotFound, select_autoescape
from markupsafe import Markup

logger = logging.getLogger(__name__)

TEMPLATE_EXTENSION = ".html"


class UnknownThemeError(Exception):
    """Raised when a theme directory does not exist."""


@dataclass
class View:
    """A view about to be rendered; composers may add to its data."""
    name: str
    data: Dict[str, Any] = field(default_factory=dict)

    def with_data(self, key: str, value: Any) -> "View":
        self.data[key] = value
        return self


def view_path(view: str) -> str:
    """Convert a dotted view name into a template path ('pages.home' -> 'pages/home.html')."""
    return view.replace(".", "/") + TEMPLATE_EXTENSION


class ViewFactory:
    """Shared template environment and view composers."""

    def __init__(self, themes_path: str, views_path: str, modules_path: str):
        self.themes_path = Path(themes_path)
        self.views_path = Path(views_path)
        self.modules_path = Path(modules_path)
        self.env = Environment(
            loader=PrefixLoader({
                "themes": FileSystemLoader(str(self.themes_path)),
                "app": FileSystemLoader(str(self.views_path)),
                "modules": FileSystemLoader(str(self.modules_path)),
            }),
            autoescape=select_autoescape(["html"]),
        )
        self._composers: List[tuple] = []

    def composer(self, views: Union[str, List[str]], composer: Any):
        """
        Register a composer for one or more view names.

        Args:
            views: View name or list of names; shell-style wildcards allowed
            composer: Object with a compose(view) method, or a callable taking the view
        """
        if isinstance(views, str):
            views = [views]
        for name in views:
            self._composers.append((name, composer))
            logger.debug(f"Registered composer {composer!r} for view {name}")

    def compose(self, view: View):
        """Run every composer whose pattern matches the view name."""
        for pattern, composer in self._composers:
            if fnmatchcase(view.name, pattern):
                if hasattr(composer, "compose"):
                    composer.compose(view)
                else:
                    composer(view)

    def exists(self, template: str) -> bool:
        try:
            self.env.get_template(template)
        except TemplateNotFound:
            return False
        return True

    def render(self, template: str, name: str, data: Dict[str, Any]) -> str:
        """Render a template from the loader, running composers for `name` first."""
        view = View(name, dict(data))
        self.compose(view)
        return self.env.get_template(template).render(view.data)

    def render_file(self, path: str, data: Dict[str, Any]) -> str:
        """Render a template file by path; relative paths resolve against the views path."""
        file_path = Path(path)
        if not file_path.is_absolute():
            file_path = self.views_path / file_path
        view = View(str(path), dict(data))
        self.compose(view)
        return self.env.from_string(file_path.read_text()).render(view.data)


class Theme:
    """
    Per-request theme state: active theme, layout, title and rendered content.

    Each render method (scope, of, load, watch) renders a view and returns the
    theme itself; render() then wraps the content in the active layout.
    """

    def __init__(self, factory: ViewFactory):
        self.factory = factory
        self.theme: Optional[str] = None
        self.layout_name: Optional[str] = None
        self._title = ""
        self._shared: Dict[str, Any] = {}
        self._content: Optional[str] = None

    def exists(self, name: str) -> bool:
        return bool(name) and (self.factory.themes_path / name).is_dir()

    def uses(self, name: str) -> "Theme":
        if not self.exists(name):
            raise UnknownThemeError(f"Theme [{name}] not found.")
        self.theme = name
        return self

    def layout(self, name: str) -> "Theme":
        self.layout_name = name
        return self

    def prepend_title(self, title: str) -> "Theme":
        self._title = f"{title}{self._title}"
        return self

    def set_title(self, title: str) -> "Theme":
        self._title = title
        return self

    def get_title(self) -> str:
        return self._title

    def share(self, key: str, value: Any) -> "Theme":
        """Share a value with every view rendered through this theme."""
        self._shared[key] = value
        return self

    def scope(self, view: str, data: Optional[Dict[str, Any]] = None) -> "Theme":
        """Render a view from the active theme's views directory."""
        self._content = self.factory.render(self._theme_template(view), view, self._with_shared(data))
        return self

    def of(self, view: str, data: Optional[Dict[str, Any]] = None) -> "Theme":
        """Render an application view, or a module view given as 'module::view'."""
        if "::" in view:
            module, name = view.split("::", 1)
            template = f"modules/{module}/views/{view_path(name)}"
        else:
            template = f"app/{view_path(view)}"
        self._content = self.factory.render(template, view, self._with_shared(data))
        return self

    def load(self, path: str, data: Optional[Dict[str, Any]] = None) -> "Theme":
        """Render a template file given by path."""
        self._content = self.factory.render_file(path, self._with_shared(data))
        return self

    def watch(self, view: str, data: Optional[Dict[str, Any]] = None) -> "Theme":
        """Render from the theme when it has the view, otherwise from the application."""
        if self.factory.exists(self._theme_template(view)):
            return self.scope(view, data)
        return self.of(view, data)

    def render(self) -> str:
        """Wrap the rendered content in the active layout."""
        content = Markup(self._content or "")
        if not self.layout_name:
            return str(content)

        template = self._layout_template(self.layout_name)
        data = self._with_shared({
            "content": content,
            "title": self.get_title(),
            "theme": self.theme,
        })
        return self.factory.render(template, f"layouts.{self.layout_name}", data)

    def has_layout(self, layout: str) -> bool:
        """Whether the active theme ships the given layout."""
        return self.factory.exists(self._layout_template(layout))

    def _layout_template(self, layout: str) -> str:
        return f"themes/{self.theme}/layouts/{view_path(layout)}"

    def _theme_template(self, view: str) -> str:
        return f"themes/{self.theme}/views/{view_path(view)}"

    def _with_shared(self, data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        merged = dict(self._shared)
        merged.update(data or {})
        return merged
