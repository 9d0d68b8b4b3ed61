"""View composers for the core module."""

from dataclasses import asdict

from cms.themes import View


class ThemeComposer:
    """Gives layouts the installed frontend themes and the loaded modules."""

    def __init__(self, app):
        self.app = app

    def compose(self, view: View):
        view.with_data("frontend_themes", [asdict(t) for t in self.app.themes.get_frontend().values()])
        view.with_data("loaded_modules", self.app.modules.get_module_info())
