"""Console commands for the core module."""

import json
import logging

from cms.console import Command
from cms.services import ConfigStore

logger = logging.getLogger(__name__)


def parse_value(raw: str):
    """Read a command line value as JSON, falling back to the plain string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


class ListThemesCommand(Command):
    help = "List installed themes"

    def add_arguments(self, parser):
        parser.add_argument("--type", choices=["frontend", "backend"], help="Only list themes of this type")

    def handle(self, args) -> int:
        if args.type == "frontend":
            themes = self.app.themes.get_frontend()
        elif args.type == "backend":
            themes = self.app.themes.get_backend()
        else:
            themes = self.app.themes.all()

        if not themes:
            print("No themes found.")
            return 0

        print("\nThemes:")
        print("=" * 60)
        for theme in themes.values():
            print(f" {theme.dir:<20} {theme.name or 'N/A'} v{theme.version or '?'} ({theme.type or 'untyped'})")
            print(f"   by {theme.author or 'N/A'} - {theme.site or 'N/A'}")
        print("=" * 60)
        return 0


class GetConfigCommand(Command):
    help = "Show a stored setting"

    def add_arguments(self, parser):
        parser.add_argument("path", help="Dotted setting path, e.g. site.name")

    def handle(self, args) -> int:
        store = self.app.make(ConfigStore)
        print(json.dumps(store.get(args.path)))
        return 0


class SetConfigCommand(Command):
    help = "Store a setting for the current environment"

    def add_arguments(self, parser):
        parser.add_argument("path", help="Dotted setting path, e.g. site.name")
        parser.add_argument("value", help="JSON value; plain text is stored as a string")

    def handle(self, args) -> int:
        store = self.app.make(ConfigStore)
        if not store.set(args.path, parse_value(args.value)):
            print(f"Could not save {args.path}")
            return 1
        print(f"Saved {args.path} for environment '{self.app.environment()}'")
        return 0
