"""Command line console running the commands registered by module providers."""

import argparse
import logging
import sys
from typing import List, Optional

from cms.config import load_config

logger = logging.getLogger(__name__)


class Command:
    """Base class for console commands; constructed with the application."""

    help = ""

    def __init__(self, app):
        self.app = app

    def add_arguments(self, parser: argparse.ArgumentParser):
        pass

    def handle(self, args: argparse.Namespace) -> int:
        raise NotImplementedError


def build_parser(app) -> argparse.ArgumentParser:
    """Build the console parser with one subcommand per registered command."""
    parser = argparse.ArgumentParser(prog="cms", description="CMS console")
    parser.add_argument("--config", help="Path to config.yaml")
    subparsers = parser.add_subparsers(dest="command", metavar="command")

    for command_id in app.commands:
        command = app.make(command_id)
        subparser = subparsers.add_parser(command_id, help=command.help)
        command.add_arguments(subparser)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run a console command."""
    from cms.core.application import create_application
    from cms.logging_setup import setup_logging

    argv = sys.argv[1:] if argv is None else argv

    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--config")
    known, _ = pre_parser.parse_known_args(argv)

    load_config(known.config)
    setup_logging()

    app = create_application()
    parser = build_parser(app)
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return app.make(args.command).handle(args)


if __name__ == "__main__":
    sys.exit(main())
