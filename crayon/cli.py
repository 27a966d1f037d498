"""Crayon command-line interface.

Usage::

    crayon make:component components/Badge
    crayon make:component components/Badge --skip-props --framework react
    crayon make:component --eject
    crayon add:vuex
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from jinja2 import TemplateError
from pydantic import ValidationError
from rich.markup import escape

from crayon.commands.add_vuex import AddVuexCommand
from crayon.commands.make_component import MakeComponentCommand
from crayon.config import CrayonConfig
from crayon.exceptions import CrayonError
from crayon.utils import console


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crayon",
        description="Crayon -- UI component scaffolding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  crayon make:component components/Badge\n"
            "  crayon make:component components/Badge --skip-props\n"
            "  crayon make:component --eject --framework vue\n"
            "  crayon add:vuex\n"
        ),
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to the config file (default: ./crayon.config.json)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    make = subparsers.add_parser(
        "make:component",
        help="Generate a component from boilerplate",
    )
    make.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Component path, e.g. components/MyComponent",
    )
    make.add_argument(
        "--skip-props",
        action="store_true",
        help="Skip the props prompts step",
    )
    make.add_argument(
        "--eject",
        action="store_true",
        help="Eject the template stubs",
    )
    make.add_argument(
        "--framework", "-f",
        default=None,
        help="Framework id (overrides the configured framework)",
    )

    subparsers.add_parser(
        "add:vuex",
        help="Add Vuex to your project",
    )
    return parser


async def run(args: argparse.Namespace, cwd: Path | None = None) -> None:
    """Dispatch parsed arguments to a command."""
    cwd = cwd or Path.cwd()
    config = CrayonConfig.discover(cwd, Path(args.config) if args.config else None)

    if args.command == "make:component":
        await MakeComponentCommand(config, cwd=cwd).run(
            args.path,
            skip_props=args.skip_props,
            eject=args.eject,
            framework=args.framework,
        )
    elif args.command == "add:vuex":
        await AddVuexCommand(config, cwd=cwd).run()


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``crayon``."""
    args = build_parser().parse_args(argv)

    try:
        asyncio.run(run(args))
    except CrayonError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
        sys.exit(1)
    except ValidationError as exc:
        console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(exc))}", highlight=False)
        sys.exit(1)
    except (OSError, TemplateError) as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
        sys.exit(1)


if __name__ == "__main__":
    main()
