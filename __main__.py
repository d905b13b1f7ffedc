"""CLI entry point for termgrid.

This module acts as the central entry point for the project's CLI tools.
It delegates commands to the appropriate submodules.
"""

import argparse
import sys

from dotenv import load_dotenv

from termgrid.config import (
    get_demo_size,
    get_environment,
    get_environment_info,
    get_log_level,
    list_environment_variables,
)
from termgrid.core import get_logger, setup_logging

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


# =============================================================================
# Demo Command
# =============================================================================


def cmd_demo(args: argparse.Namespace) -> int:
    """Handle the demo command."""
    from termgrid.demo import list_demos, render_demo

    if args.list:
        for name in list_demos():
            print(name)
        return 0

    if not args.name:
        logger.error("No demo name given. Use --list to see available demos.")
        return 1

    try:
        width, height = get_demo_size(args.width, args.height)
        if width < 0 or height < 0:
            raise ValueError(f"Size must be non-negative, got {width}x{height}")
        print(render_demo(args.name, width, height, color=not args.no_color))
        return 0
    except (KeyError, ValueError) as e:
        logger.error(f"Demo failed: {e.args[0] if e.args else e}")
        return 1


def handle_demo_command(argv: list[str]) -> int:
    """Handle demo-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . demo",
        description="Render an example layout once and print it",
    )
    parser.add_argument(
        "name",
        nargs="?",
        help="Demo to render (basic, frames, expanded)",
    )
    parser.add_argument(
        "--width",
        "-W",
        type=int,
        default=None,
        help="Width in cells (default: TERMGRID_DEMO_WIDTH or 90)",
    )
    parser.add_argument(
        "--height",
        "-H",
        type=int,
        default=None,
        help="Height in cells (default: TERMGRID_DEMO_HEIGHT or 24)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colour output",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available demos",
    )

    args = parser.parse_args(argv)
    return cmd_demo(args)


# =============================================================================
# Env Command
# =============================================================================


def cmd_env(args: argparse.Namespace) -> int:
    """Handle the env command."""
    variables = list_environment_variables(args.category)
    if not variables:
        logger.error(f"No variables in category: {args.category}")
        return 1

    print("termgrid configuration")
    print("=" * 50)
    for var in variables:
        info = get_environment_info(var)
        value = get_environment(var)
        print(f"  {info.name} = {value!r}  [{info.category}]")
        print(f"      {info.description}")
    return 0


def handle_env_command(argv: list[str]) -> int:
    """Handle env-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . env",
        description="Show configuration variables and their current values",
    )
    parser.add_argument(
        "--category",
        "-c",
        default=None,
        help="Only show one category (render, frame, logging, demo)",
    )

    args = parser.parse_args(argv)
    return cmd_env(args)


# =============================================================================
# Entry Point
# =============================================================================


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\nCommands:")
    print("  demo       Render an example layout")
    print("  env        Show configuration variables")
    print("\nExamples:")
    print("  python . demo --list")
    print("  python . demo basic")
    print("  python . demo expanded --width 120 --height 30")
    print("  python . env --category frame")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    command = sys.argv[1]
    rest_args = sys.argv[2:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "demo": lambda: handle_demo_command(rest_args),
        "env": lambda: handle_env_command(rest_args),
    }

    if command in commands:
        setup_logging(get_log_level())
        return commands[command]()

    setup_logging(get_log_level())
    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
