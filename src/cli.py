"""Command-line interface for projdesk."""

import argparse
import sys
from dataclasses import dataclass

from app import ProjectDeskTUI, setup_logging
from config import ConfigError, Settings, load_settings
from constants import API_BASE_ENV, APP_NAME, APP_VERSION, TIMEOUT_ENV


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    api_base: str | None
    timeout: str | None


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


class ProjdeskHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that shows our structured help."""

    def format_help(self) -> str:
        lines = [
            "projdesk - A terminal client for a project-management API.",
            f"Version: {APP_VERSION}",
            "",
            "Usage:",
            "  projdesk                              Connect using the environment or defaults",
            "  projdesk --api-base <url>             Connect to a specific API",
            "  projdesk --timeout <seconds>          Per-request timeout",
            "  projdesk --version                    Show version and exit",
            "",
            "Environment:",
            f"  {API_BASE_ENV:<36}  Base URL of the API",
            f"  {TIMEOUT_ENV:<36}  Request timeout in seconds",
            "",
            "Keys:",
            "  ctrl+r    Reload projects",
            "  escape    Close the file viewer",
            "  ctrl+q    Quit",
        ]
        return "\n".join(lines) + "\n"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the projdesk CLI."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        formatter_class=ProjdeskHelpFormatter,
        add_help=True,
    )
    parser.add_argument("--api-base", metavar="URL", help=argparse.SUPPRESS)
    parser.add_argument("--timeout", metavar="SECONDS", help=argparse.SUPPRESS)
    parser.add_argument("--version", action="store_true", help=argparse.SUPPRESS)
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments.

    Handles --version directly (prints and exits).
    """
    parser = create_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.version:
        print(f"{APP_NAME} {APP_VERSION}")
        sys.exit(0)

    return ParsedArgs(api_base=args.api_base, timeout=args.timeout)


def resolve_settings(args: ParsedArgs) -> Settings:
    """Build settings from parsed args, exiting with an error box if invalid."""
    try:
        return load_settings(api_base=args.api_base, timeout=args.timeout)
    except ConfigError as e:
        print_error_box(
            "Invalid configuration",
            str(e),
            "",
            f"Set {API_BASE_ENV} or pass --api-base <url>.",
        )
        sys.exit(1)


def main() -> None:
    """Main entry point."""
    args = parse_args()
    settings = resolve_settings(args)
    setup_logging()

    app = ProjectDeskTUI(settings)
    app.run()


if __name__ == "__main__":
    main()
