"""Command line interface for gofr-dotenv.

USAGE:
    gofr-dotenv check FILE [FILE ...]
    gofr-dotenv show [PATH] [--app-env-name NAME] [--overwrite] [--format table|json]

``check`` validates files without loading them. ``show`` runs the full
layered load against a copy of the current environment and prints the
variables the files would provide; the real environment is not modified.

ENVIRONMENT:
    GOFR_DOTENV_PATH          Default PATH for ``show``
    GOFR_DOTENV_APP_ENV_NAME  Default --app-env-name
    GOFR_DOTENV_OVERWRITE     Default --overwrite (true/false)
    GOFR_DOTENV_LOG_LEVEL     Log level (logs go to stderr)
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import AbstractSet, Dict, List, Optional

from gofr_dotenv.config import LoaderSettings
from gofr_dotenv.exceptions import DotenvError
from gofr_dotenv.loader import Dotenv
from gofr_dotenv.logger import Logger, create_logger
from gofr_dotenv.store import MemoryEnvStore


def cmd_check(files: List[str], logger: Logger) -> int:
    """Validate each file; report every failure, not just the first."""
    loader = Dotenv(logger=logger, store=MemoryEnvStore())
    failures = 0

    for path in files:
        try:
            variables = loader.process_file(path)
        except DotenvError as e:
            print(f"ERROR: {path}: {e}", file=sys.stderr)
            failures += 1
            continue
        print(f"OK: {path} ({len(variables)} variables)")

    return 1 if failures else 0


def cmd_show(loader: Dotenv, format: str = "table", existing: AbstractSet[str] = frozenset()) -> int:
    """Print the variables resolved by a full load.

    ``existing`` holds the names defined in the store before the load. Those
    rows are labelled ``environment`` unless overwrite mode replaced them.
    """
    try:
        variables = loader.load()
    except DotenvError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    resolved: Dict[str, str] = {name: loader.read_var(name) for name in variables}

    if format == "json":
        print(json.dumps(resolved, indent=2, sort_keys=True))
        return 0

    if not resolved:
        print("No variables found")
        return 0

    width = max(len(name) for name in resolved)
    for name in sorted(resolved):
        kept = name in existing and not loader.overwrite
        source = "environment" if kept else "file"
        print(f"{name:<{width}}  {source:<11}  {resolved[name]}")

    print(f"\nTotal: {len(resolved)} variables")
    return 0


def build_parser(settings: LoaderSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gofr-dotenv",
        description="Validate and inspect layered .env files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
EXAMPLES:
  Validate files:
    %(prog)s check .env .env-production

  Show what a production load resolves to:
    APP_ENV=production %(prog)s show /srv/app
        """,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command", required=False)

    check = subparsers.add_parser(
        "check",
        help="Validate .env files",
        description="Parse each file and report syntax errors",
    )
    check.add_argument("files", nargs="+", metavar="FILE", help="Files to validate")

    show = subparsers.add_parser(
        "show",
        help="Show resolved variables",
        description="Run the layered load against a copy of the environment",
    )
    show.add_argument(
        "path",
        nargs="?",
        default=settings.path or os.curdir,
        help="Base .env file or directory. Default: %(default)s",
    )
    show.add_argument(
        "--app-env-name",
        default=settings.app_env_name,
        help="Variable selecting the application environment. Default: %(default)s",
    )
    show.add_argument(
        "--overwrite",
        action="store_true",
        default=settings.overwrite,
        help="Let file values replace variables already in the environment",
    )
    show.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format. Default: %(default)s",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    try:
        settings = LoaderSettings.from_env()
    except DotenvError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = create_logger(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "check":
        return cmd_check(args.files, logger)

    if args.command == "show":
        environ = dict(os.environ)
        try:
            loader = Dotenv(
                args.path,
                app_env_name=args.app_env_name,
                overwrite=args.overwrite,
                store=MemoryEnvStore(environ),
                logger=logger,
            )
        except DotenvError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        return cmd_show(loader, args.format, frozenset(environ))

    return 0


if __name__ == "__main__":
    sys.exit(main())
