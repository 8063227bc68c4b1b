"""routesync CLI — routesync sync / routesync build.

Entry point for the ``routesync`` command-line interface.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the routesync CLI."""
    parser = argparse.ArgumentParser(
        prog="routesync",
        description="Discover site routes and sync them to the Portal.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress at INFO level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # routesync sync
    sync_parser = subparsers.add_parser(
        "sync",
        help="Sync local content to the Portal (pages, blog, schemas)",
    )
    sync_parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    sync_parser.add_argument(
        "--pages",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Sync pages to the SEO module (default: on)",
    )
    sync_parser.add_argument("--blog", action="store_true", help="Sync blog posts")
    sync_parser.add_argument("--schemas", action="store_true", help="Sync schema markup")
    sync_parser.add_argument(
        "--dry-run", action="store_true", help="Show changes without syncing",
    )

    # routesync build
    build_parser = subparsers.add_parser(
        "build",
        help="Generate sitemap.xml and register it with the Portal",
    )
    build_parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    build_parser.add_argument("--base-url", default=None, help="Public site URL")
    build_parser.add_argument("--output", default="public", help="Output directory")
    build_parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Exclude paths matching PATTERN (repeatable)",
    )
    build_parser.add_argument(
        "--no-sync",
        dest="disable_sync",
        action="store_true",
        default=None,
        help="Do not contact the Portal API",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from routesync import __version__

    return __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from routesync.config_loader import load_env_files

    load_env_files(Path.cwd())

    if args.command == "sync":
        sys.exit(_run_sync(args))
    elif args.command == "build":
        sys.exit(_run_build(args))


def _run_sync(args: argparse.Namespace) -> int:
    from routesync._errors import ConfigError
    from routesync.app import sync_pages
    from routesync.banner import print_status

    try:
        asyncio.run(sync_pages(
            args.root,
            pages=args.pages,
            blog=args.blog,
            schemas=args.schemas,
            dry_run=args.dry_run,
        ))
    except ConfigError as exc:
        print_status("fail", str(exc), "Set it in .env.local or the environment.")
        return 1
    return 0


def _run_build(args: argparse.Namespace) -> int:
    from routesync._errors import ConfigError
    from routesync.app import build
    from routesync.banner import print_status

    try:
        build(
            root=args.root,
            output=args.output,
            base_url=args.base_url,
            exclude=args.exclude,
            disable_sync=args.disable_sync,
        )
    except ConfigError as exc:
        print_status("fail", str(exc))
        return 1
    return 0


if __name__ == "__main__":
    main()
