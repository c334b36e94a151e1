"""Planisphere CLI — planisphere generate / planisphere index.

Entry point for the ``planisphere`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the planisphere CLI."""
    parser = argparse.ArgumentParser(
        prog="planisphere",
        description="Generate sitemap XML files and their sitemap index.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # planisphere generate
    generate_parser = subparsers.add_parser(
        "generate",
        help="Write sitemaps for a list of URLs",
    )
    generate_parser.add_argument(
        "source", help="URL list: .json, .yaml/.yml, or text with one URL per line",
    )
    generate_parser.add_argument("--output", default=None, help="Output directory")
    generate_parser.add_argument("--base-url", default=None, help="Prefix for relative URLs")
    slash = generate_parser.add_mutually_exclusive_group()
    slash.add_argument(
        "--trailing-slash", dest="trailing_slash", action="store_const", const=True,
        default=None, help="Force a trailing slash on every URL",
    )
    slash.add_argument(
        "--no-trailing-slash", dest="trailing_slash", action="store_const", const=False,
        help="Strip trailing slashes from every URL",
    )
    generate_parser.add_argument(
        "--pretty", action="store_const", const=True, default=None,
        help="Indent the generated XML",
    )
    generate_parser.add_argument(
        "--config-dir", default=".", help="Directory containing planisphere.yaml/.toml",
    )

    # planisphere index
    index_parser = subparsers.add_parser(
        "index",
        help="Print a sitemap index for existing sitemap files",
    )
    index_parser.add_argument("filenames", nargs="+", help="Sitemap file names, in order")
    index_parser.add_argument("--base-url", default="", help="Prefix for the file names")
    index_parser.add_argument(
        "--lastmod", default=None, help="Modification time for every entry (default: now)",
    )
    index_parser.add_argument("--pretty", action="store_true", help="Indent the generated XML")

    return parser


def _get_version() -> str:
    """Get the package version."""
    from planisphere import __version__

    return __version__


def _generate(args: argparse.Namespace) -> None:
    from planisphere.config_loader import load_options
    from planisphere.export.writer import write_sitemaps
    from planisphere.observability.log import EventLog
    from planisphere.sources import load_entries
    from planisphere.summary import print_summary

    options = load_options(
        args.config_dir,
        base_url=args.base_url,
        trailing_slash=args.trailing_slash,
        pretty=args.pretty,
        output=args.output,
    )
    entries = load_entries(args.source)
    event_log = EventLog()
    result = write_sitemaps(options.output, entries, options, event_log=event_log)
    print_summary(result, event_log=event_log)


def _index(args: argparse.Namespace) -> None:
    from planisphere.config import SitemapOptions
    from planisphere.sitemap.generate import generate_sitemap_index

    options = SitemapOptions(base_url=args.base_url, pretty=args.pretty)
    index = generate_sitemap_index(args.filenames, options, args.lastmod)
    if index is not None:
        print(index)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    from planisphere._errors import PlanisphereError

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "generate":
            _generate(args)
        elif args.command == "index":
            _index(args)
    except PlanisphereError as exc:
        print(f"  Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
