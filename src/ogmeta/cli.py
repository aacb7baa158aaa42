"""Command-line interface for ogmeta."""

import json
import sys
from pathlib import Path

from ogmeta.config import SiteConfig, settings
from ogmeta.exceptions import FixtureError
from ogmeta.hooks import FilterRegistry
from ogmeta.logging_config import setup_logging
from ogmeta.renderer import HeadRenderer
from ogmeta.resolver import MetaResolver
from ogmeta.site import load_fixture


def _build(fixture: str, site_config=None):
    """Load a fixture and wire up a renderer for it.

    Args:
        fixture: Fixture file with 'site' and 'view' sections
        site_config: Optional YAML/JSON SiteConfig file replacing the
            fixture's site values

    Returns:
        Tuple of (HeadRenderer, ViewContext)
    """
    try:
        site, view = load_fixture(fixture)
    except FixtureError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if site_config:
        if not Path(site_config).exists():
            print(f"Error: Site config not found: {site_config}", file=sys.stderr)
            sys.exit(1)
        try:
            site.config = SiteConfig.from_file(site_config)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    renderer = HeadRenderer(MetaResolver(site, FilterRegistry()))
    renderer.install()
    return renderer, view


def resolve_command(args):
    """Print the resolved meta record for a fixture."""
    renderer, view = _build(args.fixture, args.site_config)
    record = renderer.resolver.resolve(view)

    if args.json:
        print(json.dumps(record, indent=2, ensure_ascii=False))
        return

    if not record:
        print("(no meta for this view)")
        return

    width = max(len(key) for key in record)
    for key, value in record.items():
        print(f"{key:<{width}}  {value}")


def emit_command(args):
    """Print the <meta> tags for a fixture."""
    renderer, view = _build(args.fixture, args.site_config)
    sys.stdout.write(renderer.render_head(view))


def preview_command(args):
    """Write an HTML preview document for a fixture."""
    renderer, view = _build(args.fixture, args.site_config)
    html = renderer.render_preview(view)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(html)
        print(f"Preview written to {args.output}")
    else:
        sys.stdout.write(html)


def main(argv=None):
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="ogmeta - Generate Open Graph meta tags for site views"
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL.upper(),
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Logging level (default: {settings.LOG_LEVEL})",
    )
    parser.add_argument(
        "--log-file",
        default=settings.LOG_FILE,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--site-config",
        help="YAML or JSON file with site settings, replacing those in the fixture",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Resolve command parser
    resolve_parser = subparsers.add_parser(
        "resolve", help="Show the resolved meta record for a view."
    )
    resolve_parser.add_argument("fixture", help="YAML or JSON file with 'site' and 'view' sections")
    resolve_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the record as JSON",
    )
    resolve_parser.set_defaults(func=resolve_command)

    # Emit command parser
    emit_parser = subparsers.add_parser(
        "emit", help="Print the <meta> tags for a view."
    )
    emit_parser.add_argument("fixture", help="YAML or JSON file with 'site' and 'view' sections")
    emit_parser.set_defaults(func=emit_command)

    # Preview command parser
    preview_parser = subparsers.add_parser(
        "preview", help="Render an HTML document carrying the tags."
    )
    preview_parser.add_argument("fixture", help="YAML or JSON file with 'site' and 'view' sections")
    preview_parser.add_argument(
        "--output",
        "-o",
        help="Write the document to this file instead of stdout",
    )
    preview_parser.set_defaults(func=preview_command)

    args = parser.parse_args(argv)

    setup_logging(
        level=args.log_level,
        log_file=args.log_file,
    )

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
