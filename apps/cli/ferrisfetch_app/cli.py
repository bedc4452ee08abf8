"""CLI entrypoint for ferris-fetch."""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from importlib import metadata
from typing import TextIO

from ferrisfetch_core import configure_logging, install_crash_hooks, resolve_display_config
from ferrisfetch_renderer import DEFAULT_THEME_NAME, list_themes, render, validate_tables
from ferrisfetch_telemetry import Collector


def _installed_version() -> str:
    try:
        return metadata.version("ferris-fetch")
    except Exception:
        return "0.1.0"


def _terminal_width(stream: TextIO) -> int | None:
    try:
        if not stream.isatty():
            return None
    except (AttributeError, ValueError):
        return None
    return shutil.get_terminal_size().columns


def write_block(text: str, stream: TextIO | None = None) -> None:
    stream = stream if stream is not None else sys.stdout
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        # Legacy Windows code pages cannot encode the bar and rule glyphs.
        reconfigure(errors="replace")
    stream.write(text + "\n")
    stream.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ferris-fetch", description="A cute system information tool featuring Ferris the crab")
    parser.add_argument(
        "-t",
        "--theme",
        default=DEFAULT_THEME_NAME,
        help=f"Color theme to use ({', '.join(list_themes())}); unknown names use {DEFAULT_THEME_NAME}",
    )
    parser.add_argument("-m", "--minimal", action="store_true", help="Show minimal info only")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--no-art", action="store_true", help="Hide ASCII art")
    parser.add_argument("--list-themes", action="store_true", help="List available themes and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    parser.add_argument("--log-json", action="store_true", help="Emit stderr logs as JSON lines")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_installed_version()}")
    return parser


def main(argv: list[str] | None = None, stream: TextIO | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = configure_logging(level=(logging.DEBUG if args.verbose else logging.WARNING), json_format=args.log_json)
    install_crash_hooks()

    if args.list_themes:
        write_block("\n".join(list_themes()), stream)
        return 0

    validate_tables()
    cfg = resolve_display_config(
        theme=args.theme,
        minimal=args.minimal,
        no_color=args.no_color,
        no_art=args.no_art,
        known_themes=list_themes(),
    )
    collector = Collector()
    logger.debug("collecting facts with %s source", collector.source.name)
    info = collector.collect()
    out = stream if stream is not None else sys.stdout
    write_block(render(info, cfg, width=_terminal_width(out)), out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
