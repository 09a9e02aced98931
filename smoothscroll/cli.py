"""Command-line front door for smoothscroll.

Parses CLI options, loads the target file, and starts the pager with
animation settings from the config file plus any flag overrides.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .logs import configure_logging
from .runtime.config import LiveSettings, save_engine_settings
from .runtime.loop import run_pager
from .view.render import DEFAULT_STYLE


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def read_text(path: Path) -> str:
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Page a file in the terminal with smoothly animated scrolling and jumps."
    )
    parser.add_argument("path", help="Path to the file to view.")
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name.")
    parser.add_argument("--no-color", action="store_true", help="Disable syntax highlighting.")
    parser.add_argument("--no-animation", action="store_true", help="Scroll and jump instantly.")
    parser.add_argument(
        "--interval",
        type=_positive_int,
        default=None,
        metavar="MS",
        help="Animation tick interval in milliseconds (overrides config).",
    )
    parser.add_argument(
        "--break-on-reverse",
        action="store_true",
        help="Cancel an ongoing scroll when scrolling the other way.",
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Write the effective animation settings to the config file before paging.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug logs to this file.")
    parser.add_argument("--log-level", default="DEBUG", help="Log level used with --log-file.")
    return parser


def settings_overrides(args: argparse.Namespace) -> dict[str, object]:
    """Map command-line flags onto engine setting overrides."""
    overrides: dict[str, object] = {}
    if args.no_animation:
        overrides["enabled"] = False
    if args.interval is not None:
        overrides["update_interval_ms"] = args.interval
    if args.break_on_reverse:
        overrides["break_on_reverse"] = True
    return overrides


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the pager on one file."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level if args.log_file else "WARNING", args.log_file)

    path = Path(args.path)
    if not path.is_file():
        raise SystemExit(f"Path not found: {path}")

    settings = LiveSettings(**settings_overrides(args))
    if args.save_settings:
        save_engine_settings(settings())
    run_pager(read_text(path), path, args.style, args.no_color, settings)


if __name__ == "__main__":
    main()
