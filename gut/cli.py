"""Command-line front door for gut.

Parses the source folder and display options, enables optional debug
logging, then hands over to the interactive session runtime.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from . import __version__
from .config import load_no_color, load_theme_name
from .debug_log import LOG_ENV_VAR, configure_debug_log
from .runtime import run_session
from .ui_theme import available_theme_names, resolve_theme


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gut",
        description="Interactively copies selected content from a folder into the current directory.",
        epilog=f"Set {LOG_ENV_VAR}=<file> to write a debug log.",
    )
    parser.add_argument("folder", help="Source folder to copy from.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and run one interactive copy session.

    Returns the process exit status: 0 when every entry was decided, 1 when
    the session failed or was aborted.
    """
    args = build_parser().parse_args(argv)

    source = Path(args.folder)
    if not source.exists():
        raise SystemExit(f"Path not found: {source}")
    if not source.is_dir():
        raise SystemExit(f"Not a folder: {source}")

    configure_debug_log()
    theme = resolve_theme(
        args.theme if args.theme is not None else load_theme_name(),
        no_color=args.no_color or load_no_color(),
    )
    return run_session(source, theme)


if __name__ == "__main__":
    raise SystemExit(main())
