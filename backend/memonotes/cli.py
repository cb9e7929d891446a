"""
MemoNotes Backend — Command-Line Entry Point
==============================================

What:  Parses startup flags, builds the application, and serves it with uvicorn.
Who:   The `memonotes` console script and `python -m memonotes`.

Usage:
    memonotes --host 127.0.0.1 --port 8000 --cache ./cache
    memonotes -h 0.0.0.0 -p 9000 -c /tmp/notes-cache -l debug

`-h` is the short form of --host, so help is only available as --help.
Flags that are not given fall back to MEMONOTES_* environment variables and
then to the defaults in memonotes.config.Settings.
"""

import argparse
from typing import Optional, Sequence

import uvicorn
from pydantic import ValidationError as SettingsValidationError

from memonotes.config import Settings
from memonotes.main import create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="memonotes",
        description="In-memory notes HTTP service",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this message and exit")
    parser.add_argument("-h", "--host", help="Server host")
    parser.add_argument("-p", "--port", type=int, help="Server port")
    parser.add_argument("-c", "--cache", help="Cache directory path (accepted but unused)")
    parser.add_argument(
        "-l",
        "--log-level",
        dest="log_level",
        choices=["debug", "info", "warning", "error", "critical"],
        type=str.lower,
        help="Logging verbosity",
    )
    return parser


def parse_settings(argv: Optional[Sequence[str]] = None) -> Settings:
    """
    Build Settings from command-line flags layered over the environment.

    Invalid values (e.g. a port outside 1-65535) exit through argparse with a
    usage error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {
        key: value
        for key, value in vars(args).items()
        if value is not None
    }
    try:
        return Settings(**overrides)
    except SettingsValidationError as e:
        error = e.errors()[0]
        parser.error(f"invalid {error['loc'][0]}: {error['msg']}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = parse_settings(argv)

    # Logging is configured by the application lifespan on startup
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
