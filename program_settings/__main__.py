"""Command line entry point for inspecting saved settings."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from . import (
    SettingsError,
    SettingsFileNotFound,
    delete_settings,
    delete_settings_file,
    load_settings,
    resolve_path,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="program-settings",
        description="Inspect settings files saved by program-settings.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug messages to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("path", "Print where a program's settings file lives."),
        ("show", "Print a program's saved settings as JSON."),
        ("delete", "Delete a program's settings file."),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("program", help="Program identifier the settings were saved under.")
        target = sub.add_mutually_exclusive_group() if name == "delete" else sub
        target.add_argument(
            "--file-name",
            help="Settings file name inside the program directory.",
        )
        if name == "delete":
            target.add_argument(
                "--all",
                action="store_true",
                help="Delete the program's whole settings directory.",
            )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "path":
            path = resolve_path(args.program, file_name=args.file_name, create=False)
            sys.stdout.write(f"{path}\n")
        elif args.command == "show":
            path = resolve_path(args.program, file_name=args.file_name, create=False)
            if not path.is_file():
                raise SettingsFileNotFound(path)
            payload = load_settings(args.program, Any, file_name=args.file_name)
            json.dump(payload, sys.stdout, indent=2)
            sys.stdout.write("\n")
        elif args.all:
            delete_settings(args.program)
        else:
            delete_settings_file(args.program, file_name=args.file_name)
    except SettingsError as exc:
        parser.exit(1, f"error: {exc}\n")


if __name__ == "__main__":  # pragma: no cover
    main()
