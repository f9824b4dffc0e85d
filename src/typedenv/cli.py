"""
TypedEnv
Copyright (c) 2026 Chris Menendez.
All Rights Reserved.
See LICENSE for permitted use.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from typed_dotenv.dotenv import Dotenv
from typed_dotenv.errors import DotenvError, MissingSourceError
from typed_dotenv.resolver import Environment
from typed_dotenv.settings import DotenvSettings, FallbackStrategy, SettingsError
from typed_dotenv.store import Store
from typed_dotenv.value import infer, render


def _setup_logging(verbose: bool = False) -> None:
    if logging.getLogger().hasHandlers():
        return
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _settings(args: argparse.Namespace) -> DotenvSettings:
    try:
        settings = DotenvSettings.from_environ().with_overrides(path=args.path, delimiter=args.delimiter)
        if getattr(args, "fallback", None):
            settings = settings.with_overrides(fallback=FallbackStrategy.parse(args.fallback))
    except SettingsError as exc:
        raise SystemExit(f"Invalid settings: {exc}") from exc
    return settings


def _show(args: argparse.Namespace) -> int:
    _setup_logging(args.verbose)
    dotenv = Dotenv(_settings(args))
    try:
        store = dotenv.load()
    except DotenvError as exc:
        raise SystemExit(str(exc)) from exc

    if args.json:
        payload = [{"key": key, "type": value.kind, "value": value.value} for key, value in store.items()]
        print(json.dumps(payload, indent=2))
        return 0
    for key, value in store.items():
        print(f"{key}{dotenv.settings.delimiter}{render(value)}  ({value.kind})")
    return 0


def _get(args: argparse.Namespace) -> int:
    _setup_logging(args.verbose)
    dotenv = Dotenv(_settings(args))
    try:
        environment = dotenv.environment()
    except MissingSourceError:
        # a missing file still lets the process environment answer
        environment = Environment(process_env=dotenv.process_env, settings=dotenv.settings)
    except DotenvError as exc:
        raise SystemExit(str(exc)) from exc

    value = environment.get(args.key, infer(args.default) if args.default is not None else None)
    if value is None:
        print(f"{args.key} is not set", file=sys.stderr)
        return 1
    print(render(value))
    return 0


def _set(args: argparse.Namespace) -> int:
    _setup_logging(args.verbose)
    dotenv = Dotenv(_settings(args))
    try:
        store = dotenv.load()
    except MissingSourceError:
        if not args.create:
            raise SystemExit(f"{dotenv.settings.path} does not exist; pass --create to start a new file.")
        store = Store(delimiter=dotenv.settings.delimiter)
    except DotenvError as exc:
        raise SystemExit(str(exc)) from exc

    try:
        changed = store.set(args.key, args.value, overwrite=not args.no_overwrite)
    except DotenvError as exc:
        raise SystemExit(str(exc)) from exc
    if not changed:
        logging.info("%s already set; leaving it unchanged", args.key)
        return 0
    dotenv.save(store, force=True)
    return 0


def _unset(args: argparse.Namespace) -> int:
    _setup_logging(args.verbose)
    dotenv = Dotenv(_settings(args))
    try:
        store = dotenv.load()
    except DotenvError as exc:
        raise SystemExit(str(exc)) from exc

    if store.remove(args.key) is None:
        logging.info("%s not present in %s", args.key, dotenv.settings.path)
        return 0
    dotenv.save(store, force=True)
    return 0


def _check(args: argparse.Namespace) -> int:
    _setup_logging(args.verbose)
    dotenv = Dotenv(_settings(args))
    try:
        store = dotenv.load()
    except DotenvError as exc:
        print(f"[check] FAIL {dotenv.settings.path}: {exc}")
        return 1
    print(f"[check] OK {dotenv.settings.path}: {len(store)} entries")
    return 0


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--path", help="Path to the .env file (default: TYPED_DOTENV_PATH or .env).")
    common.add_argument("--delimiter", help="Key/value delimiter (default: TYPED_DOTENV_DELIMITER or '=').")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    parser = argparse.ArgumentParser(
        prog="typedenv",
        description="Inspect and edit typed .env files.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", parents=[common], help="Print every entry with its inferred type")
    show.add_argument("--json", action="store_true", help="Emit JSON instead of text.")
    show.set_defaults(func=_show)

    get_cmd = subparsers.add_parser("get", parents=[common], help="Resolve one key (file, then process env)")
    get_cmd.add_argument("key")
    get_cmd.add_argument("--default", help="Value to print when the key is not set.")
    get_cmd.add_argument("--fallback", help="Lookup order, e.g. 'store,process', 'process,store' or 'store'.")
    get_cmd.set_defaults(func=_get)

    set_cmd = subparsers.add_parser("set", parents=[common], help="Set a key in the .env file")
    set_cmd.add_argument("key")
    set_cmd.add_argument("value")
    set_cmd.add_argument("--no-overwrite", action="store_true", help="Keep an existing value.")
    set_cmd.add_argument("--create", action="store_true", help="Create the file if it does not exist.")
    set_cmd.set_defaults(func=_set)

    unset_cmd = subparsers.add_parser("unset", parents=[common], help="Remove a key from the .env file")
    unset_cmd.add_argument("key")
    unset_cmd.set_defaults(func=_unset)

    check = subparsers.add_parser("check", parents=[common], help="Validate that the .env file parses")
    check.set_defaults(func=_check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
