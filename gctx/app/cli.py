"""gctx CLI.

Commands:
- `gctx update [-n NAME] [-c]`: save the live git config under NAME.
- `gctx list`: show saved contexts.
- `gctx use [-n NAME]`: replace the live git config with a saved context.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .. import __version__
from ..config import ConfigLoader, GctxConfig
from ..core.context_store import (
    AmbiguousContext,
    ContextStore,
    ContextStoreError,
    Outcome,
)
from .io import emit_error, emit_status, log_debug


DEFAULT_NAME = "default"


def _global_options() -> argparse.ArgumentParser:
    # SUPPRESS keeps a subcommand from clobbering a value given before it.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--gitconfig",
        "-g",
        type=Path,
        default=argparse.SUPPRESS,
        help="The file path to the gitconfig file (default: ~/.gitconfig)",
    )
    common.add_argument(
        "--store-dir",
        type=Path,
        default=argparse.SUPPRESS,
        help="Directory holding saved contexts (default: ~/.gctx)",
    )
    common.add_argument(
        "--debug",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable debug output",
    )
    return common


def create_parser() -> argparse.ArgumentParser:
    common = _global_options()
    parser = argparse.ArgumentParser(
        prog="gctx",
        description="A CLI to manage git context",
        parents=[common],
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    update = subparsers.add_parser(
        "update",
        parents=[common],
        help="update a git context, or create it optionally",
    )
    update.add_argument(
        "--name",
        "-n",
        default=DEFAULT_NAME,
        help="The name of the git context",
    )
    update.add_argument(
        "--create",
        "-c",
        action="store_true",
        help="create if not exist",
    )

    list_cmd = subparsers.add_parser(
        "list",
        parents=[common],
        help="list all the saved git context",
    )
    list_cmd.add_argument(
        "--current",
        action="store_true",
        help="Mark contexts matching the live gitconfig",
    )

    use = subparsers.add_parser(
        "use",
        parents=[common],
        help="use the saved git context with the given name",
    )
    use.add_argument(
        "--name",
        "-n",
        default=DEFAULT_NAME,
        help="The name of the git context",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    parser = create_parser()
    parsed = parser.parse_args(args)

    if getattr(parsed, "debug", False):
        os.environ["GCTX_DEBUG"] = "1"

    if not parsed.command:
        parser.print_help()
        return 1

    config = _resolve_config(parsed)
    log_debug(f"config: {config.to_dict()}")
    store = ContextStore(config.store_dir)

    try:
        if parsed.command == "update":
            return cmd_update(parsed, store, config)
        if parsed.command == "list":
            return cmd_list(parsed, store, config)
        if parsed.command == "use":
            return cmd_use(parsed, store, config)
    except AmbiguousContext as e:
        emit_error(f"Data integrity error: {e}")
        return 1
    except (ContextStoreError, OSError) as e:
        emit_error(str(e))
        return 1

    parser.print_help()
    return 1


def cmd_update(args: argparse.Namespace, store: ContextStore, config: GctxConfig) -> int:
    name = args.name
    result = store.update(name, config.gitconfig, allow_create=args.create)
    log_debug(f"update {name}: {result.outcome.value} -> {result.path}")

    if result.outcome == Outcome.CREATED:
        emit_status(f"Created a new git context with the name {name}")
    elif result.outcome == Outcome.UP_TO_DATE:
        emit_status(f"The git context with the name {name} is up to date")
    else:
        emit_status(f"The git context with the name {name} is outdated, updating...")
        emit_status(f"Updated the git context with the name {name}")
    return 0


def cmd_list(args: argparse.Namespace, store: ContextStore, config: GctxConfig) -> int:
    snapshots = store.list()
    if not snapshots:
        emit_status("No git contexts found.")
        return 0

    current: set[Path] = set()
    if args.current:
        current = {s.path for s in store.current(config.gitconfig)}

    for snapshot in snapshots:
        marker = " (current)" if snapshot.path in current else ""
        emit_status(f"{snapshot.name} - {snapshot.path.absolute()}{marker}")
    return 0


def cmd_use(args: argparse.Namespace, store: ContextStore, config: GctxConfig) -> int:
    name = args.name
    result = store.use(name, config.gitconfig)
    log_debug(f"use {name}: {result.path} -> {config.gitconfig}")
    emit_status(f"switched to git context {name}")
    return 0


def _resolve_config(args: argparse.Namespace) -> GctxConfig:
    config = ConfigLoader().config
    gitconfig = getattr(args, "gitconfig", None)
    if gitconfig is not None:
        config.gitconfig = Path(gitconfig).expanduser()
    store_dir = getattr(args, "store_dir", None)
    if store_dir is not None:
        config.store_dir = Path(store_dir).expanduser()
    return config


if __name__ == "__main__":
    sys.exit(main())
