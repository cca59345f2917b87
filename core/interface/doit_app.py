#!/usr/bin/env python3
"""Entry point: load config, fetch the list, run the TUI, report fatal errors."""

import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from typing import List, Optional

from application.task_registry import TaskRegistry
from config import ConfigError, load_config
from core import VARIANTS, get_variant
from core.interface.cli_parser import build_parser
from core.interface.tui_app import DoitTUI
from core.interface.tui_state import InteractionState
from core.interface.tui_themes import DEFAULT_THEME, THEMES
from infrastructure.remote_client import RemoteClient, RemoteClientError

logger = logging.getLogger("doit")


def configure_logging(log_file: Optional[str], verbose: bool = False) -> None:
    """Route the `doit` logger tree to a file, or silence it.

    The full-screen UI owns the terminal, so nothing may go to stderr while it runs.
    Repeated calls reuse the handler already attached; OSError means the log file
    cannot be opened.
    """
    if not log_file:
        if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
            logger.addHandler(logging.NullHandler())
        return
    path = os.path.abspath(log_file)
    if not any(isinstance(h, logging.FileHandler) and h.baseFilename == path for h in logger.handlers):
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _fail(message: str) -> int:
    print(f"doit: {message}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser(THEMES, DEFAULT_THEME, VARIANTS.keys())
    args = parser.parse_args(argv)
    if args.version:
        try:
            print(pkg_version("doit-client"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    try:
        configure_logging(args.log_file, args.verbose)
    except OSError as exc:
        return _fail(f"cannot open log file {args.log_file}: {exc}")

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        return _fail(str(exc))
    variant = get_variant(args.variant or config.variant)

    client = RemoteClient(config, variant=variant)
    registry = TaskRegistry(client)
    try:
        registry.load()
    except RemoteClientError as exc:
        return _fail(str(exc))
    logger.info("Loaded %d tasks from %s (%s variant)", registry.count(), config.base_url, variant.name)

    state = InteractionState(client, registry, variant)
    DoitTUI(state, theme=args.theme).run()
    if state.fatal_error is not None:
        return _fail(str(state.fatal_error))
    return 0


if __name__ == "__main__":
    sys.exit(main())
