import argparse
from typing import Any, Iterable, Mapping


def build_parser(themes: Mapping[str, Any], default_theme: str, variants: Iterable[str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doit",
        description="doit: interactive terminal client for a remote task list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", help="path to config.yaml (default: $DOIT_CONFIG or $XDG_CONFIG_HOME/doit/config.yaml)")
    parser.add_argument("--variant", choices=list(variants), help="override the variant from the config file")
    parser.add_argument("--theme", choices=list(themes.keys()), default=default_theme, help="interface palette")
    parser.add_argument("--log-file", dest="log_file", help="write logs to this file (the UI owns the terminal)")
    parser.add_argument("--verbose", "-v", action="store_true", help="log remote calls at DEBUG level")
    parser.add_argument("--version", action="store_true", help="print the version and exit")
    return parser


__all__ = ["build_parser"]
