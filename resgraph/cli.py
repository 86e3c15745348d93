"""Command-line entry point: prepare the exported files and run the console."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .console import Console
from .network import ResNet

_GRAPH_FILE = "graph_data.json"
_SIGNAL_FILE = "update_signal.json"
_EMPTY_GRAPH = '{\n  "nodes": [],\n  "edges": []\n}'
_INITIAL_SIGNAL = '{"timestamp": 0}'


def initialize_json_files(directory: str | os.PathLike[str] | None = None) -> None:
    """Write an empty graph export and a zero update signal into ``directory``."""
    base = Path(directory) if directory is not None else Path()
    for name, content in ((_GRAPH_FILE, _EMPTY_GRAPH), (_SIGNAL_FILE, _INITIAL_SIGNAL)):
        try:
            (base / name).write_text(content, encoding="utf-8")
        except OSError:
            print(f"Unable to open {name} for writing.", file=sys.stderr)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="resgraph",
        description="Interactive console for an acyclic weighted directed graph.",
    )
    parser.add_argument(
        "--workdir",
        default=".",
        help="directory for graph_data.json, update_signal.json and data.txt",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Initialise the export files and run the console until the user exits."""
    args = _parse_args(argv)
    initialize_json_files(args.workdir)
    console = Console(ResNet(), workdir=args.workdir)
    console.start()
    return 0


if __name__ == "__main__":
    sys.exit(main())