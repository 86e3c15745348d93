"""Enumeration and printing of all simple paths in a ResNet."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from .color import Color, colorize
from .network import ResNet

_PLAIN = 0
_CYCLE = 1

Path = tuple[str, ...]


@dataclass
class PathNode:
    """A start node with every simple path leaving it and each path's weight."""

    name: str
    paths: list[tuple[Path, float]] = field(default_factory=list)


class PathSearch:
    """Depth-first search of every simple path from every node."""

    def __init__(self, net: ResNet, out: TextIO | None = None):
        self.net = net
        self.out = out
        self.nodes: list[PathNode] = []
        self._by_name: dict[str, PathNode] = {}

    def _write(self, text: str) -> None:
        (self.out if self.out is not None else sys.stdout).write(text)

    def search_path(self) -> None:
        """Recompute all paths from every node."""
        self.nodes = [PathNode(node.name) for node in self.net.nodes]
        self._by_name = {}
        for path_node in self.nodes:
            self._by_name.setdefault(path_node.name, path_node)
        for index, path_node in enumerate(self.nodes):
            self._dfs(index, set(), [], 0.0, path_node)

    def _dfs(
        self,
        index: int,
        visited: set[int],
        current: list[str],
        weight: float,
        origin: PathNode,
    ) -> None:
        node = self.net.nodes[index]
        visited.add(index)
        current.append(node.name)
        if len(current) > 1:
            origin.paths.append((tuple(current), weight))
        for target, edge_weight in node.edges.items():
            nxt = self.net.name_to_index[target]
            if nxt not in visited:
                self._dfs(nxt, visited, current, weight + edge_weight, origin)
        visited.discard(index)
        current.pop()

    def paths_from(self, name: str) -> list[tuple[Path, float]]:
        """Paths found from ``name``; raises KeyError if it is not a searched node."""
        return self._by_name[name].paths

    def print_path(self, path, weight: float, kind: int) -> None:
        """Print one path; kind 0 adds its total weight, kind 1 leaves it open as a cycle."""
        if not path:
            self._write(colorize("No path found", Color.RED) + "\n")
            return
        arrow = colorize(" -> ", Color.CYAN if kind == _CYCLE else Color.BLUE)
        self._write(arrow.join(colorize(name, Color.YELLOW) for name in path))
        if kind == _PLAIN:
            self._write(
                " "
                + colorize("(Total weight: ", Color.MAGENTA)
                + colorize(f"{weight:f}", Color.GREEN)
                + colorize(")", Color.MAGENTA)
                + "\n"
            )
        elif kind == _CYCLE:
            self._write(colorize(" -> ", Color.CYAN))

    def print_all_paths(self) -> None:
        """Print every path grouped by start node."""
        for node in self.nodes:
            self._write(
                colorize("Paths starting from ", Color.GREEN)
                + colorize(node.name, Color.YELLOW, Color.BOLD)
                + colorize(":", Color.GREEN)
                + "\n"
            )
            if not node.paths:
                self._write(colorize("No path found", Color.RED) + "\n\n")
                continue
            for path, weight in node.paths:
                self.print_path(path, weight, _PLAIN)
            self._write("\n")

    def print_path_to(self, source: str, target: str, weight: float, kind: int) -> None:
        """Print every path from ``source`` ending at ``target``.

        With kind 1 each path is closed back to ``source`` and ``weight`` is added
        to its total.
        """
        try:
            paths = self.paths_from(source)
        except KeyError:
            self._write(
                colorize("Node ", Color.RED)
                + colorize(source, Color.YELLOW)
                + colorize(" not found", Color.RED)
                + "\n"
            )
            return
        found = False
        for path, path_weight in paths:
            if path[-1] != target:
                continue
            self.print_path(path, path_weight, kind)
            if kind == _CYCLE:
                self._write(
                    source
                    + colorize(" (Total weight: ", Color.MAGENTA)
                    + colorize(f"{path_weight + weight:f}", Color.GREEN)
                    + colorize(")", Color.MAGENTA)
                    + "\n"
                )
            found = True
        if not found:
            self._write(colorize("No path found", Color.RED) + "\n\n")