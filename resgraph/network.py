"""A directed weighted graph that refuses edges which would close a cycle."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TextIO

from .color import Color, colorize


class EdgeResult(IntEnum):
    """Outcome of adding an edge or checking for a cycle."""

    OK = 0
    CYCLE = 1
    EXISTS = 2
    SELF_LOOP = 3


class RemoveResult(IntEnum):
    """Outcome of removing a node or an edge."""

    REMOVED = 0
    NOT_FOUND = 1
    ERROR_EDGE_REMOVED = 2


@dataclass
class Node:
    """A named node with its outgoing edges, in insertion order."""

    name: str
    edges: dict[str, float] = field(default_factory=dict)

    @property
    def num_edges(self) -> int:
        return len(self.edges)


class ResNet:
    """Acyclic directed graph; edges that would form a cycle are kept aside as error edges."""

    def __init__(self, out: TextIO | None = None):
        self.out = out
        self.nodes: list[Node] = []
        self.err_nodes: list[Node] = []
        self.name_to_index: dict[str, int] = {}

    def _print(self, *parts: str) -> None:
        print("".join(parts), file=self.out if self.out is not None else sys.stdout)

    def add_node(self, name: str) -> int:
        """Add a node if it is new; return its index either way."""
        index = self.find_node(name)
        if index is not None:
            return index
        self.nodes.append(Node(name))
        self.err_nodes.append(Node(name))
        self.name_to_index[name] = len(self.nodes) - 1
        return len(self.nodes) - 1

    def find_node(self, name: str) -> int | None:
        """Return the index of a node, or None if it is not in the graph."""
        return self.name_to_index.get(name)

    def circle_check(self, src: str, dst: str) -> EdgeResult:
        """Report whether ``dst`` is reachable from ``src``, adding missing nodes."""
        if src == dst:
            self.add_node(src)
            return EdgeResult.SELF_LOOP

        missing = False
        for name in (dst, src):
            if self.find_node(name) is None:
                self.add_node(name)
                missing = True
        if missing:
            self._print(colorize("No circle, node not found", Color.YELLOW, Color.BOLD))
            return EdgeResult.OK

        start = self.name_to_index[src]
        target = self.name_to_index[dst]
        visited = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == target:
                return EdgeResult.CYCLE
            for neighbour in self.nodes[current].edges:
                nxt = self.name_to_index[neighbour]
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)
        self._print(colorize("No circle found", Color.YELLOW, Color.BOLD))
        return EdgeResult.OK

    def add_edge(self, src: str, dst: str, value: float) -> EdgeResult:
        """Add or update the edge ``src -> dst``; cyclic edges become error edges."""
        value = float(value)
        result = self.circle_check(dst, src)
        if result:
            self._print(
                colorize("Cannot add edge, there is a circle in the resNet", Color.RED, Color.BOLD)
            )
            self.err_nodes[self.name_to_index[src]].edges[dst] = value
            return result

        edges = self.nodes[self.name_to_index[src]].edges
        existed = dst in edges
        edges[dst] = value
        return EdgeResult.EXISTS if existed else EdgeResult.OK

    def _legalize_error_edges(self) -> None:
        candidates = [
            (node.name, target)
            for node in list(self.err_nodes)
            for target in list(node.edges)
            if not self.circle_check(node.name, target)
        ]
        for src, dst in candidates:
            err_edges = self.err_nodes[self.name_to_index[src]].edges
            if dst in err_edges:
                if not self.add_edge(src, dst, err_edges[dst]):
                    err_edges.pop(dst, None)

    def remove_edge(self, src: str, dst: str) -> RemoveResult:
        """Remove an edge; error edges are looked at first."""
        if src not in self.name_to_index or dst not in self.name_to_index:
            return RemoveResult.NOT_FOUND
        index = self.name_to_index[src]

        err_edges = self.err_nodes[index].edges
        if dst in err_edges:
            del err_edges[dst]
            return RemoveResult.ERROR_EDGE_REMOVED

        edges = self.nodes[index].edges
        if dst not in edges:
            return RemoveResult.NOT_FOUND
        del edges[dst]

        self._legalize_error_edges()
        return RemoveResult.REMOVED

    def remove_node(self, name: str) -> RemoveResult:
        """Remove a node and every edge that points to it."""
        if name not in self.name_to_index:
            return RemoveResult.NOT_FOUND
        index = self.name_to_index.pop(name)
        del self.nodes[index]
        del self.err_nodes[index]
        self.name_to_index = {
            key: (i - 1 if i > index else i) for key, i in self.name_to_index.items()
        }
        for node in (*self.nodes, *self.err_nodes):
            node.edges.pop(name, None)

        self._legalize_error_edges()
        return RemoveResult.REMOVED

    def get_edges(self, name: str) -> list[tuple[str, float]]:
        """Return the valid outgoing edges of a node, empty if the node is unknown."""
        index = self.name_to_index.get(name)
        if index is None:
            return []
        return list(self.nodes[index].edges.items())

    def print_graph(self) -> None:
        """Print every node with its valid edges."""
        if not self.nodes:
            self._print(colorize("No graph exists", Color.RED))
            return
        self._print(colorize("Graph Structure:", Color.GREEN, Color.BOLD))
        for node in self.nodes:
            self._print(colorize("Node: ", Color.CYAN), colorize(node.name, Color.YELLOW, Color.BOLD))
            if not node.edges:
                self._print(colorize("    No edges", Color.MAGENTA))
            for target, weight in node.edges.items():
                self._print(
                    "    ", colorize(target, Color.BLUE), " ", colorize(f"{weight:f}", Color.MAGENTA)
                )
            self._print()

    def print_err_nodes(self) -> bool:
        """Print every node with its error edges; return False if the graph is empty."""
        if not self.err_nodes:
            self._print(colorize("No graph exists", Color.RED))
            return False
        self._print(colorize("Error edges:", Color.RED, Color.BOLD))
        for node in self.err_nodes:
            self._print(colorize("Node: ", Color.CYAN), colorize(node.name, Color.YELLOW, Color.BOLD))
            if not node.edges:
                self._print(colorize("    No error edges", Color.MAGENTA))
            for target, weight in node.edges.items():
                self._print(
                    "    ", colorize(target, Color.RED), " ", colorize(f"{weight:f}", Color.MAGENTA)
                )
            self._print()
        return True

    def clear(self) -> None:
        """Remove all nodes and edges."""
        self.nodes.clear()
        self.err_nodes.clear()
        self.name_to_index.clear()

    def export_to_json(self) -> str:
        """Return the graph as JSON text with nodes, valid edges and error edges."""
        node_lines = [f'    {{"id": "{n.name}", "label": "{n.name}"}}' for n in self.nodes]
        edge_lines = [
            f'    {{"from": "{node.name}", "to": "{target}", "label": "{weight:g}", '
            f'"isError": {"true" if is_error else "false"}}}'
            for nodes, is_error in ((self.nodes, False), (self.err_nodes, True))
            for node in nodes
            for target, weight in node.edges.items()
        ]
        lines = ["{", '  "nodes": [']
        if node_lines:
            lines.append(",\n".join(node_lines))
        lines += ["  ],", '  "edges": [']
        if edge_lines:
            lines.append(",\n".join(edge_lines))
        lines += ["  ]", "}"]
        return "\n".join(lines)