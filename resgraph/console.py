"""Interactive command console for building and querying a ResNet."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from pathlib import Path
from typing import TextIO

from .color import Color, colorize
from .dijkstra import INF, Dijkstra
from .network import EdgeResult, RemoveResult, ResNet
from .paths import PathSearch

_GRAPH_FILE = "graph_data.json"
_SIGNAL_FILE = "update_signal.json"
_DATA_FILE = "data.txt"

_HELP = (
    ("help", "Show this help message"),
    ("addnode", "Add a node to the graph"),
    ("addedge", "Add multiple edges (enter 'done' when finished)"),
    ("shortest", "Find shortest path between two nodes"),
    ("allpaths", "Find all paths in the graph"),
    ("dijk", "Find all shortest paths in the graph"),
    ("print", "Print the graph structure"),
    ("dlnode", "Delete a node from the graph"),
    ("dledge", "Delete an edge from the graph"),
    ("printpath", "Print paths from start to end in the graph"),
    ("printcycle", "Print all cycles in the graph"),
    ("printerr", "Print all error edges in the graph"),
    ("clear", "Clear the console screen"),
    ("clearmap", "Clear the map"),
    ("exit/quit", "Exit the program"),
)


class Console:
    """Reads commands from a text stream and applies them to a graph."""

    def __init__(
        self,
        graph: ResNet,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        workdir: str | os.PathLike[str] | None = None,
    ):
        self.graph = graph
        self.stdin = stdin
        self.stdout = stdout
        self.workdir = Path(workdir) if workdir is not None else None
        self._commands = {
            "help": (self.print_help, False),
            "addnode": (self.add_node, True),
            "addedge": (self.add_edge, True),
            "shortest": (self.find_shortest_path, False),
            "dijk": (self._dijk_command, False),
            "allpaths": (self.find_all_paths, False),
            "print": (self.print_graph, False),
            "dlnode": (self.delete_node, True),
            "dledge": (self.delete_edge, True),
            "printpath": (self.print_path, False),
            "printcycle": (self.print_cycle, False),
            "printerr": (self.print_err_edge, False),
            "clear": (self.clear, False),
            "clearmap": (self.clear_map, True),
        }

    # -- input and output -------------------------------------------------

    def _write(self, text: str) -> None:
        out = self.stdout if self.stdout is not None else sys.stdout
        out.write(text)
        out.flush()

    def _readline(self, prompt: str = "") -> str:
        if prompt:
            self._write(prompt)
        stream = self.stdin if self.stdin is not None else sys.stdin
        line = stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _read_tokens(self, count: int) -> list[str]:
        tokens: list[str] = []
        while len(tokens) < count:
            tokens.extend(self._readline().split())
        return tokens[:count]

    def _path(self, name: str) -> Path:
        return self.workdir / name if self.workdir is not None else Path(name)

    def _pathfinder(self) -> PathSearch:
        finder = PathSearch(self.graph, self.stdout)
        finder.search_path()
        return finder

    # -- main loop ----------------------------------------------------------

    def start(self) -> None:
        """Run the read-eval loop until exit, quit or end of input."""
        self._write(
            colorize("Graph Processing Console (type 'help' for commands)", Color.GREEN, Color.BOLD)
            + "\n"
        )
        try:
            while True:
                line = self._readline("> ")
                if not line:
                    continue
                command = line.lower()
                if command in ("exit", "quit"):
                    break
                self.process_command(command)
        except EOFError:
            pass

    def print_help(self) -> None:
        """Print the list of commands."""
        lines = [colorize("Available commands:", Color.GREEN, Color.BOLD)]
        lines += [f"{colorize('  ' + name, Color.YELLOW)} - {text}" for name, text in _HELP]
        self._write("\n".join(lines) + "\n")

    def process_command(self, cmd: str) -> None:
        """Run one command; commands that change the graph refresh the exported files."""
        if cmd in ("exit", "quit"):
            return
        entry = self._commands.get(cmd)
        if entry is None:
            self._write(
                colorize("Unknown command. Type 'help' for available commands.", Color.RED) + "\n"
            )
            return
        action, updates = entry
        action()
        if updates:
            self.visualization()

    def _dijk_command(self) -> None:
        self._write(colorize("Calculating all shortest paths in the graph...", Color.CYAN) + "\n")
        self.find_all_shortest_paths()

    # -- editing ------------------------------------------------------------

    def add_node(self) -> None:
        """Read node names one per line until 'done' or 'exit'."""
        self._write(colorize("Enter node name (single character): ", Color.CYAN))
        while True:
            line = self._readline(colorize("Node> ", Color.BLUE))
            if line in ("done", "exit"):
                break
            if not line:
                continue
            tokens = line.split()
            if not tokens:
                self._write(
                    colorize(
                        "Error: Invalid input format. Please enter a single character.\n", Color.RED
                    )
                )
                continue
            name = tokens[0]
            self.graph.add_node(name)
            self._write(
                colorize("Node ", Color.GREEN)
                + colorize(name, Color.YELLOW)
                + colorize(" added successfully.", Color.GREEN)
                + "\n"
            )
            self.visualization()

    @staticmethod
    def _parse_edge(line: str) -> tuple[str, str, float] | None:
        tokens = line.split()
        if len(tokens) < 3:
            return None
        try:
            weight = float(tokens[2])
        except ValueError:
            return None
        return tokens[0], tokens[1], weight

    def _apply_edge(self, src: str, dst: str, weight: float) -> bool:
        """Add an edge, report the outcome and tell whether the graph changed."""
        result = self.graph.add_edge(src, dst, weight)
        if result == EdgeResult.OK:
            self._write(
                colorize("Edge (", Color.GREEN)
                + colorize(src, Color.YELLOW)
                + colorize(", ", Color.GREEN)
                + colorize(dst, Color.YELLOW)
                + colorize(") added successfully.\n", Color.GREEN)
            )
            return True
        if result == EdgeResult.EXISTS:
            self._write(
                colorize("Edge (", Color.RED)
                + colorize(src, Color.YELLOW)
                + colorize(", ", Color.RED)
                + colorize(dst, Color.YELLOW)
                + colorize(") already exists.\n", Color.RED)
            )
            return False
        if result == EdgeResult.CYCLE:
            self._pathfinder().print_path_to(dst, src, weight, 1)
            return True
        self._write(colorize("Error: Invalid input self-loop edge.\n", Color.RED))
        self._write(
            colorize(src, Color.YELLOW)
            + colorize(" -> ", Color.RED)
            + colorize(dst, Color.YELLOW)
            + "\n"
        )
        return True

    def _read_edge_file(self) -> bool:
        """Add the edges listed in the data file; return False if it cannot be opened."""
        try:
            handle = open(self._path(_DATA_FILE), encoding="utf-8")
        except OSError:
            self._write(colorize("Error: File open failed.\n", Color.RED))
            return False
        with handle:
            self._write(colorize("Reading edges from file...", Color.CYAN) + "\n")
            for line in handle:
                parsed = self._parse_edge(line)
                if parsed is None:
                    tokens = line.split()
                    if tokens and tokens[0] == "/":
                        self._write(colorize("File read complete.", Color.CYAN) + "\n")
                        break
                    self._write(
                        colorize(
                            "Error: Invalid input format in file. Please enter in the format: "
                            "SourceNode DestinationNode Weight\n",
                            Color.RED,
                        )
                    )
                    continue
                src, dst, weight = parsed
                self._write(
                    colorize("\nEdge (", Color.GREEN)
                    + colorize(src, Color.YELLOW)
                    + colorize(" -> ", Color.GREEN)
                    + colorize(dst, Color.YELLOW)
                    + colorize(" weight: ", Color.GREEN)
                    + colorize(f"{weight:f}", Color.MAGENTA)
                    + colorize(") read from file successfully.\n", Color.GREEN)
                )
                self._apply_edge(src, dst, weight)
        return True

    def add_edge(self) -> None:
        """Read 'source destination weight' lines until 'done'; 'file' loads the data file."""
        self._write(
            colorize(
                "Enter edges (source destination weight), one per line. "
                "Enter 'done' when finished:\n",
                Color.CYAN,
            )
        )
        while True:
            line = self._readline(colorize("Edge> ", Color.BLUE))
            if line in ("done", "exit"):
                break
            if line == "file":
                if self._read_edge_file():
                    self.visualization()
                continue
            if not line:
                continue
            parsed = self._parse_edge(line)
            if parsed is None:
                self._write(
                    colorize(
                        "Error: Invalid input format. Please enter in the format: "
                        "SourceNode DestinationNode Weight\n",
                        Color.RED,
                    )
                )
                continue
            src, dst, weight = parsed
            if weight < 0:
                self._write(colorize("Error: Weight must be a positive number.\n", Color.RED))
                continue
            if self._apply_edge(src, dst, weight):
                self.visualization()

    def delete_node(self) -> None:
        """Read a node name and remove it from the graph."""
        self._write(colorize("Enter node name to delete: ", Color.CYAN))
        (name,) = self._read_tokens(1)
        self._write(
            colorize("Deleting node ", Color.RED)
            + colorize(name, Color.YELLOW)
            + colorize(" from the graph...\n", Color.RED)
        )
        if self.graph.remove_node(name) == RemoveResult.REMOVED:
            self._write(
                colorize("Node ", Color.GREEN)
                + colorize(name, Color.YELLOW)
                + colorize(" deleted successfully.\n", Color.GREEN)
            )
        else:
            self._write(
                colorize("Node ", Color.RED)
                + colorize(name, Color.YELLOW)
                + colorize(" does not exist.\n", Color.RED)
            )

    def delete_edge(self) -> None:
        """Read a source and destination and remove that edge."""
        self._write(
            colorize(
                "Enter source and destination nodes of edge to delete (e.g. A B): ", Color.CYAN
            )
        )
        src, dst = self._read_tokens(2)
        result = self.graph.remove_edge(src, dst)
        if result == RemoveResult.REMOVED:
            prefix, suffix, color = "Edge (", ") deleted successfully.\n", Color.GREEN
        elif result == RemoveResult.NOT_FOUND:
            prefix, suffix, color = "Edge (", ") does not exist.\n", Color.RED
        else:
            prefix, suffix, color = "errEdge (", ") deleted successfully.\n", Color.MAGENTA
        self._write(
            colorize(prefix, color)
            + colorize(src, Color.YELLOW)
            + colorize(", ", color)
            + colorize(dst, Color.YELLOW)
            + colorize(suffix, color)
        )

    def clear_map(self) -> None:
        """Remove every node and edge."""
        self.graph.clear()
        self._write(colorize("The map has been cleared.", Color.GREEN, Color.BOLD) + "\n")

    # -- queries ------------------------------------------------------------

    def _format_path(self, path: list[str]) -> str:
        return colorize(" -> ", Color.BLUE).join(colorize(name, Color.YELLOW) for name in path)

    def find_shortest_path(self) -> None:
        """Read two nodes and print the shortest path between them."""
        self._write(colorize("Enter start node and end node (e.g. A B): ", Color.CYAN))
        start, end = self._read_tokens(2)
        for label, name in (("Start", start), ("End", end)):
            if self.graph.find_node(name) is None:
                self._write(
                    colorize(f"Error: {label} node ", Color.RED)
                    + colorize(name, Color.YELLOW)
                    + colorize(" does not exist.\n", Color.RED)
                )
                return

        dijkstra = Dijkstra(self.graph)
        dijkstra.shortest_path(start)
        distance = dijkstra.get_distance(end)
        if distance == INF:
            self._write(
                colorize("No path exists from ", Color.RED)
                + colorize(start, Color.YELLOW)
                + colorize(" to ", Color.RED)
                + colorize(end, Color.YELLOW)
                + colorize(".\n", Color.RED)
            )
            return
        self._write(
            colorize("Shortest distance from ", Color.GREEN)
            + colorize(start, Color.YELLOW)
            + colorize(" to ", Color.GREEN)
            + colorize(end, Color.YELLOW)
            + colorize(": ", Color.GREEN)
            + colorize(f"{distance:f}", Color.MAGENTA)
            + "\n"
        )
        self._write(
            colorize("Path: ", Color.CYAN) + self._format_path(dijkstra.get_path(end)) + "\n"
        )

    def find_all_paths(self) -> None:
        """Print every simple path in the graph."""
        self._pathfinder().print_all_paths()

    def print_graph(self) -> None:
        """Print the graph's nodes and valid edges."""
        self.graph.print_graph()

    def find_all_shortest_paths(self) -> None:
        """Print the shortest path between every ordered pair of nodes."""
        self._write(
            colorize("Calculating all shortest paths in the graph...\n", Color.CYAN, Color.BOLD)
        )
        for start_node in self.graph.nodes:
            dijkstra = Dijkstra(self.graph)
            dijkstra.shortest_path(start_node.name)
            self._write(
                "\n"
                + colorize("Shortest paths from node ", Color.GREEN)
                + colorize(start_node.name, Color.YELLOW, Color.BOLD)
                + colorize(":\n", Color.GREEN)
            )
            for end_node in self.graph.nodes:
                if end_node.name == start_node.name:
                    continue
                distance = dijkstra.get_distance(end_node.name)
                if distance == INF:
                    self._write(
                        colorize("  No path to ", Color.RED)
                        + colorize(end_node.name, Color.YELLOW)
                        + "\n"
                    )
                    continue
                self._write(
                    colorize("  To ", Color.CYAN)
                    + colorize(end_node.name, Color.YELLOW)
                    + colorize(": ", Color.CYAN)
                    + colorize(f"{distance:f}", Color.MAGENTA)
                    + colorize(" (", Color.CYAN)
                    + self._format_path(dijkstra.get_path(end_node.name))
                    + colorize(")\n", Color.CYAN)
                )
        self._write(
            colorize("\nAll shortest paths calculation completed.\n", Color.GREEN, Color.BOLD)
        )

    def print_path(self) -> None:
        """Read two nodes and print every path from the first to the second."""
        self._write(colorize("Enter start and end nodes of path (e.g. A B): ", Color.CYAN))
        start, end = self._read_tokens(2)
        self._pathfinder().print_path_to(start, end, 0.0, 0)
        self._write("\n")

    def print_cycle(self) -> None:
        """Print the cycle each error edge would close."""
        finder = self._pathfinder()
        found = False
        for err_node in self.graph.err_nodes:
            if not err_node.edges:
                continue
            found = True
            self._write(
                colorize("Node: ", Color.CYAN)
                + colorize(err_node.name, Color.YELLOW, Color.BOLD)
                + colorize(" has cycles:\n", Color.CYAN)
            )
            for target, weight in err_node.edges.items():
                finder.print_path_to(target, err_node.name, weight, 1)
            self._write("\n")
        if found:
            self._write(colorize("All cycles have been printed.\n", Color.GREEN, Color.BOLD))
        else:
            self._write(colorize("There is no cycle in the graph.\n", Color.GREEN))

    def print_err_edge(self) -> None:
        """Print the edges that were refused because they close a cycle."""
        self.graph.print_err_nodes()

    # -- files and screen ---------------------------------------------------

    def visualization(self) -> None:
        """Export the graph as JSON and write an update signal with the current time."""
        try:
            self._path(_GRAPH_FILE).write_text(self.graph.export_to_json(), encoding="utf-8")
        except OSError:
            print("Unable to open file to export graph data.", file=sys.stderr)
            return
        try:
            self._path(_SIGNAL_FILE).write_text(
                f'{{"timestamp": {int(time.time())}}}', encoding="utf-8"
            )
        except OSError:
            print("Unable to open file to write update signal.", file=sys.stderr)

    def clear(self) -> None:
        """Clear the terminal and print the welcome line."""
        if os.name == "nt" and self.stdout is None:
            subprocess.run("cls", shell=True, check=False)
        else:
            self._write("\033[2J\033[H")
        self._write(colorize("Welcome to the graph console!\n", Color.GREEN, Color.BOLD))