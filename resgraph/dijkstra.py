"""Single-source shortest paths over the valid edges of a ResNet."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .network import ResNet

INF = math.inf


@dataclass
class _Entry:
    name: str
    dist: float


class Heap:
    """Binary min-heap of named entries that supports decreasing a key."""

    def __init__(self):
        self._heap: list[_Entry] = []
        self._index: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        """Return True when the heap holds no entries."""
        return not self._heap

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i].name] = i
        self._index[heap[j].name] = j

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._heap[index].dist < self._heap[parent].dist:
                self._swap(index, parent)
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._heap[child].dist < self._heap[smallest].dist:
                    smallest = child
            if smallest == index:
                break
            self._swap(index, smallest)
            index = smallest

    def insert(self, name: str, dist: float) -> None:
        """Add an entry with the given distance."""
        self._heap.append(_Entry(name, dist))
        self._index[name] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> str:
        """Remove and return the name with the smallest distance."""
        if not self._heap:
            raise IndexError("Heap is empty")
        top = self._heap[0]
        self._index.pop(top.name, None)
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._index[last.name] = 0
            self._sift_down(0)
        return top.name

    def decrease_key(self, name: str, dist: float) -> None:
        """Lower the distance of an entry; unknown names and larger values are ignored."""
        index = self._index.get(name)
        if index is None:
            return
        entry = self._heap[index]
        if entry.dist > dist:
            entry.dist = dist
            self._sift_up(index)


class Dijkstra:
    """Shortest distances and paths from one start node."""

    def __init__(self, graph: ResNet):
        self.graph = graph
        self._distances: dict[str, float] = {}
        self._predecessors: dict[str, str] = {}

    def shortest_path(self, start: str) -> None:
        """Compute distances and predecessors from ``start``."""
        distances = {node.name: INF for node in self.graph.nodes}
        distances[start] = 0.0
        predecessors: dict[str, str] = {}

        heap = Heap()
        for node in self.graph.nodes:
            heap.insert(node.name, distances[node.name])

        while not heap.is_empty():
            current = heap.extract_min()
            if distances[current] == INF:
                break
            for neighbour, weight in self.graph.get_edges(current):
                alt = distances[current] + weight
                if alt < distances.get(neighbour, INF):
                    distances[neighbour] = alt
                    predecessors[neighbour] = current
                    heap.decrease_key(neighbour, alt)

        self._distances = distances
        self._predecessors = predecessors

    def get_distance(self, name: str) -> float:
        """Distance from the last start to ``name``; infinity if unreachable."""
        return self._distances.get(name, INF)

    def get_path(self, name: str) -> list[str]:
        """Nodes from the last start to ``name``; empty if unreachable."""
        if self._distances.get(name, INF) == INF:
            return []
        path = [name]
        current = name
        while current in self._predecessors:
            current = self._predecessors[current]
            path.append(current)
        path.reverse()
        return path