"""Weighted directed acyclic graphs with cycle rejection, shortest paths, path listing and an interactive console."""

__version__ = "0.1.0"
__all__ = ["color", "network", "dijkstra", "paths", "console", "cli"]