from .analysis import connected_components, degree_centrality, welsh_powell_coloring
from .engine import GraphAlgorithmsEngine, UnknownAlgorithmError
from .models import DegreeEntry, PathResult
from .shortest_path import astar, dijkstra
from .traversal import bfs, dfs

__all__ = [
    "DegreeEntry",
    "GraphAlgorithmsEngine",
    "PathResult",
    "UnknownAlgorithmError",
    "astar",
    "bfs",
    "connected_components",
    "degree_centrality",
    "dfs",
    "dijkstra",
    "welsh_powell_coloring",
]
