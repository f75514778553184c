"""
Core modules for clip-react.

- types: Data structures (FileNode, ImportEdge, DependencyGraph)
- graph: Adjacency-map to graph transform
- result: Ok/Err values returned by the analysis engine
"""

from .graph import build_dependents_map, build_graph, normalize_adjacency, normalize_path
from .types import AdjacencyMap, DependencyGraph, DependentsMap, FileNode, ImportEdge

__all__ = [
    "AdjacencyMap", "DependentsMap", "DependencyGraph", "FileNode", "ImportEdge",
    "build_dependents_map", "build_graph", "normalize_adjacency", "normalize_path",
]
