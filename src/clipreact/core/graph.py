"""
Dependency Graph Builder.

Turns the adjacency map produced by the analysis engine into the node and
edge collections rendered by the visualizer:

1. Normalize path separators so every key is a forward-slash FilePath.
2. Invert the adjacency map into a dependents map.
3. Assemble one FileNode per scanned file and one ImportEdge per import.

Cycles are valid and kept as-is. Repeated imports between the same pair of
files are kept as repeated edges so edge multiplicity follows the number of
import statements.
"""

import logging
import posixpath
from pathlib import Path
from typing import Callable, List

from .types import AdjacencyMap, DependencyGraph, DependentsMap, FileNode, FilePath, ImportEdge

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> FilePath:
    """Replace Windows separators with forward slashes."""
    return path.replace("\\", "/")


def normalize_adjacency(adjacency: AdjacencyMap) -> AdjacencyMap:
    """Normalize every key and dependency path, preserving order."""
    return {
        normalize_path(key): [normalize_path(dep) for dep in deps]
        for key, deps in adjacency.items()
    }


def file_size(path: FilePath) -> int:
    """Size in bytes of a file relative to the current directory."""
    return Path(path).stat().st_size


def build_dependents_map(adjacency: AdjacencyMap) -> DependentsMap:
    """
    Compute the reverse of the adjacency map.

    Every key starts with an empty list. Imports whose target is not a key
    (files outside the scanned set) are not tracked.

    Args:
        adjacency (AdjacencyMap): File -> files it imports.

    Returns:
        DependentsMap: File -> files importing it, in discovery order.
    """
    dependents: DependentsMap = {file: [] for file in adjacency}
    for from_file, deps in adjacency.items():
        for to_file in deps:
            if to_file in dependents:
                dependents[to_file].append(from_file)
    return dependents


def build_edges(adjacency: AdjacencyMap) -> List[ImportEdge]:
    return [
        ImportEdge(source=from_file, target=to_file)
        for from_file, deps in adjacency.items()
        for to_file in deps
    ]


def _safe_size(path: FilePath, size_of: Callable[[FilePath], int]) -> int:
    try:
        return size_of(path)
    except OSError as e:
        # File vanished or became unreadable between scan and build
        logger.warning(f"Could not read size of {path}: {e}")
        return 0


def build_graph(
    adjacency: AdjacencyMap,
    size_of: Callable[[FilePath], int] = file_size,
) -> DependencyGraph:
    """
    Build the renderable dependency graph.

    Args:
        adjacency (AdjacencyMap): File -> imported files. Keys are the scanned
            file set; values may reference files outside it.
        size_of (Callable): Returns the byte size of a file. An OSError
            raised for one file gives that node a size of 0.

    Returns:
        DependencyGraph: One node per key and one edge per (file, import) pair.
    """
    adjacency = normalize_adjacency(adjacency)
    dependents = build_dependents_map(adjacency)

    nodes = [
        FileNode(
            id=file,
            label=posixpath.basename(file),
            title=file,
            size=_safe_size(file, size_of),
            dependencies=list(deps),
            dependents=dependents[file],
        )
        for file, deps in adjacency.items()
    ]
    edges = build_edges(adjacency)

    logger.debug(f"Built graph with {len(nodes)} nodes and {len(edges)} edges")
    return DependencyGraph(nodes=nodes, edges=edges)
