"""
clip-react - Module dependency maps for JavaScript/TypeScript projects.

Scans a project subtree, resolves the import graph between its source
files and renders it as a self-contained interactive HTML page.

Key Components:
- parsing: File discovery and tree-sitter import extraction
- core: Data types and the dependency graph builder
- graph: HTML visualization emitter
- cli: The `clip-react` command line

Usage:
    from clipreact.core.graph import build_graph
    from clipreact.graph.visualize import generate_html

    graph = build_graph({"src/a.js": ["src/b.js"], "src/b.js": []})
    html = generate_html(graph)
"""

__version__ = "1.0.0"

from .core.types import DependencyGraph, FileNode, ImportEdge

__all__ = [
    "__version__",
    "DependencyGraph",
    "FileNode",
    "ImportEdge",
]
