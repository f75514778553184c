"""
Core type definitions for clip-react.

Nodes and edges are serialized verbatim into the HTML map, so field names
here are the names the browser-side code reads.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

# A forward-slash, project-relative file path ("src/app/App.tsx")
FilePath = str

# File -> files it imports, in import-statement order
AdjacencyMap = Dict[FilePath, List[FilePath]]

# File -> files that import it
DependentsMap = Dict[FilePath, List[FilePath]]


class FileNode(BaseModel):
    """
    One scanned source file in the dependency graph.
    """
    id: FilePath
    label: str
    title: str
    size: int = 0
    dependencies: List[FilePath] = Field(default_factory=list)
    dependents: List[FilePath] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class ImportEdge(BaseModel):
    """
    Directed import relationship between two files.

    Serialized with the `from`/`to` keys the graph renderer expects.
    """
    source: FilePath = Field(alias="from")
    target: FilePath = Field(alias="to")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


class DependencyGraph(BaseModel):
    """
    Nodes and edges of a scanned project, ready for rendering.
    """
    nodes: List[FileNode] = Field(default_factory=list)
    edges: List[ImportEdge] = Field(default_factory=list)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def get_node(self, node_id: FilePath) -> FileNode | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def dangling_edges(self) -> List[ImportEdge]:
        """Edges whose target was imported but not part of the scanned set."""
        node_ids = {n.id for n in self.nodes}
        return [e for e in self.edges if e.target not in node_ids]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.model_dump() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }
