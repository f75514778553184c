"""Unit tests for core graph types."""

import pytest
from pydantic import ValidationError

from clipreact.core.result import Err, Ok
from clipreact.core.types import DependencyGraph, FileNode, ImportEdge


class TestImportEdge:
    def test_accepts_aliases(self):
        edge = ImportEdge(**{"from": "a.js", "to": "b.js"})
        assert edge.source == "a.js"
        assert edge.target == "b.js"

    def test_serializes_with_renderer_keys(self):
        edge = ImportEdge(source="a.js", target="b.js")
        assert edge.to_dict() == {"from": "a.js", "to": "b.js"}


class TestFileNode:
    def test_is_immutable(self):
        node = FileNode(id="a.js", label="a.js", title="a.js")
        with pytest.raises(ValidationError):
            node.size = 10


class TestDependencyGraph:
    def test_to_dict(self):
        graph = DependencyGraph(
            nodes=[FileNode(id="a.js", label="a.js", title="a.js", size=3, dependencies=["b.js"])],
            edges=[ImportEdge(source="a.js", target="b.js")],
        )
        data = graph.to_dict()

        assert data["nodes"] == [{
            "id": "a.js",
            "label": "a.js",
            "title": "a.js",
            "size": 3,
            "dependencies": ["b.js"],
            "dependents": [],
        }]
        assert data["edges"] == [{"from": "a.js", "to": "b.js"}]

    def test_get_node_missing(self):
        assert DependencyGraph().get_node("nope.js") is None


class TestResult:
    def test_ok(self):
        result = Ok(5)
        assert result.is_ok()
        assert not result.is_err()
        assert result.unwrap() == 5

    def test_err(self):
        result = Err("boom")
        assert result.is_err()
        assert result.unwrap_err() == "boom"
        with pytest.raises(ValueError, match="boom"):
            result.unwrap()
