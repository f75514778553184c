"""
JavaScript/TypeScript Parser for clip-react.

Extracts module specifiers from JS/TS source files using tree-sitter.
Every import statement is reported, in source order, including repeated
imports of the same module.

Supported Import Patterns:
- import x from "./module"
- import "./module"
- import type { T } from "./types"
- export { x } from "./module" / export * from "./module"
- import x = require("./module")      (TypeScript)
- const x = require("./module")
- await import("./module")
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Generator, List

import tree_sitter_javascript as tsjavascript
import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Node, Parser

from ..base import ImportKind, ImportStatement, LanguageParser, ParserContext

logger = logging.getLogger(__name__)

# Grammar used for each file extension
GRAMMAR_BY_EXTENSION: Dict[str, str] = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

_GRAMMAR_LOADERS: Dict[str, Callable[[], object]] = {
    "javascript": tsjavascript.language,
    "typescript": tstypescript.language_typescript,
    "tsx": tstypescript.language_tsx,
}

# Node types that can hold a plain module specifier
_STRING_TYPES = ("string", "template_string")


def _walk(root: Node) -> Generator[Node, None, None]:
    """Pre-order traversal in document order, without recursion."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _string_value(node: Node | None) -> str | None:
    """Literal value of a string node, or None for anything dynamic."""
    if node is None or node.type not in _STRING_TYPES:
        return None
    if node.type == "template_string" and any(
        c.type == "template_substitution" for c in node.children
    ):
        return None
    text = node.text.decode("utf-8", errors="replace")
    return text[1:-1]


class JavaScriptParser(LanguageParser):
    """
    Tree-sitter based import extractor for JavaScript and TypeScript.

    Parsers are created lazily, one per grammar, and reused across files.
    """

    def __init__(self, context: ParserContext | None = None):
        super().__init__(context)
        self._parsers: Dict[str, Parser] = {}

    @property
    def name(self) -> str:
        return "javascript"

    @property
    def extensions(self) -> List[str]:
        return list(GRAMMAR_BY_EXTENSION)

    def _get_parser(self, file_path: Path) -> Parser:
        grammar = GRAMMAR_BY_EXTENSION.get(file_path.suffix.lower(), "javascript")
        parser = self._parsers.get(grammar)
        if parser is None:
            parser = Parser(Language(_GRAMMAR_LOADERS[grammar]()))
            self._parsers[grammar] = parser
            self._logger.debug(f"Initialized tree-sitter grammar: {grammar}")
        return parser

    def extract_imports(
        self,
        file_path: Path,
        content: bytes,
    ) -> Generator[ImportStatement, None, None]:
        """
        Parse a JavaScript/TypeScript file and yield its import statements.
        """
        tree = self._get_parser(file_path).parse(content)

        for node in _walk(tree.root_node):
            if node.type == "import_statement":
                yield from self._from_import_statement(node)
            elif node.type == "export_statement":
                specifier = _string_value(node.child_by_field_name("source"))
                if specifier is not None:
                    yield ImportStatement(specifier, ImportKind.RE_EXPORT, node.start_point[0] + 1)
            elif node.type == "call_expression":
                statement = self._from_call_expression(node)
                if statement is not None:
                    yield statement

    def _from_import_statement(self, node: Node) -> Generator[ImportStatement, None, None]:
        line = node.start_point[0] + 1
        specifier = _string_value(node.child_by_field_name("source"))

        if specifier is not None:
            has_clause = any(c.type == "import_clause" for c in node.children)
            kind = ImportKind.ES_IMPORT if has_clause else ImportKind.SIDE_EFFECT
            yield ImportStatement(specifier, kind, line)
            return

        # TypeScript: import x = require("./module")
        for child in node.children:
            if child.type == "import_require_clause":
                source = child.child_by_field_name("source") or next(
                    (c for c in child.named_children if c.type == "string"), None
                )
                specifier = _string_value(source)
                if specifier is not None:
                    yield ImportStatement(specifier, ImportKind.IMPORT_REQUIRE, line)

    def _from_call_expression(self, node: Node) -> ImportStatement | None:
        function = node.child_by_field_name("function")
        arguments = node.child_by_field_name("arguments")
        if function is None or arguments is None or not arguments.named_children:
            return None

        if function.type == "import":
            kind = ImportKind.DYNAMIC
        elif function.type == "identifier" and function.text == b"require":
            kind = ImportKind.REQUIRE
        else:
            return None

        specifier = _string_value(arguments.named_children[0])
        if specifier is None:
            self._logger.debug(f"Skipping non-literal {kind} at line {node.start_point[0] + 1}")
            return None
        return ImportStatement(specifier, kind, node.start_point[0] + 1)


def create_javascript_parser(context: ParserContext | None = None) -> JavaScriptParser:
    """Factory function to create a JavaScript parser."""
    return JavaScriptParser(context)
