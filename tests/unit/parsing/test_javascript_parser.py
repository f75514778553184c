"""
Unit tests for the JavaScript/TypeScript import extractor.

Parses real source snippets with tree-sitter and checks which specifiers
come out, in which order and with which import kind.
"""

from pathlib import Path

import pytest

from clipreact.parsing.base import ImportKind, ImportStatement
from clipreact.parsing.javascript import JavaScriptParser


@pytest.fixture
def parser():
    return JavaScriptParser()


def specifiers(parser, source: str, filename: str = "app.js"):
    return [s.specifier for s in parser.extract_imports(Path(filename), source.encode("utf-8"))]


class TestESModules:
    def test_default_and_named_imports(self, parser):
        source = (
            'import React from "react";\n'
            "import { useState } from 'react';\n"
            'import Button from "./components/Button";\n'
        )
        assert specifiers(parser, source) == ["react", "react", "./components/Button"]

    def test_side_effect_import_kind(self, parser):
        statements = list(parser.extract_imports(Path("index.js"), b'import "./styles.css";\n'))

        assert statements == [ImportStatement("./styles.css", ImportKind.SIDE_EFFECT, 1)]

    def test_import_kind_and_line(self, parser):
        source = b"\n\nimport x from './x';\n"
        statements = list(parser.extract_imports(Path("a.js"), source))

        assert statements[0].kind == ImportKind.ES_IMPORT
        assert statements[0].line == 3

    def test_re_exports(self, parser):
        source = (
            "export { default as Card } from './Card';\n"
            "export * from './hooks';\n"
            "export const local = 1;\n"
        )
        statements = list(parser.extract_imports(Path("index.js"), source.encode()))

        assert [s.specifier for s in statements] == ["./Card", "./hooks"]
        assert all(s.kind == ImportKind.RE_EXPORT for s in statements)

    def test_repeated_imports_are_all_reported(self, parser):
        source = (
            "import { a } from './utils';\n"
            "import { b } from './utils';\n"
        )
        assert specifiers(parser, source) == ["./utils", "./utils"]


class TestCommonJSAndDynamic:
    def test_require(self, parser):
        source = "const path = require('path');\nconst db = require('./db');\n"
        statements = list(parser.extract_imports(Path("server.js"), source.encode()))

        assert [s.specifier for s in statements] == ["path", "./db"]
        assert statements[1].kind == ImportKind.REQUIRE

    def test_dynamic_import(self, parser):
        source = "const Page = React.lazy(() => import('./pages/Home'));\n"
        statements = list(parser.extract_imports(Path("routes.jsx"), source.encode()))

        assert len(statements) == 1
        assert statements[0].specifier == "./pages/Home"
        assert statements[0].kind == ImportKind.DYNAMIC

    def test_non_literal_specifiers_are_skipped(self, parser):
        source = (
            "const name = './a';\n"
            "require(name);\n"
            "import(`./pages/${page}`);\n"
        )
        assert specifiers(parser, source) == []

    def test_template_literal_without_substitution(self, parser):
        assert specifiers(parser, "require(`./config`);\n") == ["./config"]

    def test_other_calls_are_ignored(self, parser):
        assert specifiers(parser, "load('./not-an-import');\nfoo.require('./x');\n") == []


class TestTypeScript:
    def test_type_only_imports_count(self, parser):
        source = (
            "import type { User } from './types';\n"
            "import { api } from '../api';\n"
        )
        assert specifiers(parser, source, "service.ts") == ["./types", "../api"]

    def test_import_equals_require(self, parser):
        statements = list(parser.extract_imports(Path("legacy.ts"), b"import fs = require('./fs-shim');\n"))

        assert [s.specifier for s in statements] == ["./fs-shim"]
        assert statements[0].kind == ImportKind.IMPORT_REQUIRE

    def test_tsx_with_generics_and_jsx(self, parser):
        source = (
            "import { Header } from './Header';\n"
            "export function App<T,>(props: { items: T[] }) {\n"
            "  return <Header title=\"x\" />;\n"
            "}\n"
        )
        assert specifiers(parser, source, "App.tsx") == ["./Header"]

    def test_jsx_in_js_file(self, parser):
        source = "import Card from './Card';\nexport default () => <Card />;\n"
        assert specifiers(parser, source, "List.jsx") == ["./Card"]


class TestParseFull:
    def test_reads_file_from_disk(self, parser, tmp_path):
        f = tmp_path / "main.ts"
        f.write_text("import { x } from './x';\n")

        result = parser.parse_full(f)

        assert result.success
        assert [s.specifier for s in result.imports] == ["./x"]

    def test_missing_file_is_reported_not_raised(self, parser, tmp_path):
        result = parser.parse_full(tmp_path / "missing.js")

        assert not result.success
        assert result.errors

    def test_can_parse(self, parser):
        assert parser.can_parse(Path("a.TSX"))
        assert parser.can_parse(Path("b.mjs"))
        assert not parser.can_parse(Path("c.css"))
