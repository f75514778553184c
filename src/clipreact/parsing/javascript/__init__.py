"""
JavaScript/TypeScript parsing module for clip-react.

Provides:
- Import statement extraction (ES modules, CommonJS, dynamic imports)
- Specifier resolution to project files

Usage:
    from clipreact.parsing.javascript import JavaScriptParser, ModuleResolver

    parser = JavaScriptParser()
    result = parser.parse_full(Path("src/App.tsx"))
"""

from .parser import JavaScriptParser, create_javascript_parser
from .resolver import ModuleResolver

__all__ = [
    "JavaScriptParser",
    "ModuleResolver",
    "create_javascript_parser",
]
