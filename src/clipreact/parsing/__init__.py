"""
Parsing module for clip-react.

Converts a project subtree into an adjacency map of file imports.

Key Components:
- discover_files: Glob-style source file discovery
- LanguageParser: Abstract base class for language-specific parsers
- ParserEngine: Runs parsers and resolves specifiers to project files

Usage:
    from clipreact.parsing import create_default_engine, discover_files

    files = discover_files("src")
    result = create_default_engine().analyze(files)
    adjacency = result.unwrap().adjacency
"""

from .base import ImportKind, ImportStatement, LanguageParser, ParserContext, ParseResult
from .engine import (
    ExtractionResult,
    ParserEngine,
    ScanConfig,
    ScanError,
    ScanStats,
    create_default_engine,
    discover_files,
)

__all__ = [
    "ExtractionResult",
    "ImportKind",
    "ImportStatement",
    "LanguageParser",
    "ParseResult",
    "ParserContext",
    "ParserEngine",
    "ScanConfig",
    "ScanError",
    "ScanStats",
    "create_default_engine",
    "discover_files",
]
