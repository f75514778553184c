"""
Base Parser Infrastructure.

Defines the shared types of the parsing system: the context handed to
parsers, the import records they produce and the abstract base every
language parser implements.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Generator, List

logger = logging.getLogger(__name__)


class ParserContext:
    """Context passed to parsers (project root and source encoding)."""

    def __init__(self, root_dir: Path | None = None):
        self.root_dir = root_dir or Path.cwd()
        self.encoding = "utf-8"


class ImportKind(StrEnum):
    """Syntactic form an import was written in."""
    ES_IMPORT = "es_import"
    SIDE_EFFECT = "side_effect"
    RE_EXPORT = "re_export"
    REQUIRE = "require"
    IMPORT_REQUIRE = "import_require"
    DYNAMIC = "dynamic"


@dataclass(frozen=True)
class ImportStatement:
    """One module specifier found in a source file."""
    specifier: str
    kind: ImportKind
    line: int

    @property
    def is_relative(self) -> bool:
        return self.specifier.startswith((".", "/"))


@dataclass
class ParseResult:
    """
    Standardized result object returned by parsers.

    `success` is False when the file could not be read or decoded.
    """
    file_path: Path
    imports: List[ImportStatement] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    success: bool = True

    def __post_init__(self):
        if self.errors:
            self.success = False


class LanguageParser(ABC):
    """
    Abstract Base Class for all language parsers.
    """

    def __init__(self, context: ParserContext | None = None):
        self.context = context or ParserContext()
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    def extensions(self) -> List[str]:
        return []

    def can_parse(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.extensions

    @abstractmethod
    def extract_imports(
        self, file_path: Path, content: bytes
    ) -> Generator[ImportStatement, None, None]:
        pass

    def parse_full(self, file_path: Path, content: bytes | None = None) -> ParseResult:
        """
        Read (if needed) and parse a file, wrapping the outcome in a ParseResult.

        Read failures are captured in `errors` instead of being raised.
        """
        try:
            if content is None:
                content = file_path.read_bytes()
        except OSError as e:
            return ParseResult(file_path=file_path, errors=[str(e)])

        return ParseResult(
            file_path=file_path,
            imports=list(self.extract_imports(file_path, content)),
        )
