"""
Parser Engine for clip-react.

Discovers the source files of a project subtree and turns them into an
adjacency map (file -> imported project files). Extraction failures are
returned as Err values rather than raised, so the command reports them in
one place.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Set

from ..config import IGNORE_DIRECTORIES, SOURCE_EXTENSIONS, ClipConfig
from ..core.result import Err, Ok, Result
from ..core.types import AdjacencyMap, FilePath
from .base import LanguageParser, ParserContext
from .javascript.resolver import ModuleResolver, to_file_path

logger = logging.getLogger(__name__)


@dataclass
class ScanConfig:
    root_dir: Path = field(default_factory=lambda: Path.cwd())
    extensions: Set[str] = field(default_factory=lambda: SOURCE_EXTENSIONS.copy())
    skip_dirs: Set[str] = field(default_factory=lambda: IGNORE_DIRECTORIES.copy())
    follow_symlinks: bool = False

    @classmethod
    def from_config(cls, config: ClipConfig, root_dir: Path | None = None) -> "ScanConfig":
        return cls(
            root_dir=root_dir or Path.cwd(),
            extensions=config.normalized_extensions(),
            skip_dirs=set(config.ignore_directories),
        )

    def should_skip_dir(self, dir_name: str) -> bool:
        return dir_name in self.skip_dirs

    def matches(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.extensions


@dataclass
class ScanStats:
    files_analyzed: int = 0
    files_failed: int = 0
    imports_found: int = 0
    imports_resolved: int = 0
    imports_external: int = 0
    imports_unresolved: int = 0
    scan_time_ms: float = 0.0


@dataclass
class ScanError:
    """Structured error for scan operations."""
    message: str
    file_path: str | None = None
    cause: Exception | None = None


@dataclass
class ExtractionResult:
    adjacency: AdjacencyMap
    skipped: List[str] = field(default_factory=list)
    stats: ScanStats = field(default_factory=ScanStats)


def discover_files(directory: str | Path, config: ScanConfig | None = None) -> List[FilePath]:
    """
    Expand `<directory>/**/*.{js,jsx,ts,tsx}` into project-relative paths.

    Directories named in `config.skip_dirs` are pruned at any depth and
    extensions are compared case-insensitively.

    Args:
        directory (str | Path): Subtree to scan, relative to the root.
        config (ScanConfig | None): Discovery settings.

    Returns:
        List[FilePath]: Sorted forward-slash paths relative to the root.
    """
    config = config or ScanConfig()
    scan_root = config.root_dir / directory
    files: List[FilePath] = []

    for root, dirs, names in scan_root.walk(follow_symlinks=config.follow_symlinks):
        dirs[:] = sorted(d for d in dirs if not config.should_skip_dir(d))
        for name in names:
            path = root / name
            if config.matches(path):
                files.append(to_file_path(path, config.root_dir))

    files.sort()
    logger.debug(f"Discovered {len(files)} files under {scan_root}")
    return files


class ParserRegistry:
    """Registry for language parsers."""
    def __init__(self):
        self._parsers: Dict[str, LanguageParser] = {}
        self._extension_map: Dict[str, str] = {}

    def register(self, parser: LanguageParser) -> None:
        self._parsers[parser.name] = parser
        for ext in parser.extensions:
            self._extension_map[ext.lower()] = parser.name

    def get_parser_for_file(self, file_path: Path) -> LanguageParser | None:
        name = self._extension_map.get(file_path.suffix.lower())
        if name:
            return self._parsers.get(name)
        return None


class ParserEngine:
    """
    Central orchestrator for dependency extraction.
    Returns Result objects instead of raising exceptions.
    """

    def __init__(self, context: ParserContext | None = None):
        self._context = context or ParserContext()
        self._registry = ParserRegistry()
        self._resolver = ModuleResolver(self._context.root_dir)
        self._logger = logging.getLogger(f"{__name__}.ParserEngine")

    @property
    def registry(self) -> ParserRegistry:
        return self._registry

    def register(self, parser: LanguageParser) -> None:
        parser.context = self._context
        self._registry.register(parser)

    def analyze(
        self,
        files: List[FilePath],
        progress_callback: Callable[[FilePath, int, int], None] | None = None,
    ) -> Result[ExtractionResult, ScanError]:
        """
        Build the adjacency map for `files`.

        Keys follow the order of `files`. Each import statement that resolves
        to a project file contributes one entry, so repeated imports repeat.
        A file that cannot be read keeps an empty dependency list.

        Returns Ok(ExtractionResult) or Err(ScanError).
        """
        start_time = time.perf_counter()
        stats = ScanStats()
        adjacency: AdjacencyMap = {}
        skipped: List[str] = []
        current: FilePath | None = None

        try:
            for i, current in enumerate(files):
                if progress_callback:
                    progress_callback(current, i + 1, len(files))
                adjacency[current] = self._dependencies_of(current, stats, skipped)
        except Exception as e:
            return Err(ScanError(f"Dependency analysis failed: {e}", file_path=current, cause=e))

        stats.scan_time_ms = (time.perf_counter() - start_time) * 1000
        return Ok(ExtractionResult(adjacency=adjacency, skipped=skipped, stats=stats))

    def _dependencies_of(
        self, file: FilePath, stats: ScanStats, skipped: List[str]
    ) -> List[FilePath]:
        path = self._context.root_dir / file
        parser = self._registry.get_parser_for_file(path)
        if parser is None:
            self._logger.debug(f"No parser registered for {file}")
            return []

        result = parser.parse_full(path)
        stats.files_analyzed += 1
        if not result.success:
            self._logger.warning(f"Failed to read {file}: {'; '.join(result.errors)}")
            stats.files_failed += 1
            return []

        deps: List[FilePath] = []
        for statement in result.imports:
            stats.imports_found += 1
            if not statement.is_relative:
                stats.imports_external += 1
                continue
            target = self._resolver.resolve(file, statement.specifier)
            if target is None:
                stats.imports_unresolved += 1
                skipped.append(f"{file}:{statement.line} {statement.specifier}")
                continue
            stats.imports_resolved += 1
            deps.append(target)
        return deps


def create_default_engine(root_dir: Path | None = None) -> ParserEngine:
    from .javascript.parser import JavaScriptParser

    engine = ParserEngine(ParserContext(root_dir))
    engine.register(JavaScriptParser())
    return engine
