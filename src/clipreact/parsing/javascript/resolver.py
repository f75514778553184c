"""
Module specifier resolution for JavaScript/TypeScript imports.

Maps a specifier written in a source file ("./utils", "../api/index.js")
to the project file it refers to, as a forward-slash path relative to the
project root. Package imports ("react", "@scope/pkg") are not project
files and resolve to None.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Iterator, List

from ...config import RESOLVE_EXTENSIONS, TS_EXTENSION_ALIASES
from ...core.types import FilePath

logger = logging.getLogger(__name__)


def to_file_path(path: Path, root_dir: Path) -> FilePath:
    """Express `path` relative to `root_dir` with forward slashes."""
    try:
        rel = os.path.relpath(path, root_dir)
    except ValueError:
        # Different drive on Windows: keep it absolute
        rel = str(path)
    return Path(rel).as_posix()


def strip_query(specifier: str) -> str:
    """Drop bundler query and fragment suffixes ("./logo.svg?react")."""
    for marker in ("?", "#"):
        index = specifier.find(marker)
        if index > 0:
            specifier = specifier[:index]
    return specifier


class ModuleResolver:
    """
    Resolve relative and absolute specifiers against the file system.

    Resolution order for a specifier `s` imported by file `f`:
    1. `dir(f)/s` if it is a file
    2. TypeScript alias: `./a.js` -> `./a.ts`, `./a.tsx`
    3. `dir(f)/s` + each of RESOLVE_EXTENSIONS
    4. `dir(f)/s/index` + each of RESOLVE_EXTENSIONS
    """

    def __init__(
        self,
        root_dir: Path | None = None,
        extensions: List[str] | None = None,
    ):
        self.root_dir = root_dir or Path.cwd()
        self.extensions = extensions or list(RESOLVE_EXTENSIONS)
        self._cache: Dict[Path, Path | None] = {}

    def resolve(self, importer: FilePath, specifier: str) -> FilePath | None:
        """
        Resolve `specifier` as written in `importer`.

        Args:
            importer (FilePath): Importing file, relative to the root.
            specifier (str): Module specifier from the import statement.

        Returns:
            FilePath | None: The imported file, or None for packages and
            specifiers that do not match any file.
        """
        if not specifier.startswith((".", "/")):
            return None

        cleaned = strip_query(specifier)
        if cleaned.startswith("/"):
            base = Path(cleaned)
        else:
            base = (self.root_dir / importer).parent / cleaned
        base = Path(os.path.normpath(base))

        if base not in self._cache:
            self._cache[base] = self._probe(base)

        found = self._cache[base]
        if found is None:
            logger.debug(f"Unresolved import '{specifier}' in {importer}")
            return None
        return to_file_path(found, self.root_dir)

    def _candidates(self, base: Path) -> Iterator[Path]:
        yield base
        for alias in TS_EXTENSION_ALIASES.get(base.suffix.lower(), []):
            yield base.with_suffix(alias)
        for ext in self.extensions:
            yield Path(f"{base}{ext}")
        for ext in self.extensions:
            yield base / f"index{ext}"

    def _probe(self, base: Path) -> Path | None:
        for candidate in self._candidates(base):
            if candidate.is_file():
                return candidate
        return None
