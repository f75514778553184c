"""
Directory Selector - choose which project subtree to map.

Offers the conventional React directories that exist in the project, plus
a free-text fallback that keeps asking until an existing directory is given.
"""

import logging
from pathlib import Path
from typing import List

from rich.console import Console
from rich.prompt import Prompt

from ..config import CANDIDATE_DIRECTORIES, DEFAULT_CUSTOM_DIRECTORY

logger = logging.getLogger(__name__)
console = Console()


def detect_available_directories(
    root_dir: Path | None = None,
    candidates: List[str] | None = None,
) -> List[str]:
    """
    Return the candidate directories that exist under `root_dir`, in order.
    """
    root_dir = root_dir or Path.cwd()
    candidates = CANDIDATE_DIRECTORIES if candidates is None else candidates
    return [name for name in candidates if (root_dir / name).is_dir()]


def validate_directory(value: str, root_dir: Path) -> str | None:
    """
    Check a user-supplied path.

    Returns:
        str | None: An error message, or None when the path is acceptable.
    """
    if not value or not value.strip():
        return "Please enter a valid path."
    if not (root_dir / value.strip()).is_dir():
        return f'The directory "{value}" does not exist. Please enter a valid path.'
    return None


def prompt_custom_directory(root_dir: Path) -> str:
    """Ask for a path until an existing directory is entered."""
    while True:
        value = Prompt.ask("📝 Enter the directory path", default=DEFAULT_CUSTOM_DIRECTORY)
        error = validate_directory(value, root_dir)
        if error is None:
            return value.strip()
        console.print(f"[red]{error}[/red]")


def prompt_directory_selection(
    root_dir: Path | None = None,
    candidates: List[str] | None = None,
) -> str:
    """
    Interactively select the directory to analyze.

    Args:
        root_dir (Path | None): Project root. Defaults to the current directory.
        candidates (List[str] | None): Directories to look for.

    Returns:
        str: A path relative to `root_dir` that exists as a directory.
    """
    root_dir = root_dir or Path.cwd()

    console.print("\n[bold cyan]📎 Clip-React Map Generator[/bold cyan]")
    console.print("[dim]═══════════════════════════════════════════════[/dim]\n")

    available = detect_available_directories(root_dir, candidates)

    if not available:
        console.print("[yellow]⚠️  No common React directories detected[/yellow]")
        console.print("[dim]    Please specify the path manually[/dim]\n")
        return prompt_custom_directory(root_dir)

    noun = "directory" if len(available) == 1 else "directories"
    console.print(f"[dim]✓ {len(available)} {noun} detected[/dim]\n")

    for i, name in enumerate(available, start=1):
        console.print(f"  [cyan]{i}[/cyan]) {name}/  [dim](detected in your project)[/dim]")
    custom_key = str(len(available) + 1)
    console.print(f"  [cyan]{custom_key}[/cyan]) [yellow]Other directory (specify path)[/yellow]\n")

    choices = [str(i) for i in range(1, len(available) + 2)]
    answer = Prompt.ask("📂 Select the directory to analyze", choices=choices, default="1")

    if answer == custom_key:
        return prompt_custom_directory(root_dir)

    selected = available[int(answer) - 1]
    logger.debug(f"Selected directory: {selected}")
    return selected
