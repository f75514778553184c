"""
Map Command - Scan a project and write the interactive dependency map.

Pipeline:
1. Select the directory to scan (interactive unless --directory is given)
2. Discover JS/TS source files
3. Extract and resolve imports into an adjacency map
4. Build nodes, edges and dependents
5. Print the summary table and write clipMap.html
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from ...config import ClipConfig, load_config
from ...core.graph import build_graph
from ...graph.visualize import write_visualization
from ...parsing.engine import ScanConfig, create_default_engine, discover_files
from ..selector import prompt_directory_selection
from ..utils import (
    MapSummary,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    render_summary_table,
)

logger = logging.getLogger(__name__)
console = Console()


def generate_map(
    directory: str,
    config: ClipConfig,
    open_browser: bool = False,
    verbose: bool = False,
) -> MapSummary | None:
    """
    Run the scan/analyze/render pipeline for `directory`.

    Returns:
        MapSummary | None: Counts for the run, or None when no source
        files were found (nothing is written in that case).
    """
    root_dir = Path.cwd()
    scan_target = f"the directory '{directory}'"
    scan_config = ScanConfig.from_config(config, root_dir)

    with console.status("[cyan]Searching for compatible files...[/cyan]"):
        files = discover_files(directory, scan_config)

    if not files:
        echo_warning(f"No compatible files found in {scan_target}.")
        echo_info("Make sure to run this command at the root of your project.")
        return None

    with console.status(f"[cyan]Analyzing dependencies of {len(files)} files...[/cyan]"):
        engine = create_default_engine(root_dir)
        result = engine.analyze(files)

    if result.is_err():
        error = result.unwrap_err()
        raise error.cause or Exception(error.message)

    extraction = result.unwrap()

    with console.status("[cyan]Calculating graph relationships...[/cyan]"):
        graph = build_graph(extraction.adjacency)

    echo_success("Dependency analysis complete")

    if verbose:
        stats = extraction.stats
        echo_info(
            f"{stats.imports_found} imports: {stats.imports_resolved} resolved, "
            f"{stats.imports_external} packages, {stats.imports_unresolved} unresolved"
        )
        for entry in extraction.skipped:
            echo_info(f"unresolved: {entry}")

    summary = MapSummary(
        files_analyzed=len(files),
        relationships_found=graph.edge_count,
        nodes_in_graph=graph.node_count,
    )
    console.print()
    console.print(render_summary_table(summary))
    console.print()

    with console.status("[cyan]Generating visual map...[/cyan]"):
        output_path = write_visualization(graph, config.output_file, open_browser=open_browser)

    summary.output_path = str(output_path)
    echo_success(f"Map generated! Open {click.style(str(output_path), bold=True, underline=True)} in your browser.")
    return summary


@click.command("map")
@click.option(
    "-d",
    "--directory",
    type=click.Path(exists=True, file_okay=False),
    help="Directory to scan (skips the interactive selector)",
)
@click.option("--open", "open_browser", is_flag=True, help="Open the map in your browser when done")
@click.option("--verbose", is_flag=True, help="Show detailed output")
def map_command(directory: str | None, open_browser: bool, verbose: bool):
    """
    Generate an interactive dependency map (clipMap.html).

    \b
    Examples:
      clip-react map                 # Pick a directory interactively
      clip-react map -d src --open   # Scan ./src and open the result
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="[%X]",
    )

    failed = False
    try:
        config = load_config(Path.cwd())
        if directory is None:
            directory = prompt_directory_selection(Path.cwd(), config.candidate_directories)
        generate_map(directory, config, open_browser=open_browser, verbose=verbose)
    except Exception:
        echo_error("An unexpected error occurred:")
        console.print_exception()
        failed = True

    if failed:
        sys.exit(1)
