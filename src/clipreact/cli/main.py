"""
clip-react CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .. import __version__
from .commands import map as map_cmd


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-v", "--version", prog_name="clip-react")
def main():
    """clip-react: Dependency maps for React projects.

    Scans your JavaScript/TypeScript sources and writes an interactive
    graph of which files import which.

    \b
    Quick Start:
      clip-react map              # Starts the interactive directory selector
      clip-react map -d src       # Scan ./src directly
      clip-react --version        # Show installed version

    \b
    Thanks for using Clip!
      https://github.com/Clip-react/clip
    """
    pass


# Register commands
main.add_command(map_cmd.map_command)

if __name__ == "__main__":
    main()
