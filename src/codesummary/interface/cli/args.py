from __future__ import annotations

"""
CLI Argument Definition.

Declares the command-line schema: two subcommands and the global diagnostic
flags. Paths, exclusions and the endpoint are not configurable from the
command line.
"""

import argparse

from codesummary.core.commands import COMMAND_ANALYZE, COMMAND_GENERATE
from codesummary.domain.constants import APP_NAME, APP_VERSION

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the codesummary CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Generate a directory tree or analyze the codebase of the current project.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    sub = p.add_subparsers(dest="command", metavar="{generate,analyze}")
    sub.required = True

    sub.add_parser(
        COMMAND_GENERATE,
        help="Generate a text-based directory tree of the current project.",
    )
    sub.add_parser(
        COMMAND_ANALYZE,
        help="Analyze the codebase by sending file contents to OpenRouter.",
    )

    return p
