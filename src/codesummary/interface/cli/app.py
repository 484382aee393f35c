from __future__ import annotations

"""
Command Line Interface Controller.

Runs the CLI lifecycle: argument parsing, logging bootstrap, environment and
configuration resolution, command execution and the final human-readable
summary. Returns process exit codes instead of exiting, so it can be driven
directly from tests.
"""

import os
import sys
from typing import List, Optional

from codesummary.core.commands import COMMAND_ANALYZE, run_analyze, run_generate
from codesummary.domain.config import (
    ConfigurationError,
    build_api_settings,
    build_app_config,
    load_env_file,
)
from codesummary.domain.models import CommandResult
from codesummary.infra.logging import LoggingConfig, configure_logging, get_logger
from codesummary.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments without the program name.
              Defaults to sys.argv[1:].

    Returns:
        int: 0 on completion (including an empty analysis), 1 on a missing
             credential or unexpected failure, 130 when interrupted.
    """
    # 1. Argument parsing (argparse exits with 2 on usage errors)
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True))

    # 3. Environment and configuration
    cwd = os.getcwd()
    load_env_file(cwd)
    try:
        settings = build_api_settings()
    except ConfigurationError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    config = build_app_config(root_path=cwd, output_dir=cwd)
    logger.debug(f"Resolved configuration: {config} {settings!r}")

    # 4. Command execution
    try:
        if args.command == COMMAND_ANALYZE:
            result = run_analyze(config, settings)
        else:
            result = run_generate(config)
    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Unexpected failure while running '{args.command}': {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 5. Output rendering
    _print_human_summary(result)
    return EXIT_OK

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_human_summary(result: CommandResult) -> None:
    """Print the outcome of a command to stdout (failures to stderr)."""
    if not result.ok:
        print(f"No output produced: {result.error}", file=sys.stderr)
        return

    print(f"Saved: {result.output_path}")

    labels = {
        "tree_lines": "Tree entries",
        "files_collected": "Files analyzed",
        "files_skipped": "Files skipped",
        "prompt_tokens_estimate": "Estimated prompt tokens",
    }
    for key, label in labels.items():
        if key in result.summary:
            value = result.summary[key]
            print(f"{label}: {value:,}" if isinstance(value, int) else f"{label}: {value}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
