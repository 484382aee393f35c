from __future__ import annotations

"""
Command Runners.

Implements the two user-facing workflows on top of the scanning, prompt and
network components:

- generate: render the project tree and save it to
  '<project>_directory_<timestamp>.txt';
- analyze: collect file contents and the tree, send them to the completion
  service and save the answer to '<project>_analysis_<timestamp>.txt'.

Each stage runs to completion before the next starts. Output files are
written once, after everything they contain is available.
"""

import logging
import os
from datetime import datetime
from typing import Any, Dict, Optional

from codesummary.core.project import (
    OUTPUT_KIND_ANALYSIS,
    OUTPUT_KIND_DIRECTORY,
    build_output_filename,
    get_project_name,
)
from codesummary.core.prompt import assemble_prompt, estimate_tokens
from codesummary.core.reader import load_file_records
from codesummary.core.scanner import collect_files
from codesummary.core.tree import build_tree, count_tree_lines
from codesummary.domain.config import ApiSettings, AppConfig
from codesummary.domain.models import CommandResult
from codesummary.infra.fs import write_output
from codesummary.infra.network import OpenRouterClient

logger = logging.getLogger(__name__)

COMMAND_GENERATE = "generate"
COMMAND_ANALYZE = "analyze"

# -----------------------------------------------------------------------------
# GENERATE
# -----------------------------------------------------------------------------

def run_generate(config: AppConfig, now: Optional[datetime] = None) -> CommandResult:
    """
    Write the directory tree of the configured root.

    Args:
        config: Scanning and output settings.
        now: Timestamp for the output name; defaults to the current time.

    Returns:
        CommandResult: ok=False only when the output file could not be written.
    """
    logger.info("=== Directory Tree Generation Started ===")

    project_name = get_project_name(config.root_path)
    output_path = os.path.join(
        config.output_dir, build_output_filename(project_name, OUTPUT_KIND_DIRECTORY, now)
    )
    logger.info(f"Project Name: {project_name}")
    logger.info(f"Generating directory tree at: {output_path}")

    tree = build_tree(config.root_path, config.exclude_rules)
    summary: Dict[str, Any] = {
        "project_name": project_name,
        "tree_lines": count_tree_lines(tree),
    }

    if not write_output(output_path, tree):
        logger.info("=== Directory Tree Generation Completed ===")
        return CommandResult(
            ok=False,
            command=COMMAND_GENERATE,
            error=f"Failed to write directory tree to {output_path}",
            summary=summary,
        )

    logger.info(f"Directory tree has been saved to {os.path.basename(output_path)}")
    logger.info("=== Directory Tree Generation Completed ===")
    return CommandResult(ok=True, command=COMMAND_GENERATE, output_path=output_path, summary=summary)

# -----------------------------------------------------------------------------
# ANALYZE
# -----------------------------------------------------------------------------

def run_analyze(
        config: AppConfig,
        settings: ApiSettings,
        client: Optional[OpenRouterClient] = None,
        now: Optional[datetime] = None,
) -> CommandResult:
    """
    Collect the project files, request an analysis and save the report.

    Nothing is sent when no file could be collected. The report is written
    only if the completion service returned non-empty text.

    Args:
        config: Scanning and output settings.
        settings: OpenRouter connection settings.
        client: Client to use; built from settings when omitted.
        now: Timestamp for the output name; defaults to the current time.

    Returns:
        CommandResult: ok=True when the report file was written.
    """
    logger.info("=== Codebase Analysis Started ===")

    project_name = get_project_name(config.root_path)
    output_path = os.path.join(
        config.output_dir, build_output_filename(project_name, OUTPUT_KIND_ANALYSIS, now)
    )
    logger.info(f"Project Name: {project_name}")

    # 1. Collection
    logger.info("Collecting files for analysis...")
    file_paths = collect_files(config.root_path, config.exclude_rules)
    logger.info(f"Total files to analyze: {len(file_paths)}")

    records = load_file_records(file_paths, config.root_path, config.max_file_bytes)
    summary: Dict[str, Any] = {
        "project_name": project_name,
        "files_found": len(file_paths),
        "files_collected": len(records),
        "files_skipped": len(file_paths) - len(records),
    }

    if not records:
        logger.error("No files available for analysis.")
        logger.info("=== Codebase Analysis Aborted ===")
        return CommandResult(
            ok=False,
            command=COMMAND_ANALYZE,
            error="No files available for analysis.",
            summary=summary,
        )

    # 2. Prompt assembly
    logger.info("Generating directory tree to include in analysis...")
    tree = build_tree(config.root_path, config.exclude_rules)
    prompt = assemble_prompt(project_name, tree, records)
    summary["prompt_chars"] = len(prompt)
    summary["prompt_tokens_estimate"] = estimate_tokens(prompt)
    logger.info(
        f"Prompt assembled: {len(prompt):,} characters (~{summary['prompt_tokens_estimate']:,} tokens)."
    )

    # 3. Remote analysis
    logger.info(
        "Sending data to OpenRouter for analysis. "
        "This may take some time depending on the size of the codebase..."
    )
    analysis = (client or OpenRouterClient(settings)).complete(prompt)

    if not analysis.content:
        reason = analysis.error or "The model returned an empty response."
        logger.error(f"No analysis was received from OpenRouter. {reason}")
        logger.info("=== Codebase Analysis Completed ===")
        return CommandResult(ok=False, command=COMMAND_ANALYZE, error=reason, summary=summary)

    # 4. Persistence
    if not write_output(output_path, analysis.content):
        logger.info("=== Codebase Analysis Completed ===")
        return CommandResult(
            ok=False,
            command=COMMAND_ANALYZE,
            error=f"Failed to write analysis to {output_path}",
            summary=summary,
        )

    logger.info(f"Analysis has been saved to {os.path.basename(output_path)}")
    logger.info("=== Codebase Analysis Completed ===")
    return CommandResult(ok=True, command=COMMAND_ANALYZE, output_path=output_path, summary=summary)
