from __future__ import annotations

"""
Project Metadata and Output Naming.

Resolves the project's display name and the timestamped names of the files
produced by the generate and analyze commands.
"""

import json
import logging
import os
from datetime import datetime
from typing import Optional

from codesummary.domain.constants import PROJECT_MANIFEST, TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)

OUTPUT_KIND_DIRECTORY = "directory"
OUTPUT_KIND_ANALYSIS = "analysis"

# -----------------------------------------------------------------------------
# PROJECT NAME RESOLUTION
# -----------------------------------------------------------------------------

def get_project_name(root_path: str) -> str:
    """
    Read the project name from package.json, or fall back to the folder name.

    Args:
        root_path: Project root directory.

    Returns:
        str: The manifest 'name' field when present and non-empty, otherwise
             the base name of root_path.
    """
    fallback = os.path.basename(os.path.normpath(os.path.abspath(root_path)))
    manifest_path = os.path.join(root_path, PROJECT_MANIFEST)

    if not os.path.isfile(manifest_path):
        logger.warning(f"{PROJECT_MANIFEST} not found. Using folder name '{fallback}' as project name.")
        return fallback

    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(
            f"Could not parse {PROJECT_MANIFEST} ({e}). Using folder name '{fallback}' as project name."
        )
        return fallback

    name = data.get("name") if isinstance(data, dict) else None
    if isinstance(name, str) and name.strip():
        return name.strip()

    logger.warning(f'"name" field not found in {PROJECT_MANIFEST}. Using folder name \'{fallback}\' as project name.')
    return fallback

# -----------------------------------------------------------------------------
# OUTPUT NAMING
# -----------------------------------------------------------------------------

def format_timestamp(now: Optional[datetime] = None) -> str:
    """Format a moment as YYYYMMDD_HHMMSS (defaults to the current local time)."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def build_output_filename(project_name: str, kind: str, now: Optional[datetime] = None) -> str:
    """
    Compose '<project>_<kind>_<timestamp>.txt'.

    Path separators in the project name (scoped npm names such as
    '@scope/pkg') are replaced with underscores.

    Args:
        project_name: Resolved project name.
        kind: OUTPUT_KIND_DIRECTORY or OUTPUT_KIND_ANALYSIS.
        now: Moment to stamp; defaults to the current time.

    Returns:
        str: Bare file name.
    """
    safe_name = project_name.replace("/", "_").replace("\\", "_")
    return f"{safe_name}_{kind}_{format_timestamp(now)}.txt"
