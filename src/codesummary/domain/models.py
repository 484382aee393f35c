from __future__ import annotations

"""
Domain Data Models.

Immutable value objects exchanged between the scanner, the network client and
the command layer. Nothing here outlives a single invocation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# FILESYSTEM MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryEntry:
    """
    One item returned by a directory listing.

    Attributes:
        name: Bare entry name (no path components).
        is_dir: True for real directories; symlinks are never directories.
        full_path: Path of the entry, joined onto the listed directory.
    """
    name: str
    is_dir: bool
    full_path: str

# -----------------------------------------------------------------------------
# REMOTE ANALYSIS MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of a single chat-completion request.

    A failed request (transport, HTTP status or response shape) has ok=False.
    A successful request may still carry empty content when the model
    answered with nothing.

    Attributes:
        ok: Whether a well-formed completion was received.
        content: Completion text, stripped. Empty on failure.
        error: Failure description. Empty on success.
        status_code: HTTP status when a response was received.
    """
    ok: bool
    content: str = ""
    error: str = ""
    status_code: Optional[int] = None


def analysis_failure(error: str, status_code: Optional[int] = None) -> AnalysisResult:
    """Build a failed AnalysisResult."""
    return AnalysisResult(ok=False, content="", error=error, status_code=status_code)

# -----------------------------------------------------------------------------
# COMMAND MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CommandResult:
    """
    Result of a generate/analyze run, rendered by the CLI.

    Attributes:
        ok: False when the command produced no output file.
        command: Command identifier ("generate" or "analyze").
        output_path: Absolute path of the written file, if any.
        error: Human readable reason when ok is False.
        summary: Execution statistics for reporting.
    """
    ok: bool
    command: str
    output_path: str = ""
    error: str = ""
    summary: Dict[str, Any] = field(default_factory=dict)
