from __future__ import annotations

"""
Network Communication Infrastructure.

Facade over the HTTP clients used by the command layer.
"""

from codesummary.infra.network.common import USER_AGENT
from codesummary.infra.network.openrouter_client import (
    OpenRouterClient,
    extract_completion_text,
    request_analysis,
)

__all__ = [
    "OpenRouterClient",
    "extract_completion_text",
    "request_analysis",
    "USER_AGENT",
]
