from __future__ import annotations

"""
Domain Constants.

Centralizes the static values shared by the scanner, the prompt builder and
the OpenRouter client: versioning, endpoint, default model and the canonical
exclusion policy.
"""

from typing import List

APP_NAME = "codesummary"
APP_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# REMOTE COMPLETION SERVICE
# -----------------------------------------------------------------------------

OPENROUTER_API_URL = "https://openrouter.ai/api/v1/chat/completions"
DEFAULT_MODEL = "google/gemini-pro-1.5-exp"
DEFAULT_REQUEST_TIMEOUT = 300.0

ENV_API_KEY = "OPENROUTER_API_KEY"
ENV_SITE_URL = "YOUR_SITE_URL"
ENV_SITE_NAME = "YOUR_SITE_NAME"
ENV_MODEL = "OPENROUTER_MODEL"
ENV_TIMEOUT = "OPENROUTER_TIMEOUT"

# -----------------------------------------------------------------------------
# SCANNING AND OUTPUT
# -----------------------------------------------------------------------------

DEFAULT_MAX_FILE_BYTES = 1_000_000
PROJECT_MANIFEST = "package.json"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

DEFAULT_EXCLUDE_RULES: List[str] = [
    "node_modules",
    ".git",
    "dist",
    "build",
    "coverage",
    ".vscode",
    "*.log",
    "*.tmp",
    "package-lock.json",
    "yarn.lock",
]
