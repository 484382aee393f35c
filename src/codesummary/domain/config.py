from __future__ import annotations

"""
Runtime Configuration.

Builds the immutable configuration values used by every component. The values
are resolved once at startup from the environment (after loading an optional
.env file) and then passed explicitly, so tests can supply alternate exclusion
sets, paths or endpoints without touching process state.
"""

import logging
import math
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from dotenv import load_dotenv

from codesummary.domain.constants import (
    DEFAULT_EXCLUDE_RULES,
    DEFAULT_MAX_FILE_BYTES,
    DEFAULT_MODEL,
    DEFAULT_REQUEST_TIMEOUT,
    ENV_API_KEY,
    ENV_MODEL,
    ENV_SITE_NAME,
    ENV_SITE_URL,
    ENV_TIMEOUT,
    OPENROUTER_API_URL,
)

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a required setting is missing or unusable."""

# -----------------------------------------------------------------------------
# CONFIGURATION MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AppConfig:
    """
    Scanning and output settings for one run.

    Attributes:
        root_path: Project directory to walk.
        output_dir: Directory receiving the generated text files.
        exclude_rules: Literal names or '*<suffix>' patterns to skip.
        max_file_bytes: Files larger than this are left out of the prompt.
    """
    root_path: str
    output_dir: str
    exclude_rules: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_RULES))
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES


@dataclass(frozen=True)
class ApiSettings:
    """
    Connection settings for the OpenRouter chat-completion endpoint.

    Attributes:
        api_key: Bearer credential.
        api_url: Completion endpoint.
        model: Model identifier sent in the request body.
        site_url: Optional value for the HTTP-Referer header.
        site_name: Optional value for the X-Title header.
        timeout: Seconds to wait for the whole request.
    """
    api_key: str
    api_url: str = OPENROUTER_API_URL
    model: str = DEFAULT_MODEL
    site_url: str = ""
    site_name: str = ""
    timeout: float = DEFAULT_REQUEST_TIMEOUT

    def __repr__(self) -> str:
        return (
            f"ApiSettings(api_url={self.api_url!r}, model={self.model!r}, "
            f"site_url={self.site_url!r}, site_name={self.site_name!r}, "
            f"timeout={self.timeout!r}, api_key='***')"
        )

# -----------------------------------------------------------------------------
# BUILDERS
# -----------------------------------------------------------------------------

def load_env_file(directory: str) -> bool:
    """
    Load '<directory>/.env' into the process environment.

    Variables that are already set keep their value.

    Returns:
        bool: True if a .env file was found and loaded.
    """
    env_path = os.path.join(directory, ".env")
    if not os.path.isfile(env_path):
        return False
    loaded = load_dotenv(env_path, override=False)
    logger.debug(f"Environment file loaded: {env_path}")
    return bool(loaded)


def build_app_config(
        root_path: Optional[str] = None,
        output_dir: Optional[str] = None,
) -> AppConfig:
    """
    Create the scanning configuration.

    Both paths default to the current working directory.

    Args:
        root_path: Project directory to analyze.
        output_dir: Destination for generated files.

    Returns:
        AppConfig: Normalized configuration with absolute paths.
    """
    cwd = os.getcwd()
    return AppConfig(
        root_path=os.path.abspath(root_path or cwd),
        output_dir=os.path.abspath(output_dir or cwd),
    )


def build_api_settings(environ: Optional[Mapping[str, str]] = None) -> ApiSettings:
    """
    Resolve the OpenRouter settings from an environment mapping.

    Args:
        environ: Variables to read. Defaults to os.environ.

    Returns:
        ApiSettings: Settings ready for the network client.

    Raises:
        ConfigurationError: If OPENROUTER_API_KEY is missing or blank.
    """
    env = os.environ if environ is None else environ

    api_key = (env.get(ENV_API_KEY) or "").strip()
    if not api_key:
        raise ConfigurationError(f"{ENV_API_KEY} is not set in the environment or the .env file.")

    return ApiSettings(
        api_key=api_key,
        model=(env.get(ENV_MODEL) or "").strip() or DEFAULT_MODEL,
        site_url=(env.get(ENV_SITE_URL) or "").strip(),
        site_name=(env.get(ENV_SITE_NAME) or "").strip(),
        timeout=_parse_timeout(env.get(ENV_TIMEOUT)),
    )


def _parse_timeout(raw: Optional[str]) -> float:
    """Convert the timeout override to seconds, falling back to the default."""
    if raw is None or not raw.strip():
        return DEFAULT_REQUEST_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        value = -1.0
    if not math.isfinite(value) or value <= 0:
        logger.warning(
            f"Ignoring invalid {ENV_TIMEOUT}={raw!r}. Using {DEFAULT_REQUEST_TIMEOUT:.0f}s."
        )
        return DEFAULT_REQUEST_TIMEOUT
    return value
