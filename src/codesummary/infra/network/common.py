from __future__ import annotations

from codesummary.domain.constants import APP_NAME, APP_VERSION

USER_AGENT = f"{APP_NAME}/{APP_VERSION}"
ERROR_DETAIL_LIMIT = 500


def truncate_detail(text: str, limit: int = ERROR_DETAIL_LIMIT) -> str:
    """Shorten a response body for log messages."""
    text = (text or "").strip()
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
