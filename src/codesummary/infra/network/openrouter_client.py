from __future__ import annotations

"""
OpenRouter Chat-Completion Client.

Sends the assembled prompt in one blocking POST request and extracts the
first completion's text. Every failure (transport, timeout, HTTP status,
undecodable body or unexpected shape) is logged and turned into a failed
AnalysisResult; nothing is raised to the caller and nothing is retried.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from codesummary.domain.config import ApiSettings
from codesummary.domain.models import AnalysisResult, analysis_failure
from codesummary.infra.network.common import USER_AGENT, truncate_detail

logger = logging.getLogger(__name__)


class OpenRouterClient:
    """
    Minimal client for the chat-completion endpoint.

    Args:
        settings: Credential, endpoint, model, optional attribution headers
                  and timeout.
    """

    def __init__(self, settings: ApiSettings) -> None:
        self.settings = settings

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.settings.model,
            "messages": [{"role": "user", "content": prompt}],
        }

    def build_headers(self) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
        if self.settings.site_url:
            headers["HTTP-Referer"] = _header_safe(self.settings.site_url)
        if self.settings.site_name:
            headers["X-Title"] = _header_safe(self.settings.site_name)
        return headers

    def complete(self, prompt: str) -> AnalysisResult:
        """
        Request a completion for the prompt.

        Args:
            prompt: Full user message.

        Returns:
            AnalysisResult: ok=True with the stripped completion text, or
                            ok=False with an error description.
        """
        logger.debug(
            f"Network: POST {self.settings.api_url} (model={self.settings.model}, "
            f"timeout={self.settings.timeout}s)"
        )

        try:
            response = requests.post(
                self.settings.api_url,
                json=self.build_payload(prompt),
                headers=self.build_headers(),
                timeout=self.settings.timeout,
            )
        except requests.exceptions.Timeout:
            msg = f"Request timed out after {self.settings.timeout}s."
            logger.error(f"Network: {msg}")
            return analysis_failure(msg)
        except requests.exceptions.RequestException as e:
            msg = f"Communication with OpenRouter API failed: {e}"
            logger.error(f"Network: {msg}")
            return analysis_failure(msg)
        except (ValueError, OverflowError) as e:
            msg = f"Could not send request to OpenRouter API: {e}"
            logger.error(f"Network: {msg}")
            return analysis_failure(msg)

        status = response.status_code
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError:
            detail = truncate_detail(response.text)
            msg = f"OpenRouter API returned HTTP {status}: {detail}"
            logger.error(f"Network: {msg}")
            return analysis_failure(msg, status)

        try:
            data = response.json()
        except ValueError as e:
            msg = f"OpenRouter API returned a non-JSON body: {e}"
            logger.error(f"Network: {msg}")
            return analysis_failure(msg, status)

        content = extract_completion_text(data)
        if content is None:
            msg = "No response content from OpenRouter API."
            logger.warning(f"Network: {msg}")
            return analysis_failure(msg, status)

        text = content.strip()
        if not text:
            logger.warning("Network: OpenRouter API returned an empty completion.")
        return AnalysisResult(ok=True, content=text, status_code=status)


def extract_completion_text(data: Any) -> Optional[str]:
    """
    Pull choices[0].message.content out of a decoded response body.

    Returns:
        Optional[str]: The content string, or None when the shape differs.
    """
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None


def _header_safe(value: str) -> str:
    """Percent-encode a header value that cannot be sent as Latin-1."""
    try:
        value.encode("latin-1")
    except UnicodeEncodeError:
        return quote(value, safe=" !#$&'()*+,/:;=?@[]~")
    return value


def request_analysis(prompt: str, settings: ApiSettings) -> str:
    """
    Send a prompt and return the completion text.

    Returns:
        str: The completion, or an empty string when the request failed or
             the model returned nothing.
    """
    return OpenRouterClient(settings).complete(prompt).content
