"""Single-attempt HTML fetch for article capture."""

from __future__ import annotations

import logging
import os

import requests

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120 Safari/537.36"
)
ACCEPT_HEADER = "text/html,application/xhtml+xml"

LOGGER = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """Raised when the server answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"Fetch failed: {status_code} {reason}".rstrip())
        self.status_code = status_code
        self.reason = reason


def fetch_html(url: str) -> str:
    """GET url once and return the body text.

    Redirects are followed. There is no retry; a non-2xx status raises
    FetchError and transport errors propagate as requests exceptions.

    FETCH_TIMEOUT_SECONDS sets a request timeout; by default the transport
    waits indefinitely.
    """
    headers = {
        "User-Agent": os.getenv("FETCH_USER_AGENT", DEFAULT_USER_AGENT),
        "Accept": ACCEPT_HEADER,
    }
    timeout_raw = os.getenv("FETCH_TIMEOUT_SECONDS")
    timeout = float(timeout_raw) if timeout_raw else None

    LOGGER.info("Fetching %s", url)
    response = requests.get(url, headers=headers, timeout=timeout, allow_redirects=True)

    if not 200 <= response.status_code < 300:
        raise FetchError(response.status_code, response.reason or "")

    # requests assumes ISO-8859-1 for text/* without a charset
    content_type = response.headers.get("Content-Type", "")
    if "charset" not in content_type.lower():
        response.encoding = "utf-8"

    LOGGER.info("Fetched %s status=%s bytes=%s", response.url, response.status_code, len(response.content))
    return response.text
