"""Fetch remote Markdown documents."""

from __future__ import annotations

import asyncio
import logging
from typing import Final
from urllib.parse import urlparse

import httpx

from mdviewer.config import (
    MDVIEWER_FETCH_BACKOFF_S,
    MDVIEWER_FETCH_MAX_RETRIES,
    MDVIEWER_FETCH_TIMEOUT_S,
    MDVIEWER_MAX_DOCUMENT_BYTES,
    MDVIEWER_USER_AGENT,
)
from mdviewer.exceptions import DocumentNotFoundError, FetchError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

# Raw files are often served as text/plain or as a generic binary type.
MARKDOWN_CONTENT_TYPES: Final[frozenset[str]] = frozenset(
    {"text/markdown", "text/x-markdown", "text/plain", "application/octet-stream"}
)

_ACCEPT = "text/markdown, text/x-markdown;q=0.9, text/plain;q=0.8"


def check_url(url: str) -> None:
    """Reject anything but absolute http(s) URLs.

    Raises:
        FetchError: If the URL cannot be fetched by this module.
    """
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise FetchError(f"Not an http(s) URL: {url!r}")


async def fetch_markdown(url: str, *, client: httpx.AsyncClient | None = None) -> str:
    """Download a Markdown document.

    Transient failures (connection errors and the status codes in
    ``RETRY_STATUS_CODES``) are retried with exponential backoff. The response
    must have a Markdown-compatible content type and stay under
    ``MDVIEWER_MAX_DOCUMENT_BYTES``.

    Raises:
        DocumentNotFoundError: If the server answers 404.
        FetchError: For invalid URLs, rejected responses, or when retries
            run out.
    """
    check_url(url)
    if client is None:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(MDVIEWER_FETCH_TIMEOUT_S),
            headers={"User-Agent": MDVIEWER_USER_AGENT, "Accept": _ACCEPT},
            follow_redirects=True,
        ) as new_client:
            return await fetch_markdown(url, client=new_client)

    failure = "no attempt made"
    for attempt in range(MDVIEWER_FETCH_MAX_RETRIES + 1):
        if attempt:
            await asyncio.sleep(MDVIEWER_FETCH_BACKOFF_S * (2 ** (attempt - 1)))
        try:
            response = await client.get(url)
        except httpx.InvalidURL as exc:
            raise FetchError(f"Invalid URL {url!r}: {exc}") from exc
        except httpx.TransportError as exc:
            failure = str(exc) or type(exc).__name__
            logger.debug("Attempt %d for %s failed: %s", attempt + 1, url, failure)
            continue

        if response.status_code in RETRY_STATUS_CODES:
            failure = f"HTTP {response.status_code}"
            logger.debug("Attempt %d for %s got %s", attempt + 1, url, failure)
            continue
        return _markdown_body(response, url)

    raise FetchError(f"Failed to fetch {url}: {failure}")


def _markdown_body(response: httpx.Response, url: str) -> str:
    if response.status_code == 404:
        raise DocumentNotFoundError(f"Document not found at {url}")
    if response.status_code >= 400:
        raise FetchError(f"HTTP {response.status_code} from {url}")

    content_type = response.headers.get("content-type", "")
    media_type = content_type.split(";")[0].strip().lower()
    if media_type and media_type not in MARKDOWN_CONTENT_TYPES:
        raise FetchError(f"{url} is not a Markdown document ({media_type})")

    declared = response.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > MDVIEWER_MAX_DOCUMENT_BYTES:
        raise FetchError(f"{url} is larger than {MDVIEWER_MAX_DOCUMENT_BYTES} bytes")
    if len(response.content) > MDVIEWER_MAX_DOCUMENT_BYTES:
        raise FetchError(f"{url} is larger than {MDVIEWER_MAX_DOCUMENT_BYTES} bytes")

    return response.text
