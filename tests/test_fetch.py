"""Tests for remote Markdown fetching."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest

from mdviewer.exceptions import DocumentNotFoundError, FetchError
from mdviewer.fetch import RETRY_STATUS_CODES, check_url, fetch_markdown

URL = "https://example.com/docs/readme.md"


def _client(*responses: httpx.Response | Exception) -> httpx.AsyncClient:
    """Client answering each request with the next queued response or error."""
    queue = list(responses)
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        outcome = queue.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client.calls = calls
    return client


def _markdown(text: str, content_type: str = "text/markdown; charset=utf-8") -> httpx.Response:
    return httpx.Response(200, text=text, headers={"content-type": content_type})


@pytest.fixture(autouse=True)
def fast_retries():
    with (
        patch("mdviewer.fetch.MDVIEWER_FETCH_MAX_RETRIES", 2),
        patch("mdviewer.fetch.MDVIEWER_FETCH_BACKOFF_S", 0.0),
    ):
        yield


class TestCheckUrl:
    """Tests for check_url."""

    def test_accepts_http_and_https(self) -> None:
        """Absolute http(s) URLs pass."""
        check_url("http://example.com/a.md")
        check_url(URL)

    @pytest.mark.parametrize("url", ["ftp://example.com/a.md", "example.com/a.md", "https://", "", "::"])
    def test_rejects_other_urls(self, url: str) -> None:
        """Anything else raises FetchError."""
        with pytest.raises(FetchError, match="Not an http"):
            check_url(url)


class TestFetchMarkdown:
    """Tests for fetch_markdown."""

    def test_retry_status_codes(self) -> None:
        """Rate limits and server errors are retried."""
        assert RETRY_STATUS_CODES == frozenset({429, 500, 502, 503, 504})

    @pytest.mark.asyncio
    async def test_returns_markdown_text(self) -> None:
        """Markdown responses come back decoded."""
        async with _client(_markdown("# Hello")) as client:
            assert await fetch_markdown(URL, client=client) == "# Hello"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content_type",
        ["text/plain", "text/x-markdown", "application/octet-stream", "TEXT/MARKDOWN; charset=utf-8"],
    )
    async def test_accepts_raw_file_content_types(self, content_type: str) -> None:
        """Raw-file hosts serve Markdown under several media types."""
        async with _client(_markdown("text", content_type)) as client:
            assert await fetch_markdown(URL, client=client) == "text"

    @pytest.mark.asyncio
    async def test_rejects_html_pages(self) -> None:
        """An HTML page is not treated as Markdown."""
        async with _client(_markdown("<html></html>", "text/html")) as client:
            with pytest.raises(FetchError, match="not a Markdown document"):
                await fetch_markdown(URL, client=client)

    @pytest.mark.asyncio
    async def test_rejects_oversized_documents(self) -> None:
        """Bodies above the size cap are refused."""
        with patch("mdviewer.fetch.MDVIEWER_MAX_DOCUMENT_BYTES", 10):
            async with _client(_markdown("x" * 11)) as client:
                with pytest.raises(FetchError, match="larger than 10 bytes"):
                    await fetch_markdown(URL, client=client)

    @pytest.mark.asyncio
    async def test_document_at_size_cap_is_accepted(self) -> None:
        """The cap is inclusive."""
        with patch("mdviewer.fetch.MDVIEWER_MAX_DOCUMENT_BYTES", 10):
            async with _client(_markdown("x" * 10)) as client:
                assert await fetch_markdown(URL, client=client) == "x" * 10

    @pytest.mark.asyncio
    async def test_raises_not_found_on_404_without_retrying(self) -> None:
        """A 404 raises DocumentNotFoundError after one request."""
        async with _client(httpx.Response(404)) as client:
            with pytest.raises(DocumentNotFoundError, match="Document not found"):
                await fetch_markdown(URL, client=client)

        assert len(client.calls) == 1

    @pytest.mark.asyncio
    async def test_other_client_errors_are_not_retried(self) -> None:
        """A 403 fails immediately."""
        async with _client(httpx.Response(403)) as client:
            with pytest.raises(FetchError, match="HTTP 403"):
                await fetch_markdown(URL, client=client)

        assert len(client.calls) == 1

    @pytest.mark.asyncio
    async def test_retries_on_503(self) -> None:
        """A transient 503 is retried."""
        async with _client(httpx.Response(503), _markdown("ok")) as client:
            assert await fetch_markdown(URL, client=client) == "ok"

        assert len(client.calls) == 2

    @pytest.mark.asyncio
    async def test_retries_on_transport_error(self) -> None:
        """Connection failures are retried."""
        async with _client(httpx.ConnectError("refused"), _markdown("ok")) as client:
            assert await fetch_markdown(URL, client=client) == "ok"

    @pytest.mark.asyncio
    async def test_raises_after_max_retries(self) -> None:
        """Initial attempt plus two retries, then FetchError."""
        async with _client(*[httpx.Response(503)] * 3) as client:
            with pytest.raises(FetchError, match="Failed to fetch .*HTTP 503"):
                await fetch_markdown(URL, client=client)

        assert len(client.calls) == 3

    @pytest.mark.asyncio
    async def test_invalid_url_becomes_fetch_error(self) -> None:
        """httpx.InvalidURL is reported as FetchError, not retried."""
        async with _client(httpx.InvalidURL("bad host")) as client:
            with pytest.raises(FetchError, match="Invalid URL"):
                await fetch_markdown(URL, client=client)

        assert len(client.calls) == 1

    @pytest.mark.asyncio
    async def test_rejects_bad_url_before_requesting(self) -> None:
        """Malformed URLs never reach the client."""
        async with _client() as client:
            with pytest.raises(FetchError):
                await fetch_markdown("not a url", client=client)

        assert client.calls == []

    @pytest.mark.asyncio
    async def test_default_client_settings(self) -> None:
        """Without a client, one is created with redirects and headers set."""
        real_client_class = httpx.AsyncClient
        transport = httpx.MockTransport(lambda request: _markdown("ok"))
        created: list[dict] = []

        def make_client(**kwargs):
            created.append(kwargs)
            return real_client_class(transport=transport, **kwargs)

        with patch("mdviewer.fetch.httpx.AsyncClient", side_effect=make_client):
            assert await fetch_markdown(URL) == "ok"

        assert created[0]["follow_redirects"] is True
        assert created[0]["headers"]["User-Agent"].startswith("mdviewer")
        assert "text/markdown" in created[0]["headers"]["Accept"]
