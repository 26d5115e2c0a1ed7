import pytest

from html_renderer.errors import BodyReadFailed, InvalidUrl
from html_renderer.response import (read_response_text, render_response,
                                    render_response_sync)

PAGE = "<html><body><script>document.body.append('!')</script>Hi</body></html>"


class PlainResponse:
    """Looks like requests.Response / httpx.Response."""

    def __init__(self, url, text=PAGE):
        self.url = url
        self._text = text
        self.text_reads = 0

    @property
    def text(self):
        self.text_reads += 1
        if isinstance(self._text, Exception):
            raise self._text
        return self._text


class AsyncResponse:
    """Looks like aiohttp.ClientResponse."""

    def __init__(self, url, body=PAGE):
        self.url = url
        self._body = body

    async def text(self):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class YarlLikeURL:
    def __init__(self, url):
        self._url = url

    def __str__(self):
        return self._url


class TestReadResponseText:
    @pytest.mark.asyncio
    async def test_attribute(self):
        assert await read_response_text(PlainResponse("http://example.com")) == PAGE

    @pytest.mark.asyncio
    async def test_coroutine_method(self):
        assert await read_response_text(AsyncResponse("http://example.com")) == PAGE

    @pytest.mark.asyncio
    async def test_read_error(self):
        response = AsyncResponse("http://example.com", body=UnicodeDecodeError("utf-8", b"\xff", 0, 1, "bad"))
        with pytest.raises(BodyReadFailed) as excinfo:
            await read_response_text(response)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    @pytest.mark.asyncio
    async def test_non_text_body(self):
        with pytest.raises(BodyReadFailed):
            await read_response_text(PlainResponse("http://example.com", text=b"bytes"))


class TestRenderResponse:
    @pytest.mark.asyncio
    async def test_renders_under_response_origin(self, backend):
        response = PlainResponse("https://example.com/articles/42?page=2#comments")

        html = await render_response(response, output_delay=0, driver_factory=backend)

        assert html == PAGE
        assert backend.driver.calls[0] == ("get", "https://example.com")
        assert backend.driver.quit_count == 1

    @pytest.mark.asyncio
    async def test_async_client_response(self, backend):
        response = AsyncResponse(YarlLikeURL("http://news.example.org/feed"))

        html = await render_response(response, output_delay=0, driver_factory=backend)

        assert html == PAGE
        assert backend.driver.calls[0] == ("get", "http://news.example.org")

    @pytest.mark.asyncio
    async def test_passes_endpoint_through(self, backend):
        response = PlainResponse("http://example.com/")

        await render_response(response, chromedriver_url="http://10.0.0.5:9515", output_delay=0,
                              driver_factory=backend)

        assert backend.created[0][0] == "http://10.0.0.5:9515"

    @pytest.mark.asyncio
    async def test_url_without_host(self, backend):
        response = PlainResponse("data:text/plain,hi")

        with pytest.raises(InvalidUrl):
            await render_response(response, output_delay=0, driver_factory=backend)

        assert backend.created == []
        assert response.text_reads == 0

    @pytest.mark.asyncio
    async def test_body_read_failure(self, backend):
        response = PlainResponse("http://example.com", text=ConnectionResetError("peer reset"))

        with pytest.raises(BodyReadFailed):
            await render_response(response, output_delay=0, driver_factory=backend)
        assert backend.created == []


class TestRenderResponseSync:
    def test_plain_response(self, backend):
        response = PlainResponse("http://example.com/path")

        assert render_response_sync(response, output_delay=0, driver_factory=backend) == PAGE
        assert backend.driver.calls[0] == ("get", "http://example.com")

    def test_async_response_needs_event_loop(self, backend):
        with pytest.raises(BodyReadFailed, match="event loop"):
            render_response_sync(AsyncResponse("http://example.com"), output_delay=0, driver_factory=backend)
        assert backend.created == []
