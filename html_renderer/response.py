#!/usr/bin/env python3
"""
HTTP response rendering module.

This module renders the body of an already completed HTTP response,
using the response's own URL as the origin for injected scripts. Any
client works as long as its responses expose ``url`` and ``text``
(requests, httpx, aiohttp).
"""

import inspect
import logging

from .browser.common.interface import ResponseLike
from .config import RenderOptions
from .errors import BodyReadFailed
from .render import render_html, render_html_sync
from .utils.url import origin_of

logger = logging.getLogger(__name__)


def _text_value(response):
    text = response.text
    if callable(text):
        text = text()
    return text


async def read_response_text(response: ResponseLike) -> str:
    """
    Read the whole response body as text.

    Args:
        response: ResponseLike whose ``text`` is an attribute, a method or
            a coroutine method

    Returns:
        str: Response body

    Raises:
        BodyReadFailed: If the body could not be read
    """
    try:
        text = _text_value(response)
        if inspect.isawaitable(text):
            text = await text
    except Exception as e:
        raise BodyReadFailed(f"Could not read response body: {e}") from e
    if not isinstance(text, str):
        raise BodyReadFailed(f"Response body is {type(text).__name__}, not text")
    return text


def _read_response_text_sync(response: ResponseLike) -> str:
    try:
        text = _text_value(response)
    except Exception as e:
        raise BodyReadFailed(f"Could not read response body: {e}") from e
    if inspect.isawaitable(text):
        # close the coroutine so it is not reported as never awaited
        if inspect.iscoroutine(text):
            text.close()
        raise BodyReadFailed("Response body needs an event loop; use render_response")
    if not isinstance(text, str):
        raise BodyReadFailed(f"Response body is {type(text).__name__}, not text")
    return text


async def render_response(response: ResponseLike, chromedriver_url=None, output_delay=None,
                          driver_factory=None) -> str:
    """
    Render the HTML body of a completed response.

    Only ``scheme://host`` of the response URL is kept; it sets the
    origin the HTML runs under.

    Args:
        response: ResponseLike to render
        chromedriver_url: Address of chromedriver, default if not set
        output_delay: Seconds to wait before reading the source, default if not set
        driver_factory: See render_html

    Returns:
        str: Rendered page source

    Raises:
        InvalidUrl: If the response URL has no host; the body is not read
        BodyReadFailed: If the body could not be read
        RenderError: If rendering failed
    """
    url = origin_of(response.url)
    html = await read_response_text(response)
    logger.debug("Rendering response body from %s under origin %s", response.url, url)

    render_options = RenderOptions(
        html=html,
        url=url,
        chromedriver_url=chromedriver_url,
        output_delay=output_delay,
    )
    return await render_html(render_options, driver_factory=driver_factory)


def render_response_sync(response: ResponseLike, chromedriver_url=None, output_delay=None,
                         driver_factory=None) -> str:
    """
    Blocking variant of render_response for responses with a plain ``text``.

    Args:
        response: ResponseLike such as ``requests.Response``
        chromedriver_url: Address of chromedriver, default if not set
        output_delay: Seconds to wait before reading the source, default if not set
        driver_factory: See render_html

    Returns:
        str: Rendered page source
    """
    url = origin_of(response.url)
    html = _read_response_text_sync(response)

    render_options = RenderOptions(
        html=html,
        url=url,
        chromedriver_url=chromedriver_url,
        output_delay=output_delay,
    )
    return render_html_sync(render_options, driver_factory=driver_factory)
