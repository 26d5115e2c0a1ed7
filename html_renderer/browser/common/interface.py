#!/usr/bin/env python3
"""
Browser and response interface definition module.

This module defines the protocols the renderer depends on, so that any
WebDriver client or HTTP client implementation can be plugged in.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class WebDriverLike(Protocol):
    """The part of selenium's WebDriver the renderer uses."""

    @property
    def page_source(self) -> str:
        """Get the page source/HTML content."""
        ...

    def get(self, url: str) -> None:
        """Navigate to the specified URL."""
        ...

    def execute_script(self, script: str, *args: Any) -> Any:
        """Execute JavaScript in the browser context."""
        ...

    def quit(self) -> None:
        """Close the browser session and release backend resources."""
        ...


class ResponseLike(Protocol):
    """
    A completed HTTP response.

    ``url`` is the final URL (a ``str`` or anything whose ``str()`` is
    one, such as ``httpx.URL`` or ``yarl.URL``). ``text`` is the body as
    text: an attribute (requests, httpx), a method, or a coroutine
    method (aiohttp).
    """

    url: Any
    text: Any
