#!/usr/bin/env python3
"""
Browser session module.

This module wraps one WebDriver session for use from asyncio. Every
blocking driver call runs on the session's own worker threads so the
calling task suspends instead of blocking the event loop. The threads
are never joined: a call abandoned by a timeout cannot hold up the
caller or the event loop's default executor.
"""

import asyncio
import functools
import json
import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from ..config import INJECT_HTML_SCRIPT
from ..errors import (NavigationFailed, ScriptExecutionFailed,
                      SerializationFailed, SourceRetrievalFailed,
                      TeardownFailed)
from .driver import DRIVER_ERRORS, setup_webdriver

logger = logging.getLogger(__name__)

SESSION_WORKERS = 2


def encode_html_argument(html):
    """
    Check that HTML can be passed as a single JSON string argument.

    Args:
        html: HTML text to inject

    Returns:
        str: The HTML, unchanged

    Raises:
        SerializationFailed: If the value is not a JSON-encodable string
    """
    if not isinstance(html, str):
        raise SerializationFailed(f"HTML must be str, not {type(html).__name__}")
    try:
        json.dumps(html)
    except (TypeError, ValueError) as e:
        raise SerializationFailed(f"HTML could not be encoded: {e}") from e
    return html



class BrowserSession:
    """
    One live WebDriver session, owned by a single render call.

    Driver calls run on an executor owned by the session, so a call that
    never returns ties up none of the event loop's threads. The session
    is closed at most once; later close() calls are no-ops.
    """

    def __init__(self, driver, executor=None):
        self._driver = driver
        self._executor = executor or new_session_executor()
        self._closed = False

    @property
    def closed(self):
        return self._closed

    async def _call(self, func, *args):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, functools.partial(func, *args))

    async def goto(self, url):
        """Navigate to ``url`` without waiting for the page to load."""
        logger.debug("Navigating to %s", url)
        try:
            await self._call(self._driver.get, url)
        except DRIVER_ERRORS as e:
            raise NavigationFailed(f"Navigation to {url} failed: {e}") from e

    async def inject_html(self, html):
        """
        Replace the entire content of the page with ``html``.

        The HTML goes in as a script argument, never concatenated into
        the script source.

        Args:
            html: HTML document to write into the page

        Raises:
            SerializationFailed: If the HTML cannot be encoded
            ScriptExecutionFailed: If the script fails in the browser
        """
        argument = encode_html_argument(html)
        logger.debug("Injecting %d characters of HTML", len(argument))
        try:
            await self._call(self._driver.execute_script, INJECT_HTML_SCRIPT, argument)
        except DRIVER_ERRORS as e:
            raise ScriptExecutionFailed(f"HTML injection failed: {e}") from e

    async def page_source(self):
        """Get the current rendered page source."""
        try:
            return await self._call(getattr, self._driver, "page_source")
        except DRIVER_ERRORS as e:
            raise SourceRetrievalFailed(f"Page source retrieval failed: {e}") from e

    async def close(self):
        """
        Quit the session and release backend resources.

        The executor is shut down without waiting, so a call still stuck
        in the driver finishes in the background and its result is dropped.

        Raises:
            TeardownFailed: If the backend failed to quit the session
        """
        if self._closed:
            return
        self._closed = True
        logger.debug("Quitting WebDriver session")
        try:
            await self._call(self._driver.quit)
        except DRIVER_ERRORS as e:
            raise TeardownFailed(f"Error during quit: {e}") from e
        finally:
            self._executor.shutdown(wait=False)


def new_session_executor():
    """
    Create the worker threads for one session.

    Two workers, so quit() can run while an abandoned page source
    retrieval still holds the other one.
    """
    return ThreadPoolExecutor(max_workers=SESSION_WORKERS, thread_name_prefix="html-renderer")


@asynccontextmanager
async def open_session(command_executor, chrome_options=None, driver_factory=None):
    """
    Open a browser session that is quit on every exit path.

    If the body raises, a failing quit is logged and the body's error
    propagates. If the body succeeds, a failing quit raises TeardownFailed.

    Args:
        command_executor: URL of the WebDriver endpoint
        chrome_options: Chrome options for the session
        driver_factory: Callable creating the driver, see setup_webdriver

    Yields:
        BrowserSession: The live session
    """
    executor = new_session_executor()
    loop = asyncio.get_running_loop()
    try:
        driver = await loop.run_in_executor(
            executor,
            functools.partial(setup_webdriver, command_executor, chrome_options, driver_factory),
        )
    except BaseException:
        executor.shutdown(wait=False)
        raise

    session = BrowserSession(driver, executor)
    try:
        yield session
    except BaseException:
        try:
            await session.close()
        except TeardownFailed as e:
            logger.warning("Could not quit browser session: %s", e)
        raise
    await session.close()
