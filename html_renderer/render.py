#!/usr/bin/env python3
"""
HTML rendering module.

This module drives one headless browser session per call: navigate to
the origin, inject the HTML, wait for scripts to run and read back the
rendered page source.

Assumptions:
    - chromedriver (or a Selenium Grid) is already running and reachable

No guarantees:
    - The page may not have finished rendering when its source is read
"""

import asyncio
import logging

from .browser.driver import build_chrome_options
from .browser.session import open_session
from .errors import RenderTimeout

logger = logging.getLogger(__name__)


async def render_html(options, driver_factory=None):
    """
    Render HTML in a headless browser and return the resulting DOM.

    Steps run strictly in order: create session, navigate to
    ``options.url``, replace the document with ``options.html``, sleep
    ``output_delay``, then read the page source under a watchdog of
    ``options.source_timeout`` seconds. The session is quit on every
    path once it has been created.

    Args:
        options: RenderOptions for this call
        driver_factory: Callable taking (command_executor, chrome_options)
            and returning a driver; a selenium Remote driver if not set

    Returns:
        str: Rendered page source

    Raises:
        InvalidUrl: If ``options.url`` has no host; raised before any
            backend is contacted
        RenderError: Subclass naming the step that failed
    """
    options.validate()
    chromedriver_url = options.effective_chromedriver_url()
    output_delay = options.effective_output_delay()

    async with open_session(chromedriver_url, build_chrome_options(), driver_factory) as session:
        await session.goto(options.url)
        await session.inject_html(options.html)

        await asyncio.sleep(output_delay)

        # Check to ensure the renderer hasn't frozen up
        try:
            html = await asyncio.wait_for(session.page_source(), timeout=options.source_timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Page source retrieval for %s exceeded %.1fs", options.url, options.source_timeout
            )
            raise RenderTimeout("Page source retrieval timed out.") from None

    logger.debug("Rendered %d characters for %s", len(html), options.url)
    return html


def render_html_sync(options, driver_factory=None):
    """
    Blocking variant of render_html for code without an event loop.

    Driver calls run on the session's own threads, not the loop's default
    executor, so shutting the loop down never waits on a retrieval the
    watchdog abandoned.

    Args:
        options: RenderOptions for this call
        driver_factory: See render_html

    Returns:
        str: Rendered page source
    """
    return asyncio.run(render_html(options, driver_factory=driver_factory))
