"""
Browser module for creating and driving WebDriver sessions.

This package contains components for configuring a headless Chrome
session on a remote WebDriver endpoint and driving it from asyncio.
"""

from .common.interface import ResponseLike, WebDriverLike
from .driver import build_chrome_options, create_remote_driver, setup_webdriver
from .session import BrowserSession, open_session

__all__ = [
    "BrowserSession",
    "ResponseLike",
    "WebDriverLike",
    "build_chrome_options",
    "create_remote_driver",
    "open_session",
    "setup_webdriver",
]
