"""
HTML renderer package.

This package renders JavaScript-heavy HTML by injecting it into a
headless Chrome driven over the WebDriver protocol and returning the
resulting DOM. It is meant as a post-processing step after an HTTP fetch.
"""

__version__ = "1.0.0"

import logging

from .config import (DEFAULT_CHROMEDRIVER_URL, DEFAULT_OUTPUT_DELAY,
                     SOURCE_TIMEOUT, RenderOptions)
from .errors import (BackendUnavailable, BodyReadFailed, InvalidUrl,
                     NavigationFailed, RenderError, RenderTimeout,
                     ScriptExecutionFailed, SerializationFailed,
                     SessionCreationFailed, SourceRetrievalFailed,
                     TeardownFailed)
from .render import render_html, render_html_sync
from .response import render_response, render_response_sync

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "RenderOptions",
    "render_html",
    "render_html_sync",
    "render_response",
    "render_response_sync",
    "DEFAULT_CHROMEDRIVER_URL",
    "DEFAULT_OUTPUT_DELAY",
    "SOURCE_TIMEOUT",
    "RenderError",
    "InvalidUrl",
    "BodyReadFailed",
    "BackendUnavailable",
    "SessionCreationFailed",
    "NavigationFailed",
    "ScriptExecutionFailed",
    "SerializationFailed",
    "SourceRetrievalFailed",
    "RenderTimeout",
    "TeardownFailed",
]
