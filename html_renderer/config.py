#!/usr/bin/env python3
"""
Render configuration module.

This module holds the default constants used by the renderer and the
RenderOptions record a caller fills in for a single render call.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Union

from .utils.url import require_host

# Where chromedriver listens when started with --port=4444
DEFAULT_CHROMEDRIVER_URL = "http://127.0.0.1:4444"

# Seconds to let injected scripts run before reading the page source
DEFAULT_OUTPUT_DELAY = 2.0

# Seconds to wait for the page source before giving up on the renderer
SOURCE_TIMEOUT = 15.0

# Seconds any single HTTP call to the WebDriver endpoint may take
COMMAND_TIMEOUT = 60

# Only works if run before the page has loaded, otherwise the renderer freezes up.
INJECT_HTML_SCRIPT = "document.write(arguments[0]);"


def _to_seconds(value):
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


@dataclass
class RenderOptions:
    """
    Options for a single render call.

    Attributes:
        html: The whole HTML document to render, usually a response body
        url: Origin the HTML is rendered under; at least the base URL the
            HTML was fetched from, but any absolute URL with a host works
        chromedriver_url: Address and port where chromedriver is running,
            DEFAULT_CHROMEDRIVER_URL if not set
        output_delay: Seconds to wait before reading the page source,
            DEFAULT_OUTPUT_DELAY if not set. Any duration is accepted but
            at least 2 seconds is recommended.
        source_timeout: Seconds the page source retrieval may take
    """
    html: str
    url: str
    chromedriver_url: Optional[str] = None
    output_delay: Optional[Union[float, timedelta]] = None
    source_timeout: float = SOURCE_TIMEOUT

    def __post_init__(self):
        """Validate options after initialization."""
        if self.output_delay is not None:
            self.output_delay = _to_seconds(self.output_delay)
        self.validate()

    def validate(self):
        """
        Check the options before any browser work is done.

        Raises:
            InvalidUrl: If ``url`` has no scheme or host
            ValueError: If a delay or timeout is out of range
        """
        require_host(self.url)

        if self.output_delay is not None and self.output_delay < 0:
            raise ValueError(f"output_delay must not be negative: {self.output_delay}")

        if self.source_timeout <= 0:
            raise ValueError(f"source_timeout must be positive: {self.source_timeout}")

    def effective_chromedriver_url(self):
        return self.chromedriver_url or DEFAULT_CHROMEDRIVER_URL

    def effective_output_delay(self):
        if self.output_delay is None:
            return DEFAULT_OUTPUT_DELAY
        return _to_seconds(self.output_delay)
