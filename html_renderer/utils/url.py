#!/usr/bin/env python3
"""
URL handling module.

Helpers for checking that a URL can act as a script-execution origin
and for reducing a URL to that origin.
"""

from urllib.parse import urlparse

from ..errors import InvalidUrl


def has_host(url):
    """
    Check whether a URL has both a scheme and a host.

    Args:
        url: URL to check

    Returns:
        bool: False for relative and cannot-be-a-base URLs (``data:``, ``mailto:``)
    """
    try:
        parsed = urlparse(str(url))
        return bool(parsed.scheme) and bool(parsed.hostname)
    except ValueError:
        return False


def require_host(url):
    """
    Raise InvalidUrl unless ``url`` has a scheme and a host.

    Args:
        url: URL to check

    Raises:
        InvalidUrl: If the URL cannot act as an origin
    """
    if not has_host(url):
        raise InvalidUrl(f"Cannot-be-a-base URL not supported: {url!r}")


def origin_of(url):
    """
    Reduce a URL to ``scheme://host``.

    Path, query, fragment, credentials and port are dropped; only the
    scheme and host are needed to give injected scripts the right origin.

    Args:
        url: Absolute URL (``str`` or any object whose ``str()`` is the URL)

    Returns:
        str: The ``scheme://host`` part of the URL

    Raises:
        InvalidUrl: If the URL has no host
    """
    require_host(url)
    parsed = urlparse(str(url))
    host = parsed.hostname
    # hostname strips the brackets from IPv6 literals
    if ":" in host:
        host = f"[{host}]"
    return f"{parsed.scheme}://{host}"
