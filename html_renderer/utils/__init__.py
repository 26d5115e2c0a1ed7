"""
Utility modules for URL handling.

This package contains helpers for validating URLs and reducing them
to the origin used for script execution.
"""

from .url import has_host, origin_of, require_host

__all__ = [
    "has_host",
    "origin_of",
    "require_host",
]
