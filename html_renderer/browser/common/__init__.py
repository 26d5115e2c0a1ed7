"""
Common browser interfaces module.

This package contains the protocols shared by the session wrapper,
the orchestrator and the response adapter.
"""

from .interface import ResponseLike, WebDriverLike

__all__ = ["ResponseLike", "WebDriverLike"]
