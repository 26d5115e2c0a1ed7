#!/usr/bin/env python3
"""
Render error taxonomy.

Every failure of a render call surfaces as exactly one subclass of
RenderError. The ``phase`` attribute names the step that failed.
"""


class RenderError(Exception):
    """Base class for all rendering failures."""

    phase = "render"

    def __init__(self, message=None):
        super().__init__(message or self.__doc__)


class InvalidUrl(RenderError, ValueError):
    """URL has no scheme or host."""

    phase = "url"


class BodyReadFailed(RenderError):
    """Response body could not be read as text."""

    phase = "body"


class BackendUnavailable(RenderError):
    """WebDriver endpoint could not be reached."""

    phase = "session"


class SessionCreationFailed(RenderError):
    """WebDriver endpoint refused to create a session."""

    phase = "session"


class NavigationFailed(RenderError):
    """Navigation to the origin URL failed."""

    phase = "navigate"


class SerializationFailed(RenderError):
    """HTML could not be encoded as a script argument."""

    phase = "inject"


class ScriptExecutionFailed(RenderError):
    """HTML injection script failed."""

    phase = "inject"


class SourceRetrievalFailed(RenderError):
    """Page source could not be retrieved."""

    phase = "extract"


class RenderTimeout(RenderError, TimeoutError):
    """Page source retrieval timed out."""

    phase = "extract"


class TeardownFailed(RenderError):
    """Browser session could not be quit."""

    phase = "teardown"
