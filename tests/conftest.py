import threading

import pytest


class FakeDriver:
    """In-memory WebDriver stand-in that records every call."""

    def __init__(self, fail_on=None, block_source=False, release_on_quit=True, block_seconds=10):
        self.calls = []
        self.html = ""
        self.quit_count = 0
        self.fail_on = fail_on or {}
        self.block_source = block_source
        self.release_on_quit = release_on_quit
        self.block_seconds = block_seconds
        self._released = threading.Event()

    def _maybe_fail(self, step):
        if step in self.fail_on:
            raise self.fail_on[step]

    def get(self, url):
        self.calls.append(("get", url))
        self._maybe_fail("get")

    def execute_script(self, script, *args):
        self.calls.append(("execute_script", script, args))
        self._maybe_fail("execute_script")
        if "document.write" in script:
            self.html = args[0]

    @property
    def page_source(self):
        self.calls.append(("page_source",))
        if self.block_source:
            # hangs like a frozen renderer, until quit if release_on_quit
            self._released.wait(self.block_seconds)
        self._maybe_fail("page_source")
        return self.html

    def quit(self):
        self.calls.append(("quit",))
        self.quit_count += 1
        if self.release_on_quit:
            self._released.set()
        self._maybe_fail("quit")


class FakeBackend:
    """Driver factory that hands out a fresh FakeDriver per session."""

    def __init__(self, error=None, **driver_kwargs):
        self.error = error
        self.driver_kwargs = driver_kwargs
        self.created = []
        self.drivers = []

    def __call__(self, command_executor, chrome_options):
        self.created.append((command_executor, chrome_options))
        if self.error is not None:
            raise self.error
        driver = FakeDriver(**self.driver_kwargs)
        self.drivers.append(driver)
        return driver

    @property
    def driver(self):
        return self.drivers[-1]


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def make_backend():
    return FakeBackend
