#!/usr/bin/env python3
"""
WebDriver setup and initialization module.

This module contains functions for building the Chrome capabilities used
for rendering and for opening a session on an already running
chromedriver (or Selenium Grid) endpoint.
"""

import logging

from selenium import webdriver
from selenium.common.exceptions import (SessionNotCreatedException,
                                        WebDriverException)
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.remote.client_config import ClientConfig
from urllib3.exceptions import HTTPError

from ..config import COMMAND_TIMEOUT
from ..errors import BackendUnavailable, SessionCreationFailed

logger = logging.getLogger(__name__)

# Exceptions a remote driver call can raise: protocol errors reported by
# the backend, and transport errors when the backend goes away.
DRIVER_ERRORS = (WebDriverException, HTTPError, OSError)


def build_chrome_options(headless=True):
    """
    Build Chrome options for rendering injected HTML.

    The page load strategy is "none" so navigation returns straight
    away and the HTML can be injected before the browser's own load
    finishes.

    Args:
        headless: Whether to run in headless mode

    Returns:
        Options: Chrome options for a new session
    """
    chrome_options = Options()
    if headless:
        chrome_options.add_argument("--headless=new")

    chrome_options.page_load_strategy = "none"
    return chrome_options


def create_remote_driver(command_executor, chrome_options, timeout=COMMAND_TIMEOUT):
    """
    Open a session on a running chromedriver.

    Every HTTP call the driver makes is bounded by ``timeout``, so a
    call abandoned by the page source watchdog still ends.

    Args:
        command_executor: URL of the WebDriver endpoint
        chrome_options: Chrome options for the session
        timeout: Seconds each WebDriver command may take

    Returns:
        WebDriver: Remote WebDriver bound to the new session
    """
    client_config = ClientConfig(remote_server_addr=command_executor, timeout=timeout)
    return webdriver.Remote(
        command_executor=command_executor,
        options=chrome_options,
        client_config=client_config,
    )


def setup_webdriver(command_executor, chrome_options=None, driver_factory=None):
    """
    Create a WebDriver session, mapping failures onto render errors.

    No retries: a failure here is fatal for the render call.

    Args:
        command_executor: URL of the WebDriver endpoint
        chrome_options: Chrome options, build_chrome_options() if not set
        driver_factory: Callable taking (command_executor, chrome_options)
            and returning a driver, create_remote_driver if not set

    Returns:
        WebDriverLike: Driver bound to a new session

    Raises:
        SessionCreationFailed: If the endpoint rejected the session
        BackendUnavailable: If the endpoint could not be reached
    """
    if chrome_options is None:
        chrome_options = build_chrome_options()
    if driver_factory is None:
        driver_factory = create_remote_driver

    logger.debug("Creating WebDriver session at %s", command_executor)
    try:
        return driver_factory(command_executor, chrome_options)
    except SessionNotCreatedException as e:
        raise SessionCreationFailed(f"Session not created at {command_executor}: {e.msg}") from e
    except WebDriverException as e:
        raise SessionCreationFailed(f"WebDriver creation failed at {command_executor}: {e.msg}") from e
    except (HTTPError, OSError) as e:
        raise BackendUnavailable(f"WebDriver endpoint {command_executor} unreachable: {e}") from e
