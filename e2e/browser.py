# Browser Configuration for the e2e test suite

"""
Turns the browser settings of TestProperties into Selenium options, services
and drivers.
"""

import logging

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.firefox.service import Service as FirefoxService

from .errors import ConfigurationLoadError

logger = logging.getLogger(__name__)

# Allowed values of "test.selenium.browser" in test.properties
BROWSER_CHROME = 'chrome'
BROWSER_FIREFOX = 'firefox'

SUPPORTED_BROWSERS = (BROWSER_CHROME, BROWSER_FIREFOX)

WINDOW_SIZE = (1920, 1080)


def _require_supported_browser(props):
    if props.browser not in SUPPORTED_BROWSERS:
        raise ConfigurationLoadError(
            f"Unsupported test.selenium.browser value: {props.browser!r} "
            f"(expected one of {', '.join(SUPPORTED_BROWSERS)})"
        )
    return props.browser


def build_driver_options(props, headless=False):
    """
    Build browser options for the configured browser.

    Args:
        props: Loaded TestProperties
        headless: Run the browser without a window

    Returns:
        ChromeOptions or FirefoxOptions

    Raises:
        ConfigurationLoadError: If the configured browser is not supported
    """
    browser = _require_supported_browser(props)

    if browser == BROWSER_CHROME:
        options = ChromeOptions()
        options.add_argument('--no-sandbox')
        options.add_argument('--disable-dev-shm-usage')
        options.add_argument(f'--window-size={WINDOW_SIZE[0]},{WINDOW_SIZE[1]}')
    else:
        options = FirefoxOptions()
        if props.firefox_path:
            options.binary_location = props.firefox_path
        options.add_argument(f'--width={WINDOW_SIZE[0]}')
        options.add_argument(f'--height={WINDOW_SIZE[1]}')

    if headless:
        options.add_argument('--headless')

    logger.debug(f"{browser} options configured with headless={headless}")
    return options


def build_driver_service(props):
    """Build the driver service, pointing at the configured driver binary if one is set."""
    browser = _require_supported_browser(props)

    if browser == BROWSER_CHROME:
        return ChromeService(executable_path=props.chromedriver_path)
    return FirefoxService(executable_path=props.geckodriver_path)


def create_driver(props, headless=False):
    """
    Start a WebDriver for the configured browser.

    The page load timeout is taken from test.timeout.
    """
    options = build_driver_options(props, headless=headless)
    service = build_driver_service(props)

    if props.browser == BROWSER_CHROME:
        driver = webdriver.Chrome(service=service, options=options)
    else:
        driver = webdriver.Firefox(service=service, options=options)

    driver.set_page_load_timeout(props.test_timeout)
    logger.info(f"Started {props.browser} driver (timeout={props.test_timeout}s)")
    return driver
