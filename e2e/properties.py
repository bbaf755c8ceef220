# E2E Test Properties
# Values of test.properties and build.properties for the e2e test suite

"""
Loads the e2e test configuration.

load_test_properties() reads test.properties and build.properties once,
coerces every value to its type and returns an immutable TestProperties.
Build the object at startup and pass it to whatever needs it; there is no
module-level instance.
"""

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .accounts import (
    ACCOUNT_ROLES, ROLE_ADMIN, ROLE_INSTRUCTOR, ROLE_STUDENT1, ROLE_STUDENT2,
    ROLE_UNREGISTERED, TestAccount, accounts_from_properties, generate_accounts
)
from .environment import is_appveyor, is_ci_environment, is_travis, snapshot_environment
from .errors import ConfigurationLoadError, EnvironmentMismatchError
from .property_file import read_properties

logger = logging.getLogger(__name__)

# Conventional locations, relative to the working directory
TEST_PROPERTIES_PATH = 'src/e2e/resources/test.properties'
BUILD_PROPERTIES_PATH = 'src/main/resources/build.properties'

# The directory where HTML files for testing pages are stored.
TEST_PAGES_FOLDER = 'src/e2e/resources/pages'

# The directory where HTML files for testing email contents are stored.
TEST_EMAILS_FOLDER = 'src/e2e/resources/emails'

# The directory where JSON files used to create data bundles are stored.
TEST_DATA_FOLDER = 'src/e2e/resources/data'

# The directory where credentials used in Gmail API are stored.
TEST_GMAIL_API_FOLDER = 'src/e2e/resources/gmail-api'

DEV_SERVER_MARKER = 'localhost'

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1
_INT_PATTERN = re.compile(r'[+-]?[0-9]+')


@dataclass(frozen=True)
class TestProperties:
    """Typed, read-only view of test.properties and build.properties."""

    # Not a test class, keep pytest from collecting it
    __test__ = False

    app_url: Optional[str]
    app_version: Optional[str]

    admin: TestAccount
    instructor: TestAccount
    student1: TestAccount
    student2: TestAccount
    unregistered: TestAccount

    csrf_key: Optional[str] = field(repr=False)
    backdoor_key: Optional[str] = field(repr=False)

    browser: Optional[str]
    firefox_path: Optional[str]
    chromedriver_path: Optional[str]
    geckodriver_path: Optional[str]

    test_timeout: int
    persistence_retry_period_in_s: int
    is_godmode_enabled: bool = False

    environ: Mapping[str, str] = field(default_factory=snapshot_environment, repr=False, compare=False)

    def is_travis(self) -> bool:
        return is_travis(self.environ)

    def is_appveyor(self) -> bool:
        return is_appveyor(self.environ)

    def is_ci_environment(self) -> bool:
        return is_ci_environment(self.environ)

    def is_dev_server(self) -> bool:
        """Check whether the application under test is a local dev server."""
        return is_dev_server_url(self.app_url)

    def uses_generated_accounts(self) -> bool:
        """Check whether account names were generated rather than read from file."""
        return self.is_dev_server() and (self.is_ci_environment() or self.is_godmode_enabled)

    def verify_ready_for_god_mode(self):
        """
        Verify that the properties allow HTML regeneration via GodMode to work
        smoothly, i.e. all test HTML files are correctly regenerated and only the
        strings that should become placeholders are replaced.

        Raises:
            EnvironmentMismatchError: If the application under test is not a dev server
        """
        if not self.is_dev_server():
            raise EnvironmentMismatchError("GodMode regeneration works only in dev server.")

    def accounts(self):
        """Get all test accounts keyed by role, as a read-only mapping."""
        return MappingProxyType({role: getattr(self, role) for role in ACCOUNT_ROLES})

    def account_for(self, role) -> TestAccount:
        if role not in ACCOUNT_ROLES:
            raise ValueError(f"Unknown test account role: {role}")
        return getattr(self, role)


def is_dev_server_url(url) -> bool:
    return url is not None and DEV_SERVER_MARKER in url


def trim_trailing_slash(url):
    """Strip surrounding whitespace and one trailing '/' from a URL."""
    if url is None:
        return None
    url = url.strip()
    if url.endswith('/'):
        url = url[:-1]
    return url


def parse_boolean(value) -> bool:
    """Only 'true' (any case) is true; anything else, including None, is false."""
    return value is not None and value.lower() == 'true'


def parse_int(properties, key) -> int:
    """
    Read a required 32-bit integer property.

    Args:
        properties: Raw values of a properties file
        key: Property name

    Returns:
        int: Parsed value

    Raises:
        ConfigurationLoadError: If the key is missing or not a plain decimal integer
    """
    value = properties.get(key)
    if value is None or not _INT_PATTERN.fullmatch(value):
        logger.error(f"Property {key} is not an integer: {value!r}")
        raise ConfigurationLoadError(f"Property {key} is not an integer: {value!r}")

    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        logger.error(f"Property {key} is out of range: {value}")
        raise ConfigurationLoadError(f"Property {key} is out of range: {value}")
    return number


def load_test_properties(test_properties_path=TEST_PROPERTIES_PATH,
                         build_properties_path=BUILD_PROPERTIES_PATH,
                         environ=None) -> TestProperties:
    """
    Load the e2e test configuration.

    Args:
        test_properties_path: Location of test.properties
        build_properties_path: Location of build.properties
        environ: Environment variables to consult for CI detection;
            a snapshot of os.environ when omitted

    Returns:
        TestProperties: Fully populated, immutable configuration

    Raises:
        ConfigurationLoadError: If a file cannot be read or a numeric value
            cannot be parsed. Nothing is returned in that case.
    """
    environ = snapshot_environment(environ)

    properties = read_properties(test_properties_path)
    app_url = trim_trailing_slash(properties.get('test.app.url'))

    build_properties = read_properties(build_properties_path)
    app_version = build_properties.get('app.version')

    test_timeout = parse_int(properties, 'test.timeout')
    persistence_retry_period_in_s = parse_int(properties, 'test.persistence.timeout')

    is_godmode_enabled = parse_boolean(properties.get('test.godmode.enabled', 'false'))

    if is_dev_server_url(app_url) and (is_ci_environment(environ) or is_godmode_enabled):
        # For CI and GodMode, account names are generated rather than read so that
        # hard-coded account names in test files are detected.
        accounts = generate_accounts()
        logger.info(f"Using generated test accounts (CI={is_ci_environment(environ)}, "
                    f"GodMode={is_godmode_enabled})")
    else:
        accounts = accounts_from_properties(properties)

    browser = properties.get('test.selenium.browser')
    if browser is not None:
        browser = browser.lower()

    test_properties = TestProperties(
        app_url=app_url,
        app_version=app_version,
        admin=accounts[ROLE_ADMIN],
        instructor=accounts[ROLE_INSTRUCTOR],
        student1=accounts[ROLE_STUDENT1],
        student2=accounts[ROLE_STUDENT2],
        unregistered=accounts[ROLE_UNREGISTERED],
        csrf_key=properties.get('test.csrf.key'),
        backdoor_key=properties.get('test.backdoor.key'),
        browser=browser,
        firefox_path=properties.get('test.firefox.path'),
        chromedriver_path=properties.get('test.chromedriver.path'),
        geckodriver_path=properties.get('test.geckodriver.path'),
        test_timeout=test_timeout,
        persistence_retry_period_in_s=persistence_retry_period_in_s,
        is_godmode_enabled=is_godmode_enabled,
        environ=environ,
    )

    logger.info(f"Loaded test properties from {test_properties_path}: "
                f"url={app_url}, version={app_version}, browser={browser}")
    return test_properties
