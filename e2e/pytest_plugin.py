# Pytest fixtures for e2e test properties

"""
Session-wide access to TestProperties for e2e test suites.

Enable with `pytest_plugins = ['e2e.pytest_plugin']` in a conftest.py or with
`-p e2e.pytest_plugin` on the command line.
"""

import logging

import pytest

from .errors import ConfigurationLoadError
from .properties import BUILD_PROPERTIES_PATH, TEST_PROPERTIES_PATH, load_test_properties

logger = logging.getLogger(__name__)


def pytest_addoption(parser):
    group = parser.getgroup('e2e', 'e2e test properties')
    group.addoption('--test-properties', default=TEST_PROPERTIES_PATH,
                    help='Path to test.properties (default: %(default)s)')
    group.addoption('--build-properties', default=BUILD_PROPERTIES_PATH,
                    help='Path to build.properties (default: %(default)s)')


@pytest.fixture(scope="session")
def e2e_environ():
    """
    Environment variables used for CI detection.

    None means the process environment. Override this fixture in a conftest.py
    to load the properties against a fixed environment.
    """
    return None


@pytest.fixture(scope="session")
def test_properties(request, e2e_environ):
    """
    Load the test properties once for the whole session.

    The run is aborted if the properties cannot be loaded, since no e2e test
    can run without them.
    """
    try:
        return load_test_properties(
            request.config.getoption('test_properties'),
            request.config.getoption('build_properties'),
            environ=e2e_environ,
        )
    except ConfigurationLoadError as e:
        logger.error(f"Failed to load test properties: {e}")
        pytest.exit(f"Cannot run tests without test properties: {e}", returncode=1)


@pytest.fixture(scope="session")
def god_mode_ready(test_properties):
    """Test properties that have been checked to allow GodMode regeneration."""
    test_properties.verify_ready_for_god_mode()
    return test_properties
