# Pytest Configuration and Fixtures for the e2e test properties suite

"""
Shared fixtures for the test properties loader tests.
"""

import os
import sys

import pytest

# Add project root to Python path for imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from tests.utils.properties_files import (
    DEFAULT_BUILD_PROPERTIES, make_test_properties, write_properties
)

pytest_plugins = ['pytester']


@pytest.fixture
def properties_files(tmp_path):
    """
    Factory writing a test.properties and build.properties pair.

    Returns a function taking test.properties overrides (see
    make_test_properties) and an optional build.properties dict, returning the
    (test_path, build_path) tuple.
    """
    def _write(build=None, **overrides):
        test_path = write_properties(tmp_path / 'test.properties', make_test_properties(**overrides))
        build_path = write_properties(
            tmp_path / 'build.properties',
            DEFAULT_BUILD_PROPERTIES if build is None else build
        )
        return test_path, build_path

    return _write
