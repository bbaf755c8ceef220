# E2E Test Properties

"""
Configuration for the e2e browser test suite: test.properties and
build.properties values, test accounts and environment checks.
"""

from .accounts import TestAccount
from .errors import ConfigurationLoadError, EnvironmentMismatchError
from .properties import TestProperties, load_test_properties

__all__ = [
    'TestAccount',
    'TestProperties',
    'ConfigurationLoadError',
    'EnvironmentMismatchError',
    'load_test_properties'
]
