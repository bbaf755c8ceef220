# CI Environment Detection

"""
Continuous-integration detection for the e2e test harness.

The environment is always passed in as a mapping so callers (and tests) decide
what the harness sees; only snapshot_environment() touches os.environ.
"""

import os
from types import MappingProxyType

TRAVIS_VARIABLE = 'TRAVIS'
APPVEYOR_VARIABLE = 'APPVEYOR'

CI_ENVIRONMENT_VARIABLES = (TRAVIS_VARIABLE, APPVEYOR_VARIABLE)


def snapshot_environment(environ=None):
    """Return a read-only copy of the given mapping, or of os.environ when omitted."""
    if environ is None:
        environ = os.environ
    return MappingProxyType(dict(environ))


def is_travis(environ) -> bool:
    # Presence is what matters, an empty value still counts as set
    return environ.get(TRAVIS_VARIABLE) is not None


def is_appveyor(environ) -> bool:
    return environ.get(APPVEYOR_VARIABLE) is not None


def is_ci_environment(environ) -> bool:
    """Check whether the tests run under one of the supported CI providers."""
    return is_travis(environ) or is_appveyor(environ)
