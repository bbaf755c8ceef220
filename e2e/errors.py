# Errors raised while loading e2e test properties

"""
Exception types for the e2e test properties loader.
"""


class ConfigurationLoadError(Exception):
    """Raised when a properties file cannot be read or a value cannot be coerced."""
    pass


class EnvironmentMismatchError(Exception):
    """Raised when the loaded properties do not suit the requested test mode."""
    pass
