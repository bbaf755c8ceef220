#!/usr/bin/env python3
# Test Properties Validation

"""
Validates the e2e test properties before running the suite.

Usage:
    python -m e2e
    python -m e2e --test-properties path/to/test.properties --godmode
"""

import argparse
import logging
import sys

from .errors import ConfigurationLoadError, EnvironmentMismatchError
from .properties import BUILD_PROPERTIES_PATH, TEST_PROPERTIES_PATH, load_test_properties

LOGGING_CONFIG = {
    'level': 'INFO',
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

logger = logging.getLogger('e2e')


def mask(value):
    """Mask a secret for display, keeping only whether it is set."""
    if value is None:
        return '(not set)'
    return '***'


def log_summary(props):
    logger.info(f"App URL: {props.app_url}")
    logger.info(f"App version: {props.app_version}")
    logger.info(f"Dev server: {props.is_dev_server()}")
    logger.info(f"CI environment: {props.is_ci_environment()}")
    logger.info(f"GodMode enabled: {props.is_godmode_enabled}")
    logger.info(f"Generated accounts: {props.uses_generated_accounts()}")
    for role, account in props.accounts().items():
        logger.info(f"  {role}: {account.account} (password {mask(account.password)})")
    logger.info(f"CSRF key: {mask(props.csrf_key)}")
    logger.info(f"Backdoor key: {mask(props.backdoor_key)}")
    logger.info(f"Browser: {props.browser}")
    logger.info(f"Timeout: {props.test_timeout}s, persistence retry period: "
                f"{props.persistence_retry_period_in_s}s")


def main(argv=None, environ=None):
    """
    Run the validation.

    Args:
        argv: Command line arguments; sys.argv when omitted
        environ: Environment used for CI detection; os.environ when omitted

    Returns:
        int: Exit code, 0 when the properties are valid
    """
    parser = argparse.ArgumentParser(description='Validate e2e test properties')
    parser.add_argument('--test-properties', default=TEST_PROPERTIES_PATH,
                        help='Path to test.properties (default: %(default)s)')
    parser.add_argument('--build-properties', default=BUILD_PROPERTIES_PATH,
                        help='Path to build.properties (default: %(default)s)')
    parser.add_argument('--godmode', action='store_true',
                        help='Also check that GodMode regeneration can run')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, LOGGING_CONFIG['level']),
        format=LOGGING_CONFIG['format']
    )

    try:
        props = load_test_properties(args.test_properties, args.build_properties, environ=environ)
        log_summary(props)
        if args.godmode:
            props.verify_ready_for_god_mode()
            logger.info("Ready for GodMode regeneration")
    except (ConfigurationLoadError, EnvironmentMismatchError) as e:
        logger.error(f"Validation failed: {e}")
        return 1

    logger.info("Test properties are valid")
    return 0


if __name__ == '__main__':
    sys.exit(main())
