# Properties File Reader

"""
Reads Java .properties files (test.properties, build.properties) into a plain
dictionary. Parsing is delegated to jproperties, which follows the
java.util.Properties format: '=', ':' or whitespace separators, '#' and '!'
comment lines, backslash escapes and line continuations.
"""

import logging
from pathlib import Path

from jproperties import ParseError, Properties

from .errors import ConfigurationLoadError

logger = logging.getLogger(__name__)


def read_properties(path):
    """
    Read a properties file.

    Args:
        path: Location of the file, absolute or relative to the working directory

    Returns:
        dict: Key to unescaped string value. A key declared without a value maps to ''.

    Raises:
        ConfigurationLoadError: If the file cannot be opened, decoded or parsed
    """
    path = Path(path)
    properties = Properties()
    try:
        with path.open('rb') as stream:
            properties.load(stream, 'utf-8')
    except (OSError, UnicodeDecodeError, ParseError) as e:
        logger.error(f"Cannot read properties file {path}: {e}")
        raise ConfigurationLoadError(f"Cannot read properties file {path}: {e}") from e

    values = {key: properties[key].data for key in properties}
    logger.debug(f"Read {len(values)} properties from {path}")
    return values
