""" Utility functions
"""
from re import compile as re_compile
from urllib.parse import quote, unquote

from . import constants

_DECIMAL_PREFIX = re_compile(r'[0-9]+')


def _percent_encode(value):
    """
    Escape value the way encodeURIComponent does, so that the headers can be
    read by the Jaeger clients of other languages.
    """
    return quote(value, safe=constants.URI_COMPONENT_SAFE)


def _percent_decode(value):
    """
    Reverse _percent_encode.

    Malformed escapes are left as they are and invalid UTF-8 sequences are
    replaced, this never raises.
    """
    return unquote(value, errors='replace')


def _first_value(value):
    """
    Return the first element of value if the transport gave back repeated
    header values, value itself otherwise.
    """
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _parse_decimal_prefix(value):
    """
    Parse the leading decimal digits of value, returns None if value does not
    start with a digit.

    "01" gives 1, "1f" gives 1, "0a" gives 0 and "ab" gives None.
    """
    match = _DECIMAL_PREFIX.match(value)
    if match is None:
        return None
    return int(match.group(), 10)
