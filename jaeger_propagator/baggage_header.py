from re import IGNORECASE, compile as re_compile

from .constants import UBER_BAGGAGE_HEADER_PREFIX
from .context import Baggage, BaggageEntry
from .util import _first_value, _percent_decode, _percent_encode

_BAGGAGE_HEADER = re_compile(
    r'^{}-(.+)'.format(UBER_BAGGAGE_HEADER_PREFIX), IGNORECASE
)


def baggage_header_name(key):
    return '{}-{}'.format(UBER_BAGGAGE_HEADER_PREFIX, key)


def encode_baggage(baggage):
    """
    Return one (header name, header value) pair per baggage entry.

    The key goes into the header name as it is, only the value is
    percent-encoded.
    """
    return [
        (baggage_header_name(key), _percent_encode(entry.value))
        for key, entry in baggage.get_all_entries()
    ]


def decode_baggage(keys, get):
    """
    Collect the raw values of the uberctx-* headers.

    :param keys: the header names found in the carrier
    :param get: callable returning the value of a header name
    :return: a list of (baggage key, raw value) pairs in header order, the
        raw value being None when the header had no value
    """
    return [
        (
            key[len(UBER_BAGGAGE_HEADER_PREFIX) + 1:],
            _first_value(get(key))
        )
        for key in keys
        if _BAGGAGE_HEADER.match(key)
    ]


def merge_baggage(baggage, entries):
    """
    Set the decoded entries on top of baggage, a later entry overwrites an
    earlier one with the same key. Entries without a value are skipped.

    :param baggage: the Baggage to start from, or None
    :param entries: (key, raw value) pairs as returned by decode_baggage
    :rtype: Baggage
    """
    if baggage is None:
        baggage = Baggage()

    for key, value in entries:
        if value is None:
            continue
        baggage = baggage.set_entry(key, BaggageEntry(_percent_decode(value)))

    return baggage
