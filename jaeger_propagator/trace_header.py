from re import IGNORECASE, compile as re_compile
from logging import getLogger

from . import constants
from .context import SpanContext
from .util import _parse_decimal_prefix, _percent_decode

_LOG = getLogger(__name__)

_FLAGS = re_compile(r'[0-9a-f]{2}', IGNORECASE)


def encode_span_context(span_context):
    """
    Serialize span_context into the value of the uber-trace-id header:

        {trace-id}:{span-id}:{parent-span-id}:{flags}

    The parent-span-id field is deprecated and always written as 0. The flags
    are the hex digits of trace_flags prefixed by a single 0.
    """
    trace_flags = '0{}'.format(
        format(span_context.trace_flags or constants.TRACE_FLAGS_NONE, 'x')
    )

    return constants.TRACE_HEADER_DELIMITER.join(
        [
            span_context.trace_id,
            span_context.span_id,
            constants.PARENT_SPAN_ID,
            trace_flags,
        ]
    )


def decode_span_context(serialized):
    """
    Parse the value of an uber-trace-id header.

    Only the number of fields is checked, None is returned when there are not
    exactly 4 of them. The trace-id is left-padded with zeros to 32
    characters, the span-id is kept verbatim. Flags that are not two hex
    digits are read as sampled.

    :param str serialized: the header value, possibly percent-encoded
    :rtype: SpanContext or None
    """
    fields = _percent_decode(serialized).split(
        constants.TRACE_HEADER_DELIMITER
    )

    if len(fields) != constants.TRACE_HEADER_FIELD_COUNT:
        _LOG.debug(
            "Ignoring trace header with {} fields: {}".format(
                len(fields), serialized
            )
        )
        return None

    trace_id, span_id, _, flags = fields

    trace_id = trace_id.rjust(constants.TRACE_ID_WIDTH, '0')

    if _FLAGS.fullmatch(flags):
        # Jaeger clients read these two digits with a decimal radix
        trace_flags = (_parse_decimal_prefix(flags) or 0) & \
            constants.TRACE_FLAGS_SAMPLED
    else:
        _LOG.debug("Invalid flags {!r}, assuming sampled".format(flags))
        trace_flags = constants.TRACE_FLAGS_SAMPLED

    return SpanContext(
        trace_id=trace_id,
        span_id=span_id,
        is_remote=True,
        trace_flags=trace_flags
    )
