from logging import getLogger

from .baggage_header import decode_baggage, encode_baggage, merge_baggage
from .carrier import default_getter, default_setter
from .constants import UBER_TRACE_ID_HEADER
from .context import (
    Context,
    get_baggage,
    get_span_context,
    is_tracing_suppressed,
    set_baggage,
    set_span_context,
)
from .trace_header import decode_span_context, encode_span_context
from .util import _first_value

_LOG = getLogger(__name__)


class JaegerPropagator(object):
    """
    Propagator for the Jaeger HTTP header format.

        uber-trace-id: {trace-id}:{span-id}:0:{flags}
        uberctx-{key}: {percent-encoded value}

    See: https://www.jaegertracing.io/docs/latest/client-libraries/#propagation-format

    The propagator keeps no state besides the name of the trace header, one
    instance can be used from any number of threads.
    """

    def __init__(self, trace_header=None):
        """
        :param str trace_header: header to inject the trace context into and
            extract it from, defaults to uber-trace-id
        """
        self._trace_header = trace_header or UBER_TRACE_ID_HEADER

    @property
    def trace_header(self):
        return self._trace_header

    @property
    def fields(self):
        """
        The names of the headers written by inject.

        The uberctx-* baggage headers depend on the baggage keys and are not
        part of this set.
        """
        return {self._trace_header}

    def inject(self, carrier, context=None, setter=default_setter):
        """
        Write the span context and the baggage of context into carrier.

        The trace header is skipped when tracing is suppressed for context,
        the baggage headers are written anyway.
        """
        if context is None:
            context = Context()

        span_context = get_span_context(context)
        baggage = get_baggage(context)

        if span_context is not None and not is_tracing_suppressed(context):
            setter.set(
                carrier,
                self._trace_header,
                encode_span_context(span_context)
            )

        if baggage is not None:
            for key, value in encode_baggage(baggage):
                setter.set(carrier, key, value)

    def extract(self, carrier, context=None, getter=default_getter):
        """
        Read the span context and the baggage found in carrier into context.

        Never raises on malformed headers. When carrier holds neither a valid
        trace header nor any baggage header, context itself is returned.

        :rtype: Context
        """
        if context is None:
            context = Context()

        new_context = context

        trace_header = _first_value(getter.get(carrier, self._trace_header))

        if isinstance(trace_header, str):
            span_context = decode_span_context(trace_header)
            if span_context is not None:
                new_context = set_span_context(new_context, span_context)

        baggage_values = decode_baggage(
            getter.keys(carrier), lambda key: getter.get(carrier, key)
        )

        if not baggage_values:
            return new_context

        _LOG.debug(
            "Found {} baggage headers".format(len(baggage_values))
        )

        return set_baggage(
            new_context,
            merge_baggage(get_baggage(context), baggage_values)
        )
