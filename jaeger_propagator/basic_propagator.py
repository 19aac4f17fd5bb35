from logging import getLogger

from basictracer.propagator import Propagator
from basictracer.context import SpanContext as BasicSpanContext
from opentracing import SpanContextCorruptedException

from .constants import TRACE_FLAGS_NONE, TRACE_FLAGS_SAMPLED
from .context import (
    Context,
    SpanContext,
    create_baggage,
    get_baggage,
    get_span_context,
    set_baggage,
    set_span_context,
)
from .propagator import JaegerPropagator

_LOG = getLogger(__name__)


class JaegerBasicPropagator(Propagator):
    """
    BasicTracer Propagator for the Jaeger HTTP header format.

    Register it for Format.HTTP_HEADERS (or Format.TEXT_MAP) to have a
    BasicTracer read and write uber-trace-id and uberctx-* headers:

        tracer.register_propagator(
            Format.HTTP_HEADERS, JaegerBasicPropagator()
        )

    Unlike JaegerPropagator, extract raises SpanContextCorruptedException
    when no usable trace header is found, as the OpenTracing API requires.
    """

    def __init__(self, trace_header=None):
        self._propagator = JaegerPropagator(trace_header)

    def inject(self, span_context, carrier):

        context = Context()

        traceid = span_context.trace_id
        spanid = span_context.span_id

        if traceid is not None and spanid is not None:
            context = set_span_context(
                context,
                SpanContext(
                    trace_id=format(traceid, "x"),
                    span_id=format(spanid, "x"),
                    trace_flags=(
                        TRACE_FLAGS_SAMPLED if span_context.sampled
                        else TRACE_FLAGS_NONE
                    )
                )
            )
        else:
            _LOG.warning(
                "Not injecting {} header, trace_id and span_id must be "
                "defined".format(self._propagator.trace_header)
            )

        if span_context.baggage:
            context = set_baggage(
                context, create_baggage(span_context.baggage)
            )

        self._propagator.inject(carrier, context)

    def extract(self, carrier):

        context = self._propagator.extract(carrier)

        span_context = get_span_context(context)

        if span_context is None:
            _LOG.warning(
                "No valid {} header was received".format(
                    self._propagator.trace_header
                )
            )
            raise SpanContextCorruptedException()

        try:
            trace_id = int(span_context.trace_id, 16)
            span_id = int(span_context.span_id, 16)
        except ValueError:
            _LOG.warning(
                "Received an invalid {} header: {}:{}".format(
                    self._propagator.trace_header,
                    span_context.trace_id,
                    span_context.span_id
                )
            )
            raise SpanContextCorruptedException()

        baggage = get_baggage(context)
        if baggage is not None:
            baggage = {
                key: entry.value for key, entry in baggage.get_all_entries()
            }

        return BasicSpanContext(
            trace_id=trace_id,
            span_id=span_id,
            baggage=baggage or None,
            sampled=(span_context.trace_flags & TRACE_FLAGS_SAMPLED) == 1
        )
