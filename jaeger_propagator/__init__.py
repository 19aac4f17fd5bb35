"""
Jaeger propagation for distributed tracing contexts.

Reads and writes the ``uber-trace-id`` and ``uberctx-*`` text headers.
"""
from .constants import UBER_TRACE_ID_HEADER, UBER_BAGGAGE_HEADER_PREFIX
from .context import (
    Baggage,
    BaggageEntry,
    Context,
    SpanContext,
    create_baggage,
    get_baggage,
    get_span_context,
    is_tracing_suppressed,
    set_baggage,
    set_span_context,
    suppress_tracing,
)
from .carrier import DictGetter, DictSetter, Getter, Setter
from .propagator import JaegerPropagator

__all__ = [
    'UBER_TRACE_ID_HEADER',
    'UBER_BAGGAGE_HEADER_PREFIX',
    'Baggage',
    'BaggageEntry',
    'Context',
    'SpanContext',
    'create_baggage',
    'get_baggage',
    'get_span_context',
    'is_tracing_suppressed',
    'set_baggage',
    'set_span_context',
    'suppress_tracing',
    'DictGetter',
    'DictSetter',
    'Getter',
    'Setter',
    'JaegerPropagator',
]
