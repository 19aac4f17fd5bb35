from collections import OrderedDict, namedtuple

from .constants import TRACE_FLAGS_NONE

# Well-known Context slots
SPAN_CONTEXT_KEY = 'jaeger-propagator-span-context'
BAGGAGE_KEY = 'jaeger-propagator-baggage'
SUPPRESS_TRACING_KEY = 'jaeger-propagator-suppress-tracing'


class SpanContext(object):
    """ SpanContext identifies the span a remote caller is working in.

    trace_id and span_id are kept as the hex strings found on the wire; a
    decoded trace_id is left-padded with zeros to 32 characters. Only the
    lowest bit of trace_flags (sampled) carries meaning.
    """

    def __init__(self, trace_id, span_id, is_remote=False,
                 trace_flags=TRACE_FLAGS_NONE):
        self.trace_id = trace_id
        self.span_id = span_id
        self.is_remote = is_remote
        self.trace_flags = trace_flags

    def __eq__(self, other):
        if not isinstance(other, SpanContext):
            return NotImplemented
        return (
            self.trace_id == other.trace_id and
            self.span_id == other.span_id and
            self.is_remote == other.is_remote and
            self.trace_flags == other.trace_flags
        )

    def __repr__(self):
        return (
            'SpanContext(trace_id={!r}, span_id={!r}, is_remote={!r}, '
            'trace_flags={!r})'.format(
                self.trace_id, self.span_id, self.is_remote, self.trace_flags
            )
        )


BaggageEntry = namedtuple('BaggageEntry', ['value', 'metadata'])
BaggageEntry.__new__.__defaults__ = (None,)


class Baggage(object):
    """Immutable, ordered set of baggage entries.

    Every mutator returns a new Baggage and leaves the receiver untouched.
    """

    def __init__(self, entries=None):
        self._entries = OrderedDict(entries or ())

    def get_entry(self, key):
        return self._entries.get(key)

    def get_all_entries(self):
        """Return the (key, BaggageEntry) pairs in insertion order."""
        return list(self._entries.items())

    def set_entry(self, key, entry):
        entries = OrderedDict(self._entries)
        entries[key] = entry
        return Baggage(entries)

    def remove_entry(self, key):
        entries = OrderedDict(self._entries)
        entries.pop(key, None)
        return Baggage(entries)

    def __len__(self):
        return len(self._entries)

    def __eq__(self, other):
        if not isinstance(other, Baggage):
            return NotImplemented
        return dict(self._entries) == dict(other._entries)

    def __repr__(self):
        return 'Baggage({!r})'.format(dict(self._entries))


def create_baggage(entries=None):
    """Create a Baggage from a mapping or an iterable of pairs.

    Plain string values are wrapped in a BaggageEntry.
    """
    if entries is None:
        return Baggage()
    if hasattr(entries, 'items'):
        entries = entries.items()

    baggage = OrderedDict()
    for key, entry in entries:
        if not isinstance(entry, BaggageEntry):
            entry = BaggageEntry(entry)
        baggage[key] = entry
    return Baggage(baggage)


class Context(object):
    """ Context is an immutable key/value store carrying the current span
    context, the current baggage and the tracing suppression flag.

    set_value returns a new Context, so a Context can be shared freely
    between threads.
    """

    def __init__(self, values=None):
        self._values = dict(values or {})

    def get_value(self, key):
        return self._values.get(key)

    def set_value(self, key, value):
        values = dict(self._values)
        values[key] = value
        return Context(values)

    def __repr__(self):
        return 'Context({!r})'.format(self._values)


def get_span_context(context):
    return context.get_value(SPAN_CONTEXT_KEY)


def set_span_context(context, span_context):
    return context.set_value(SPAN_CONTEXT_KEY, span_context)


def get_baggage(context):
    return context.get_value(BAGGAGE_KEY)


def set_baggage(context, baggage):
    return context.set_value(BAGGAGE_KEY, baggage)


def is_tracing_suppressed(context):
    return bool(context.get_value(SUPPRESS_TRACING_KEY))


def suppress_tracing(context):
    """Return a copy of context for which no trace header is injected."""
    return context.set_value(SUPPRESS_TRACING_KEY, True)
