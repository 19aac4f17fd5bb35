"""Constants"""

# Header names
UBER_TRACE_ID_HEADER = 'uber-trace-id'
UBER_BAGGAGE_HEADER_PREFIX = 'uberctx'

# uber-trace-id fields
TRACE_HEADER_DELIMITER = ':'
TRACE_HEADER_FIELD_COUNT = 4
TRACE_ID_WIDTH = 32
PARENT_SPAN_ID = '0'

# Trace flags
TRACE_FLAGS_NONE = 0
TRACE_FLAGS_SAMPLED = 1

# Characters left unescaped by encodeURIComponent, besides letters and digits
URI_COMPONENT_SAFE = "-_.!~*'()"
