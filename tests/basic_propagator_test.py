from unittest import TestCase

from pytest import raises
from basictracer import BasicTracer
from basictracer.context import SpanContext
from opentracing import Format
from opentracing import SpanContextCorruptedException

from jaeger_propagator.basic_propagator import JaegerBasicPropagator


class JaegerBasicPropagatorTest(TestCase):
    def setUp(self):
        self._tracer = BasicTracer()
        self._tracer.register_propagator(
            Format.HTTP_HEADERS, JaegerBasicPropagator()
        )

    def tracer(self):
        return self._tracer

    def test_inject(self):
        carrier = {}
        span = self.tracer().start_span("test_inject")
        span.set_baggage_item("checked", "baggage value")
        self.tracer().inject(span.context, Format.HTTP_HEADERS, carrier)
        self.assertEqual(
            carrier,
            {
                "uber-trace-id": "{}:{}:0:01".format(
                    format(span.context.trace_id, "x"),
                    format(span.context.span_id, "x")
                ),
                "uberctx-checked": "baggage%20value",
            }
        )

        carrier = {}
        JaegerBasicPropagator().inject(
            SpanContext(trace_id=12, span_id=345, sampled=False), carrier
        )
        self.assertEqual(carrier, {"uber-trace-id": "c:159:0:00"})

    def test_inject_without_ids(self):
        for trace_id, span_id in [(None, 345), (12, None), (None, None)]:
            carrier = {}
            JaegerBasicPropagator().inject(
                SpanContext(
                    trace_id=trace_id,
                    span_id=span_id,
                    baggage={"checked": "baggage"}
                ),
                carrier
            )
            self.assertEqual(carrier, {"uberctx-checked": "baggage"})

    def test_extract(self):
        result = self.tracer().extract(
            Format.HTTP_HEADERS,
            {
                "uber-trace-id": "c:159:0:01",
                "uberctx-checked": "baggage%20value",
                "unrelated": "header",
            }
        )

        self.assertEqual(12, result.trace_id)
        self.assertEqual(345, result.span_id)
        self.assertTrue(result.sampled)
        self.assertEqual({"checked": "baggage value"}, result.baggage)

        result = self.tracer().extract(
            Format.HTTP_HEADERS, {"uber-trace-id": "c:159:0:00"}
        )

        self.assertFalse(result.sampled)
        self.assertEqual({}, result.baggage)

    def test_extract_custom_trace_header(self):
        result = JaegerBasicPropagator("custom-trace-id").extract(
            {"custom-trace-id": "c:159:0:01"}
        )
        self.assertEqual(12, result.trace_id)

    def test_invalid_trace_header(self):

        with raises(SpanContextCorruptedException):
            self.tracer().extract(
                Format.HTTP_HEADERS, {"uberctx-checked": "baggage"}
            )

        with raises(SpanContextCorruptedException):
            self.tracer().extract(
                Format.HTTP_HEADERS, {"uber-trace-id": "c:159:0"}
            )

        with raises(SpanContextCorruptedException):
            self.tracer().extract(
                Format.HTTP_HEADERS, {"uber-trace-id": "zz:159:0:01"}
            )

    def test_propagation(self):
        tracer = self.tracer()

        def test_attribute(attribute_name, attribute_value):
            inject_span = tracer.start_span("test_propagation")
            setattr(
                inject_span.context, attribute_name, int(attribute_value, 16)
            )

            carrier = {}
            tracer.inject(inject_span.context, Format.HTTP_HEADERS, carrier)

            extract_span_context = tracer.extract(Format.HTTP_HEADERS, carrier)

            self.assertEqual(
                getattr(inject_span.context, attribute_name),
                getattr(extract_span_context, attribute_name)
            )

        test_attribute("trace_id", "ef5705a090040838f1359ebafa5c0c6")
        test_attribute("trace_id", "ef5705a09004083")
        test_attribute("span_id", "aef5705a09004083")

        inject_span = tracer.start_span("test_propagation")
        inject_span.set_baggage_item("key1", "value1")
        inject_span.set_baggage_item("key2", "value 2/$")

        carrier = {}
        tracer.inject(inject_span.context, Format.HTTP_HEADERS, carrier)
        self.assertEqual(carrier["uberctx-key2"], "value%202%2F%24")

        extract_span_context = tracer.extract(Format.HTTP_HEADERS, carrier)
        self.assertEqual(
            {"key1": "value1", "key2": "value 2/$"},
            extract_span_context.baggage
        )
