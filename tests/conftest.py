from __future__ import annotations

import pytest
from opentelemetry.metrics import Meter, NoOpMeter, NoOpMeterProvider
from opentelemetry.trace import NoOpTracer, NoOpTracerProvider, Tracer
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator
from opentelemetry.util.types import Attributes

from rpcotel.core import StaticDefaults


class RecordingTracerProvider(NoOpTracerProvider):
    """Hands out a fresh tracer per call and remembers how it was asked."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []
        self.tracers: list[Tracer] = []

    def get_tracer(
        self,
        instrumenting_module_name: str,
        instrumenting_library_version: str | None = None,
        schema_url: str | None = None,
        attributes: Attributes | None = None,
    ) -> Tracer:
        self.calls.append((instrumenting_module_name, instrumenting_library_version))
        tracer = NoOpTracer()
        self.tracers.append(tracer)
        return tracer


class RecordingMeterProvider(NoOpMeterProvider):
    def __init__(self) -> None:
        self.meters: list[Meter] = []

    def get_meter(
        self,
        name: str,
        version: str | None = None,
        schema_url: str | None = None,
        attributes: Attributes | None = None,
    ) -> Meter:
        meter = NoOpMeter(name, version=version)
        self.meters.append(meter)
        return meter


@pytest.fixture
def tracer_provider() -> RecordingTracerProvider:
    return RecordingTracerProvider()


@pytest.fixture
def meter_provider() -> RecordingMeterProvider:
    return RecordingMeterProvider()


@pytest.fixture
def propagator() -> TraceContextTextMapPropagator:
    return TraceContextTextMapPropagator()


@pytest.fixture
def defaults(
    tracer_provider: RecordingTracerProvider,
    meter_provider: RecordingMeterProvider,
    propagator: TraceContextTextMapPropagator,
) -> StaticDefaults:
    return StaticDefaults(
        tracer_provider=tracer_provider,
        meter_provider=meter_provider,
        text_map_propagator=propagator,
    )
