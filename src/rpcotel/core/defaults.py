"""Sources of the environment-derived defaults."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from opentelemetry import metrics, propagate, trace
from opentelemetry.metrics import MeterProvider, NoOpMeterProvider
from opentelemetry.propagators.composite import CompositePropagator
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.trace import NoOpTracerProvider, TracerProvider


@runtime_checkable
class DefaultsProvider(Protocol):
    """Protocol for supplying the default providers and propagator.

    Each method is called once per resolution, at resolution time.
    """

    def tracer_provider(self) -> TracerProvider: ...
    def meter_provider(self) -> MeterProvider: ...
    def text_map_propagator(self) -> TextMapPropagator: ...


class GlobalDefaults:
    """Reads the process-wide OpenTelemetry registries."""

    def tracer_provider(self) -> TracerProvider:
        return trace.get_tracer_provider()

    def meter_provider(self) -> MeterProvider:
        return metrics.get_meter_provider()

    def text_map_propagator(self) -> TextMapPropagator:
        return propagate.get_global_textmap()


class StaticDefaults:
    """Fixed defaults. Good for tests and deterministic wiring.

    Anything not supplied falls back to an inert no-op implementation.
    """

    def __init__(
        self,
        tracer_provider: TracerProvider | None = None,
        meter_provider: MeterProvider | None = None,
        text_map_propagator: TextMapPropagator | None = None,
    ) -> None:
        if tracer_provider is None:
            tracer_provider = NoOpTracerProvider()
        if meter_provider is None:
            meter_provider = NoOpMeterProvider()
        if text_map_propagator is None:
            text_map_propagator = CompositePropagator([])
        self._tracer_provider = tracer_provider
        self._meter_provider = meter_provider
        self._text_map_propagator = text_map_propagator

    def tracer_provider(self) -> TracerProvider:
        return self._tracer_provider

    def meter_provider(self) -> MeterProvider:
        return self._meter_provider

    def text_map_propagator(self) -> TextMapPropagator:
        return self._text_map_propagator
