"""Options: single-field mutations applied in order by the resolver."""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from enum import StrEnum

from opentelemetry.context import Context
from opentelemetry.metrics import Meter, MeterProvider
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.trace import Tracer, TracerProvider
from pydantic import BaseModel, ConfigDict


class ConfigField(StrEnum):
    TRACER = "tracer"
    METER = "meter"
    TRACER_PROVIDER = "tracer_provider"
    METER_PROVIDER = "meter_provider"
    TEXT_MAP_PROPAGATOR = "text_map_propagator"
    SPAN_NAME_FORMATTER = "span_name_formatter"
    WITH_STACK_TRACE = "with_stack_trace"
    RECORD_SOURCE_OPERATION = "record_source_operation"


class Option(BaseModel):
    """Overwrite one configuration field with a value.

    Options never read the draft they are applied to, so options on distinct
    fields commute and, on the same field, the last one applied wins.
    """

    model_config = ConfigDict(frozen=True)

    target: ConfigField
    value: object

    def apply(self, draft: MutableMapping[str, object]) -> None:
        draft[self.target.value] = self.value


def with_tracer(tracer: Tracer) -> Option:
    return Option(target=ConfigField.TRACER, value=tracer)


def with_meter(meter: Meter) -> Option:
    """Set the meter directly.

    The resolver always derives the meter from the meter provider after all
    options are applied, so this value never reaches the resolved config.
    Use ``with_meter_provider`` instead.
    """
    return Option(target=ConfigField.METER, value=meter)


def with_tracer_provider(provider: TracerProvider) -> Option:
    """Set the tracer provider.

    The default tracer is built from the default provider before options are
    applied; pass ``with_tracer`` as well to use a tracer from ``provider``.
    """
    return Option(target=ConfigField.TRACER_PROVIDER, value=provider)


def with_meter_provider(provider: MeterProvider) -> Option:
    return Option(target=ConfigField.METER_PROVIDER, value=provider)


def with_span_name_formatter(formatter: Callable[[Context], str]) -> Option:
    """Set the function that names spans from a call context.

    The formatter is only called by the middleware, never during resolution.
    """
    return Option(target=ConfigField.SPAN_NAME_FORMATTER, value=formatter)


def with_stack_trace(stack_trace: bool) -> Option:
    return Option(target=ConfigField.WITH_STACK_TRACE, value=stack_trace)


def with_record_source_operation(record_source_operation: bool) -> Option:
    """Record the source operation as an extra metric dimension."""
    return Option(target=ConfigField.RECORD_SOURCE_OPERATION, value=record_source_operation)


def with_text_map_propagator(propagator: TextMapPropagator) -> Option:
    return Option(target=ConfigField.TEXT_MAP_PROPAGATOR, value=propagator)
