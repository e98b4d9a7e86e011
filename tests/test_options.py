from __future__ import annotations

from collections.abc import Callable

import pytest
from opentelemetry.context import Context
from opentelemetry.metrics import NoOpMeter, NoOpMeterProvider
from opentelemetry.trace import NoOpTracer, NoOpTracerProvider
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator
from pydantic import ValidationError

from rpcotel.core import (
    ConfigField,
    Option,
    with_meter,
    with_meter_provider,
    with_record_source_operation,
    with_span_name_formatter,
    with_stack_trace,
    with_text_map_propagator,
    with_tracer,
    with_tracer_provider,
)


def _formatter(ctx: Context) -> str:
    return "custom"


@pytest.mark.parametrize(
    ("constructor", "target", "value"),
    [
        (with_tracer, ConfigField.TRACER, NoOpTracer()),
        (with_meter, ConfigField.METER, NoOpMeter("m")),
        (with_tracer_provider, ConfigField.TRACER_PROVIDER, NoOpTracerProvider()),
        (with_meter_provider, ConfigField.METER_PROVIDER, NoOpMeterProvider()),
        (
            with_text_map_propagator,
            ConfigField.TEXT_MAP_PROPAGATOR,
            TraceContextTextMapPropagator(),
        ),
        (with_span_name_formatter, ConfigField.SPAN_NAME_FORMATTER, _formatter),
        (with_stack_trace, ConfigField.WITH_STACK_TRACE, False),
        (with_record_source_operation, ConfigField.RECORD_SOURCE_OPERATION, True),
    ],
)
def test_constructor_targets_single_field(
    constructor: Callable[[object], Option],
    target: ConfigField,
    value: object,
) -> None:
    option = constructor(value)
    assert option.target == target
    assert option.value is value


def test_apply_overwrites_existing_value_only_for_its_field() -> None:
    draft: dict[str, object] = {"with_stack_trace": True, "record_source_operation": False}

    with_stack_trace(False).apply(draft)

    assert draft == {"with_stack_trace": False, "record_source_operation": False}


def test_apply_sets_field_missing_from_draft() -> None:
    draft: dict[str, object] = {}
    tracer = NoOpTracer()

    with_tracer(tracer).apply(draft)

    assert draft["tracer"] is tracer


def test_same_field_options_last_applied_wins() -> None:
    draft: dict[str, object] = {}
    for option in (with_stack_trace(False), with_stack_trace(True), with_stack_trace(False)):
        option.apply(draft)
    assert draft["with_stack_trace"] is False


def test_formatter_is_not_called_when_option_is_built_or_applied() -> None:
    calls: list[Context] = []

    def formatter(ctx: Context) -> str:
        calls.append(ctx)
        return "never"

    draft: dict[str, object] = {}
    with_span_name_formatter(formatter).apply(draft)

    assert calls == []
    assert draft["span_name_formatter"] is formatter


def test_option_is_immutable() -> None:
    option = with_record_source_operation(True)
    with pytest.raises(ValidationError):
        option.value = False  # type: ignore[misc]


def test_config_field_values_match_record_field_names() -> None:
    assert [field.value for field in ConfigField] == [
        "tracer",
        "meter",
        "tracer_provider",
        "meter_provider",
        "text_map_propagator",
        "span_name_formatter",
        "with_stack_trace",
        "record_source_operation",
    ]
