"""Resolved instrumentation configuration and the resolver that builds it."""

from __future__ import annotations

import warnings
from collections.abc import Callable
from typing import cast

from opentelemetry.context import Context
from opentelemetry.metrics import Meter, MeterProvider
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.trace import Tracer, TracerProvider
from pydantic import BaseModel, ConfigDict, SkipValidation, ValidationError

from ..exceptions import MissingRPCInfoError, RpcotelConfigError
from ..version import INSTRUMENTATION_NAME, sem_version
from .context import get_rpc_info
from .defaults import DefaultsProvider, GlobalDefaults
from .options import ConfigField, Option

SpanNameFormatter = Callable[[Context], str]


def default_span_name_formatter(ctx: Context) -> str:
    """Name a span after the method of the call's destination endpoint.

    Raises ``MissingRPCInfoError`` if ``ctx`` carries no RPC metadata.
    """
    info = get_rpc_info(ctx)
    if info is None:
        raise MissingRPCInfoError("call context carries no RPC info; cannot derive span name")
    return info.destination.method


class Config(BaseModel):
    """Fully resolved configuration handed to the tracing middleware.

    Capability and formatter fields are stored as given; only the flags are
    type-checked.
    """

    model_config = ConfigDict(frozen=True, strict=True, arbitrary_types_allowed=True)

    tracer: SkipValidation[Tracer]
    meter: SkipValidation[Meter]
    tracer_provider: SkipValidation[TracerProvider]
    meter_provider: SkipValidation[MeterProvider]
    text_map_propagator: SkipValidation[TextMapPropagator]
    span_name_formatter: SkipValidation[SpanNameFormatter]
    with_stack_trace: bool = True
    record_source_operation: bool = False


def default_config(defaults: DefaultsProvider) -> dict[str, object]:
    """Build the draft every resolution starts from. ``meter`` is left unset."""
    tracer_provider = defaults.tracer_provider()
    return {
        ConfigField.TRACER.value: tracer_provider.get_tracer(INSTRUMENTATION_NAME, sem_version()),
        ConfigField.TRACER_PROVIDER.value: tracer_provider,
        ConfigField.METER_PROVIDER.value: defaults.meter_provider(),
        ConfigField.TEXT_MAP_PROPAGATOR.value: defaults.text_map_propagator(),
        ConfigField.SPAN_NAME_FORMATTER.value: default_span_name_formatter,
        ConfigField.WITH_STACK_TRACE.value: True,
        ConfigField.RECORD_SOURCE_OPERATION.value: False,
    }


def new_config(*options: Option, defaults: DefaultsProvider | None = None) -> Config:
    """Resolve ``options`` over the defaults into a frozen ``Config``.

    Options are applied in order. The meter is then always derived from the
    resolved meter provider, replacing any meter set by ``with_meter``.
    """
    draft = default_config(GlobalDefaults() if defaults is None else defaults)

    for option in options:
        if option.target == ConfigField.METER:
            warnings.warn(
                "rpcotel: with_meter is superseded by the meter derived from meter_provider. "
                "Use with_meter_provider instead.",
                stacklevel=2,
            )
        option.apply(draft)

    meter_provider = cast(MeterProvider, draft[ConfigField.METER_PROVIDER.value])
    draft[ConfigField.METER.value] = meter_provider.get_meter(INSTRUMENTATION_NAME, sem_version())

    try:
        return Config.model_validate(draft)
    except ValidationError as exc:
        raise RpcotelConfigError(f"Invalid instrumentation config: {exc}") from exc
