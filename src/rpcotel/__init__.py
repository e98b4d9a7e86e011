"""rpcotel: OpenTelemetry instrumentation config for RPC middleware.

Resolve a config from options layered over the process-wide defaults:
    from rpcotel import new_config, with_stack_trace
    config = new_config(with_stack_trace(False))

Inject the defaults explicitly (tests, deterministic wiring):
    from rpcotel.core import StaticDefaults
    config = new_config(defaults=StaticDefaults(tracer_provider=my_provider))
"""

from __future__ import annotations

from .core import (
    Config,
    DefaultsProvider,
    GlobalDefaults,
    Option,
    StaticDefaults,
    default_span_name_formatter,
    new_config,
    with_meter,
    with_meter_provider,
    with_record_source_operation,
    with_span_name_formatter,
    with_stack_trace,
    with_text_map_propagator,
    with_tracer,
    with_tracer_provider,
)
from .exceptions import MissingRPCInfoError, RpcotelConfigError, RpcotelError
from .models import Endpoint, RPCInfo
from .version import INSTRUMENTATION_NAME, __version__, sem_version

__all__ = [
    "INSTRUMENTATION_NAME",
    "Config",
    "DefaultsProvider",
    "Endpoint",
    "GlobalDefaults",
    "MissingRPCInfoError",
    "Option",
    "RPCInfo",
    "RpcotelConfigError",
    "RpcotelError",
    "StaticDefaults",
    "__version__",
    "default_span_name_formatter",
    "new_config",
    "sem_version",
    "with_meter",
    "with_meter_provider",
    "with_record_source_operation",
    "with_span_name_formatter",
    "with_stack_trace",
    "with_text_map_propagator",
    "with_tracer",
    "with_tracer_provider",
]
