"""Option merging and configuration resolution."""

from .config import (
    Config,
    SpanNameFormatter,
    default_config,
    default_span_name_formatter,
    new_config,
)
from .context import get_rpc_info, propagate_context, push_rpc_info, reset_rpc_info, set_rpc_info
from .defaults import DefaultsProvider, GlobalDefaults, StaticDefaults
from .options import (
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

__all__ = [
    "Config",
    "ConfigField",
    "DefaultsProvider",
    "GlobalDefaults",
    "Option",
    "SpanNameFormatter",
    "StaticDefaults",
    "default_config",
    "default_span_name_formatter",
    "get_rpc_info",
    "new_config",
    "propagate_context",
    "push_rpc_info",
    "reset_rpc_info",
    "set_rpc_info",
    "with_meter",
    "with_meter_provider",
    "with_record_source_operation",
    "with_span_name_formatter",
    "with_stack_trace",
    "with_text_map_propagator",
    "with_tracer",
    "with_tracer_provider",
]
