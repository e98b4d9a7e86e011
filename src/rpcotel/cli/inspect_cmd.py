"""Inspect subcommand implementation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from ..core import (
    Config,
    DefaultsProvider,
    Option,
    new_config,
    with_record_source_operation,
    with_stack_trace,
)
from ..renderers import describe_component, describe_formatter, render_config
from ..version import INSTRUMENTATION_NAME, sem_version

VerbosityArg = Literal["minimal", "standard", "full"]


def run_inspect(
    verbosity: VerbosityArg,
    *,
    stack_trace: bool,
    record_source_operation: bool,
    as_json: bool,
    output_path: Path | None,
    defaults: DefaultsProvider | None = None,
) -> int:
    if output_path is not None and not as_json:
        raise ValueError("--output is only supported when --json is provided")

    options: list[Option] = [
        with_stack_trace(stack_trace),
        with_record_source_operation(record_source_operation),
    ]
    config = new_config(*options, defaults=defaults)
    summary = build_summary(config)

    if as_json:
        payload = json.dumps(summary, ensure_ascii=True, sort_keys=True)
        if output_path is not None:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(payload + "\n", encoding="utf-8")
        else:
            print(payload)
        return 0

    print(f"Instrumentation: {INSTRUMENTATION_NAME}")
    print(f"Version: {sem_version()}")
    print(f"Tracer provider: {summary['tracer_provider']}")
    print(f"Meter provider: {summary['meter_provider']}")
    print(f"Propagator: {summary['text_map_propagator']}")
    print()
    print(render_config(config, verbosity=verbosity))
    return 0


def build_summary(config: Config) -> dict[str, object]:
    return {
        "instrumentation_name": INSTRUMENTATION_NAME,
        "instrumentation_version": sem_version(),
        "tracer": describe_component(config.tracer),
        "meter": describe_component(config.meter),
        "tracer_provider": describe_component(config.tracer_provider),
        "meter_provider": describe_component(config.meter_provider),
        "text_map_propagator": describe_component(config.text_map_propagator),
        "propagator_fields": sorted(config.text_map_propagator.fields),
        "span_name_formatter": describe_formatter(config.span_name_formatter),
        "with_stack_trace": config.with_stack_trace,
        "record_source_operation": config.record_source_operation,
    }
