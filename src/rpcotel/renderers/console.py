"""Rich-based config console rendering."""

from __future__ import annotations

from io import StringIO
from typing import Literal

from rich.console import Console
from rich.tree import Tree

from ..core import Config
from ..version import INSTRUMENTATION_NAME, sem_version

Verbosity = Literal["minimal", "standard", "full"]


def render_config(config: Config, *, verbosity: Verbosity = "standard") -> str:
    tree = Tree(f"Config: {INSTRUMENTATION_NAME} ({sem_version()})")

    flags = tree.add("flags")
    flags.add(f"with_stack_trace: {_on_off(config.with_stack_trace)}")
    flags.add(f"record_source_operation: {_on_off(config.record_source_operation)}")

    if verbosity in ("standard", "full"):
        capabilities = tree.add("capabilities")
        capabilities.add(f"tracer: {describe_component(config.tracer)}")
        capabilities.add(f"meter: {describe_component(config.meter)}")
        capabilities.add(f"tracer_provider: {describe_component(config.tracer_provider)}")
        capabilities.add(f"meter_provider: {describe_component(config.meter_provider)}")
        propagator = capabilities.add(
            f"text_map_propagator: {describe_component(config.text_map_propagator)}"
        )
        if verbosity == "full":
            fields = sorted(config.text_map_propagator.fields)
            propagator.add(f"fields: {', '.join(fields) if fields else '<none>'}")

    formatter = tree.add(f"span_name_formatter: {describe_formatter(config.span_name_formatter)}")
    if verbosity == "full":
        module = getattr(config.span_name_formatter, "__module__", None) or "<unknown>"
        formatter.add(f"module: {module}")

    console = Console(record=True, width=120, markup=False, file=StringIO())
    console.print(tree)
    return console.export_text()


def describe_component(component: object) -> str:
    return type(component).__name__


def describe_formatter(formatter: object) -> str:
    return getattr(formatter, "__qualname__", None) or repr(formatter)


def _on_off(flag: bool) -> str:
    return "on" if flag else "off"
