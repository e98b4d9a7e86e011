"""Basic usage example resolving a config and naming a span from call context."""

from __future__ import annotations

from opentelemetry.context import get_current

from rpcotel import Endpoint, RPCInfo, new_config, with_record_source_operation, with_stack_trace
from rpcotel.core import push_rpc_info, reset_rpc_info
from rpcotel.renderers import render_config


def main() -> None:
    config = new_config(with_stack_trace(False), with_record_source_operation(True))
    print(render_config(config, verbosity="full"))

    token = push_rpc_info(
        RPCInfo(
            source=Endpoint(service_name="client", method="Call"),
            destination=Endpoint(service_name="echo", method="Echo"),
        )
    )
    try:
        print(f"Span name: {config.span_name_formatter(get_current())}")
    finally:
        reset_rpc_info(token)


if __name__ == "__main__":
    main()
