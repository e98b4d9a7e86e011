"""Call-context accessors for RPC metadata."""

from __future__ import annotations

import contextvars
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from opentelemetry.context import Context, attach, create_key, detach, get_value, set_value

from ..models import RPCInfo

P = ParamSpec("P")
R = TypeVar("R")

_RPC_INFO_KEY = create_key("rpcotel-rpc-info")


def set_rpc_info(info: RPCInfo, context: Context | None = None) -> Context:
    """Return a copy of ``context`` (or the current context) carrying ``info``."""
    return set_value(_RPC_INFO_KEY, info, context)


def get_rpc_info(context: Context | None = None) -> RPCInfo | None:
    value = get_value(_RPC_INFO_KEY, context)
    if isinstance(value, RPCInfo):
        return value
    return None


def push_rpc_info(info: RPCInfo) -> contextvars.Token[Context]:
    return attach(set_rpc_info(info))


def reset_rpc_info(token: contextvars.Token[Context]) -> None:
    detach(token)


def propagate_context(func: Callable[P, R], rpc_info: RPCInfo | None = None) -> Callable[P, R]:
    """Bind ``func`` to a copy of the current context for thread execution.

    If ``rpc_info`` is given, the copy carries it in place of any RPC info
    attached by the caller. The caller's own context is left untouched.
    """
    copied_context = contextvars.copy_context()
    if rpc_info is not None:
        copied_context.run(push_rpc_info, rpc_info)

    def wrapped(*args: P.args, **kwargs: P.kwargs) -> R:
        return copied_context.run(func, *args, **kwargs)

    return wrapped
