"""RPC metadata models."""

from .endpoint import Endpoint
from .rpc_info import RPCInfo

__all__ = ["Endpoint", "RPCInfo"]
