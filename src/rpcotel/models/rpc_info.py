"""RPCInfo model: RPC metadata carried in the call context."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .endpoint import Endpoint


class RPCInfo(BaseModel):
    """Caller and callee endpoints of a single RPC."""

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    source: Endpoint = Field(default_factory=Endpoint)
    destination: Endpoint = Field(default_factory=Endpoint)
