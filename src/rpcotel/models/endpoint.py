"""Endpoint model for one side of an RPC call."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Endpoint(BaseModel):
    """Service and method of a caller or callee."""

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    service_name: str = ""
    method: str = ""
