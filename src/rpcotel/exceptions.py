"""Public exception types for rpcotel."""

from __future__ import annotations


class RpcotelError(Exception):
    """Base class for all rpcotel exceptions."""


class RpcotelConfigError(RpcotelError):
    """Raised when resolved configuration values have the wrong type."""


class MissingRPCInfoError(RpcotelError):
    """Raised when a call context carries no RPC metadata."""
