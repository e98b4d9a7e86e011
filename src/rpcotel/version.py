"""Instrumentation identity shared by the tracer and meter."""

from __future__ import annotations

__version__ = "0.1.0"

INSTRUMENTATION_NAME = "rpcotel"


def sem_version() -> str:
    return f"semver:{__version__}"
