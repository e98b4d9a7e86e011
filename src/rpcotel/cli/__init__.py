"""Command line entry points."""

from .inspect_cmd import build_summary, run_inspect
from .main import build_parser, main

__all__ = ["build_parser", "build_summary", "main", "run_inspect"]
