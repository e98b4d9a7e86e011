"""Console renderers."""

from .console import describe_component, describe_formatter, render_config

__all__ = ["describe_component", "describe_formatter", "render_config"]
