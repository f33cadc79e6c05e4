"""Python render target."""

from .renderer import PythonRenderer

# Auto-register with the registry
from ...registry import TargetRegistry

TargetRegistry.register_renderer(PythonRenderer.name, PythonRenderer)

__all__ = ["PythonRenderer"]
