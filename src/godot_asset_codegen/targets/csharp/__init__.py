"""C# render target.

Generates Prefabs.g.cs and Scenes.g.cs for Godot .NET projects.
"""

from .renderer import CSharpRenderer, namespace_name

# Auto-register with the registry
from ...registry import TargetRegistry

TargetRegistry.register_renderer(CSharpRenderer.name, CSharpRenderer)

__all__ = ["CSharpRenderer", "namespace_name"]
