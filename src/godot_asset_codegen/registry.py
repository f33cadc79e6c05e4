"""Render target registry.

This module provides a central registry for renderer factories,
enabling target-agnostic pipeline creation and automatic target
discovery.
"""

import importlib
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .pipeline import GenerationPipeline
    from .targets.base import Renderer


class TargetRegistry:
    """Central registry for renderer factories.

    Targets register themselves when imported, and the registry can
    automatically discover every target package.
    """

    _factories: dict[str, Callable[[], "Renderer"]] = {}

    @classmethod
    def register_renderer(cls, name: str, factory: Callable[[], "Renderer"]) -> None:
        """Register a factory for a render target.

        Example:
            >>> TargetRegistry.register_renderer('python', PythonRenderer)
        """
        cls._factories[name] = factory

    @classmethod
    def create_renderer(cls, target: str) -> "Renderer":
        """Instantiate the renderer for a target.

        Raises:
            ValueError: If target is not registered
        """
        if target not in cls._factories:
            available = ", ".join(sorted(cls._factories)) or "none"
            raise ValueError(f"Unknown target: '{target}'. Available targets: {available}")

        return cls._factories[target]()

    @classmethod
    def create_pipeline(
        cls,
        target: str,
        namespace: str,
        properties: Mapping[str, str],
    ) -> "GenerationPipeline":
        """Create a pipeline that renders with a registered target.

        Example:
            >>> pipeline = TargetRegistry.create_pipeline(
            ...     'csharp',
            ...     namespace='MyGame',
            ...     properties={'build_property.projectdir': '/dev/my_game'},
            ... )
        """
        # Import here to avoid circular dependency
        from .pipeline import GenerationPipeline

        return GenerationPipeline(cls.create_renderer(target), namespace, properties)

    @classmethod
    def list_targets(cls) -> list[str]:
        """List all registered target names, sorted."""
        return sorted(cls._factories)

    @classmethod
    def discover_targets(cls) -> None:
        """Import every package under targets/ so it registers itself."""
        targets_dir = Path(__file__).parent / "targets"

        for target_path in sorted(targets_dir.iterdir()):
            if not (target_path / "__init__.py").is_file():
                continue

            importlib.import_module(
                f".targets.{target_path.name}",
                package="godot_asset_codegen",
            )
