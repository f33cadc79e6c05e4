"""Generation pipeline.

This module ties the collector, root-folder resolution and emitter
together into one run. The pipeline is target-agnostic and delegates
rendering to the renderer it was created with.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .collector import collect
from .config import resolve_root_context
from .core.types import Category, GeneratedModule
from .emitter import build_entries, emit_module
from .targets.base import Renderer


@dataclass(frozen=True)
class GenerationResult:
    """Both modules of a completed run."""

    namespace: str
    target: str
    prefabs: GeneratedModule
    scenes: GeneratedModule

    @property
    def modules(self) -> tuple[GeneratedModule, GeneratedModule]:
        return (self.prefabs, self.scenes)


class GenerationPipeline:
    """Main interface for lookup module generation.

    Example:
        >>> # Via registry (recommended)
        >>> from godot_asset_codegen import TargetRegistry
        >>> pipeline = TargetRegistry.create_pipeline(
        ...     'python',
        ...     namespace='my_game',
        ...     properties={'build_property.projectdir': '/dev/my_game'},
        ... )
        >>> result = pipeline.run(['/dev/my_game/Scenes/main.tscn'])
        >>>
        >>> # Direct instantiation (advanced)
        >>> from godot_asset_codegen.targets.csharp import CSharpRenderer
        >>> pipeline = GenerationPipeline(CSharpRenderer(), 'MyGame', properties)
    """

    def __init__(self, renderer: Renderer, namespace: str, properties: Mapping[str, str]):
        """Initialize the pipeline.

        Args:
            renderer: Renderer for the target language
            namespace: Namespace or package the generated code belongs to
            properties: Build properties (see config.PROJECT_DIR_PROPERTY)
        """
        self.renderer = renderer
        self.namespace = namespace
        self.properties = properties

    def run(self, paths: Iterable[str]) -> GenerationResult:
        """Generate the prefab and scene modules for a list of files.

        Both modules are rendered before anything is returned, so an
        error in either category aborts the whole run.

        Args:
            paths: Candidate file paths from the build

        Returns:
            GenerationResult with both rendered modules

        Raises:
            CodegenError: If any asset path or identifier is invalid
        """
        root = resolve_root_context(self.properties)
        collected = collect(paths, root)

        modules = {}
        for category in Category:
            entries = build_entries(
                collected.for_category(category),
                root,
                self.renderer.legalize_identifier,
            )
            modules[category] = emit_module(category, entries, self.namespace, self.renderer)

        return GenerationResult(
            namespace=self.namespace,
            target=self.renderer.name,
            prefabs=modules[Category.PREFAB],
            scenes=modules[Category.SCENE],
        )
