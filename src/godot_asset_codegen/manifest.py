"""Manifest export for generation results.

The manifest lists every generated identifier with its resource path,
for tools that want the mapping without parsing generated source.
"""

from .core.types import GeneratedModule, Manifest, ManifestEntry
from .pipeline import GenerationResult


def _module_entries(module: GeneratedModule) -> list[ManifestEntry]:
    return [
        ManifestEntry(
            identifier=entry.identifier,
            resource_path=entry.resource_path,
            relative_path=entry.relative_path,
        )
        for entry in module.entries
    ]


def build_manifest(result: GenerationResult) -> Manifest:
    """Summarize a generation run as a schema-conforming manifest."""
    return Manifest(
        namespace=result.namespace,
        target=result.target,
        prefabs=_module_entries(result.prefabs),
        scenes=_module_entries(result.scenes),
    )
