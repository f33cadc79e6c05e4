"""Type definitions for asset code generation.

This module defines the value objects that flow between the collector,
the emitter and the render targets, plus TypedDict classes that mirror
the JSON schema in schemas/asset_manifest.schema.json.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TypedDict

# Extension of Godot scene-description files
SCENE_EXTENSION = ".tscn"

# Scheme understood by the Godot resource loader
RESOURCE_PREFIX = "res://"


class Category(Enum):
    """Role of a scene file within the project.

    The value is the reserved folder name that marks the role.
    """

    PREFAB = "Prefabs"
    SCENE = "Scenes"

    @property
    def folder(self) -> str:
        return self.value

    @property
    def type_name(self) -> str:
        """Name of the generated identifier type (e.g. 'Prefab')."""
        return self.value[:-1]

    @property
    def module_name(self) -> str:
        """Plural label of the generated module (e.g. 'Prefabs')."""
        return self.value


@dataclass(frozen=True)
class RootContext:
    """Where the project root sits in asset paths.

    folder is the root folder name; directory is the full project
    directory with forward slashes, when the build supplied one.
    """

    folder: str = ""
    directory: str = ""


@dataclass(frozen=True)
class ClassifiedAsset:
    """A candidate file assigned to exactly one category."""

    category: Category
    path: str  # Source path as supplied by the caller


@dataclass
class CollectedAssets:
    """Collector output: two ordered, disjoint sequences."""

    prefabs: list[ClassifiedAsset] = field(default_factory=list)
    scenes: list[ClassifiedAsset] = field(default_factory=list)

    def for_category(self, category: Category) -> list[ClassifiedAsset]:
        if category is Category.PREFAB:
            return self.prefabs
        return self.scenes


@dataclass(frozen=True)
class AssetEntry:
    """Identifier and resource path derived from a classified asset."""

    identifier: str  # Enumerant name, e.g. 'EnemiesGoblinWarrior'
    relative_path: str  # Project-relative, forward slashes, keeps extension
    source_path: str  # Path the entry was derived from

    @property
    def resource_path(self) -> str:
        return f"{RESOURCE_PREFIX}{self.relative_path}"


@dataclass(frozen=True)
class GeneratedModule:
    """Rendered source text for one category."""

    category: Category
    filename: str
    source: str
    entries: tuple[AssetEntry, ...] = ()


class ManifestEntry(TypedDict):
    """Single generated identifier within the manifest."""

    identifier: str
    resource_path: str  # res:// URI
    relative_path: str  # Path relative to the project root


class Manifest(TypedDict):
    """Machine-readable summary of one generation run."""

    namespace: str
    target: str  # Render target name, e.g. 'python' or 'csharp'
    prefabs: list[ManifestEntry]
    scenes: list[ManifestEntry]
