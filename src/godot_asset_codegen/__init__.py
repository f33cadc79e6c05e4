"""Godot Asset Codegen.

This package scans a Godot project's scene files and generates typed
lookup modules that map Prefab and Scene identifiers to res:// paths,
so game code never hardcodes resource path strings.
"""

# Core library interface
from .collector import classify, collect
from .config import resolve_root_context, resolve_root_folder
from .emitter import build_entries, emit_module
from .pipeline import GenerationPipeline, GenerationResult
from .registry import TargetRegistry

# Core utilities
from .core import AssetEntry, Category, ClassifiedAsset, GeneratedModule, Manifest, RootContext
from .core import AssetPathError, CodegenError, IdentifierCollisionError, ManifestError
from .core import RootSegmentNotFoundError
from .core import validate_manifest, validate_manifest_with_error_details
from .manifest import build_manifest

# CLI interface
from .cli import generate, main

__version__ = "0.1.0"

# Auto-discover and register all render targets
TargetRegistry.discover_targets()

__all__ = [
    # Primary library interface
    "GenerationPipeline",
    "GenerationResult",
    "TargetRegistry",
    "classify",
    "collect",
    "resolve_root_context",
    "resolve_root_folder",
    "build_entries",
    "emit_module",
    # Core utilities
    "AssetEntry",
    "Category",
    "ClassifiedAsset",
    "GeneratedModule",
    "Manifest",
    "RootContext",
    "build_manifest",
    "validate_manifest",
    "validate_manifest_with_error_details",
    # Errors
    "AssetPathError",
    "CodegenError",
    "IdentifierCollisionError",
    "ManifestError",
    "RootSegmentNotFoundError",
    # CLI
    "generate",
    "main",
]
