"""Core utilities for asset code generation.

This package contains the shared types, errors, path/identifier
derivation and manifest validation used by every render target.
"""

from .errors import (
    AssetPathError,
    CodegenError,
    IdentifierCollisionError,
    ManifestError,
    RootSegmentNotFoundError,
)
from .naming import derive_entry, derive_identifier, relative_path, snake_to_pascal
from .types import AssetEntry, Category, ClassifiedAsset, CollectedAssets, GeneratedModule, Manifest, RootContext
from .validator import validate_manifest, validate_manifest_with_error_details

__all__ = [
    "AssetEntry",
    "AssetPathError",
    "Category",
    "ClassifiedAsset",
    "CodegenError",
    "CollectedAssets",
    "GeneratedModule",
    "IdentifierCollisionError",
    "Manifest",
    "ManifestError",
    "RootContext",
    "RootSegmentNotFoundError",
    "derive_entry",
    "derive_identifier",
    "relative_path",
    "snake_to_pascal",
    "validate_manifest",
    "validate_manifest_with_error_details",
]
