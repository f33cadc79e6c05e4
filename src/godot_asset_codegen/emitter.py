"""Lookup module emission.

One parametric code path serves both categories: entries are derived,
checked for identifier collisions and handed to a renderer.
"""

import sys
from collections.abc import Callable, Iterable, Sequence

from .core.errors import IdentifierCollisionError
from .core.naming import derive_entry
from .core.types import AssetEntry, Category, ClassifiedAsset, GeneratedModule, RootContext
from .targets.base import Renderer


def build_entries(
    assets: Iterable[ClassifiedAsset],
    root: RootContext,
    legalize: Callable[[str], str] | None = None,
) -> list[AssetEntry]:
    """Derive unique asset entries in discovery order.

    The same relative path listed twice is kept once. Two different
    paths with the same identifier are an error, never an overwrite.

    Args:
        assets: Classified assets of a single category
        root: Resolved project root
        legalize: Optional target-specific identifier fix-up

    Returns:
        List of entries with distinct identifiers

    Raises:
        RootSegmentNotFoundError: If an asset lies outside the project root
        IdentifierCollisionError: If two paths normalize to one identifier
    """
    entries: list[AssetEntry] = []
    seen: dict[str, AssetEntry] = {}

    for asset in assets:
        entry = derive_entry(asset, root)
        if legalize is not None:
            entry = AssetEntry(
                identifier=legalize(entry.identifier),
                relative_path=entry.relative_path,
                source_path=entry.source_path,
            )

        existing = seen.get(entry.identifier)
        if existing is not None:
            if existing.relative_path == entry.relative_path:
                print(f"Warning: Skipping duplicate asset {entry.source_path}", file=sys.stderr)
                continue
            raise IdentifierCollisionError(entry.identifier, existing.source_path, entry.source_path)

        seen[entry.identifier] = entry
        entries.append(entry)

    return entries


def emit_module(
    category: Category,
    entries: Sequence[AssetEntry],
    namespace: str,
    renderer: Renderer,
) -> GeneratedModule:
    """Render the lookup module for one category.

    An empty entry list still produces a complete module.
    """
    return GeneratedModule(
        category=category,
        filename=renderer.module_filename(category),
        source=renderer.render(category, entries, namespace),
        entries=tuple(entries),
    )
