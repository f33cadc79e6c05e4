"""Scene file filtering and classification.

This module sorts candidate paths into prefabs and scenes based on the
reserved folders they live under. It never touches the filesystem.
"""

from collections.abc import Iterable

from .core.naming import find_relative_path, path_segments
from .core.types import SCENE_EXTENSION, Category, ClassifiedAsset, CollectedAssets, RootContext


def is_scene_file(path: str) -> bool:
    """Check whether a path has the scene extension (any case)."""
    return path.lower().endswith(SCENE_EXTENSION)


def classify(path: str, root: RootContext | None = None) -> Category | None:
    """Assign a path to a category.

    Prefab folder membership is checked first, so a prefab nested in a
    scenes folder ("Scenes/Town/Prefabs/door.tscn") is a prefab.

    Only the part below the project root is examined, so a project kept
    in ".../Scenes/my_game" does not turn every file into a scene. If the
    root cannot be located the whole path is examined and the asset is
    rejected later, when its relative path is derived.

    Returns:
        The category, or None if the path is under neither reserved folder
    """
    rel_path = find_relative_path(path, root) if root is not None else None
    segments = {segment.lower() for segment in path_segments(rel_path or path)}

    for category in (Category.PREFAB, Category.SCENE):
        if category.folder.lower() in segments:
            return category
    return None


def collect(paths: Iterable[str], root: RootContext | None = None) -> CollectedAssets:
    """Filter candidate paths and partition them by category.

    Input order is preserved. Duplicates are passed through untouched.

    Args:
        paths: Candidate file paths, with either separator style
        root: Resolved project root, limits classification to paths below it

    Returns:
        CollectedAssets holding the prefab and scene sequences
    """
    collected = CollectedAssets()

    for path in paths:
        if not is_scene_file(path):
            continue

        category = classify(path, root)
        if category is None:
            continue

        collected.for_category(category).append(ClassifiedAsset(category=category, path=path))

    return collected
