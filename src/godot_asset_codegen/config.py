"""Build configuration lookup.

The generator is configured through a mapping of build properties that
the caller passes in explicitly (the CLI builds it from its arguments).
"""

import sys
from collections.abc import Mapping

from .core.naming import normalize_path
from .core.types import RootContext

# Build property holding the Godot project directory
PROJECT_DIR_PROPERTY = "build_property.projectdir"


def resolve_root_folder(properties: Mapping[str, str]) -> str:
    """Resolve the project root folder name from build properties.

    Example:
        {"build_property.projectdir": "/home/dev/my_game/"} -> "my_game"

    Args:
        properties: Build property mapping

    Returns:
        Last segment of the project directory, or "" if the property is
        missing. An empty root cannot be found in any asset path, so the
        generation fails later instead of producing wrong paths.
    """
    project_dir = (properties.get(PROJECT_DIR_PROPERTY) or "").strip()
    root_folder = project_dir.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]

    if not root_folder:
        print(
            f"Warning: Could not find project root folder ('{PROJECT_DIR_PROPERTY}' is not set)",
            file=sys.stderr,
        )
        return ""

    return root_folder


def resolve_root_context(properties: Mapping[str, str]) -> RootContext:
    """Resolve both the root folder name and the full project directory.

    The directory lets asset paths be made relative by prefix, which is
    unambiguous even when the root folder name repeats higher up.
    """
    root_folder = resolve_root_folder(properties)
    if not root_folder:
        return RootContext()

    directory = normalize_path(properties[PROJECT_DIR_PROPERTY].strip()).rstrip("/")
    return RootContext(folder=root_folder, directory=directory)
