"""Project directory scanning.

This module walks a Godot project and lists the candidate files that
the generator classifies. Build integrations that already know their
file list can skip it and pass paths straight to the pipeline.
"""

import os
import sys
from pathlib import Path

from .collector import is_scene_file


def validate_path_safety(path: Path, base_dir: Path) -> None:
    """Validate that a path stays within the base directory.

    Symlinked scenes that resolve outside the project would produce
    res:// paths the engine cannot load.

    Raises:
        ValueError: If path escapes the base directory
    """
    resolved_path = path.resolve()
    resolved_base = base_dir.resolve()

    if not resolved_path.is_relative_to(resolved_base):
        raise ValueError(f"Path {path} escapes base directory {base_dir}")


def discover_candidates(root_path: Path) -> list[str]:
    """Recursively list scene files below a project directory.

    Hidden files and directories (".godot", ".import", ...) are skipped.
    The result is sorted so repeated runs see the same order.

    Args:
        root_path: Project root directory

    Returns:
        Absolute paths of scene files, as strings
    """
    candidates: list[str] = []
    root_path_resolved = root_path.resolve()

    for dirpath, dirnames, filenames in os.walk(root_path_resolved):
        # Prune hidden directories in place
        dirnames[:] = [d for d in dirnames if not d.startswith(".")]

        for filename in filenames:
            if filename.startswith(".") or not is_scene_file(filename):
                continue

            file_path = Path(dirpath) / filename
            try:
                validate_path_safety(file_path, root_path_resolved)
            except ValueError as e:
                print(f"Warning: Skipping {file_path}: {e}", file=sys.stderr)
                continue

            candidates.append(str(file_path))

    return sorted(candidates)
