"""Resource path and identifier derivation.

This module turns a classified scene file into the project-relative
resource path the Godot loader expects and the Pascal-cased name used
as an enumerant in generated code.

Example:
    ".../my_game/Prefabs/Enemies/goblin_warrior.tscn" with root "my_game"
        -> relative path "Prefabs/Enemies/goblin_warrior.tscn"
        -> identifier "EnemiesGoblinWarrior"
"""

import re
import unicodedata

from .errors import AssetPathError, RootSegmentNotFoundError
from .types import SCENE_EXTENSION, AssetEntry, Category, ClassifiedAsset, RootContext

# Characters that separate words in snake/kebab-case names
WORD_BOUNDARY = re.compile(r"[_\-\s]+")

# "C:/..." style absolute paths
DRIVE_PATH = re.compile(r"^[A-Za-z]:/")

RESERVED_FOLDERS = frozenset(category.folder.lower() for category in Category)


def normalize_path(path: str) -> str:
    """Convert Windows separators to forward slashes."""
    return path.replace("\\", "/")


def path_segments(path: str) -> list[str]:
    return normalize_path(path).split("/")


def is_absolute(path: str) -> bool:
    normalized = normalize_path(path)
    return normalized.startswith("/") or bool(DRIVE_PATH.match(normalized))


def strip_extension(filename: str) -> str:
    """Remove the scene extension, matched case-insensitively."""
    if filename.lower().endswith(SCENE_EXTENSION):
        return filename[: -len(SCENE_EXTENSION)]
    return filename


def find_relative_path(path: str, root: RootContext) -> str | None:
    """Locate the project root in a path and return what follows it.

    A known absolute project directory is stripped as a prefix. Otherwise
    the root folder name is searched as a whole segment, ignoring case.
    When the name occurs more than once ("/game/dev/game/Prefabs/..."),
    the last occurrence still followed by a reserved folder wins.

    Returns:
        The relative path, or None if the root cannot be located
    """
    if not root.folder:
        return None

    normalized = normalize_path(path)
    directory = normalize_path(root.directory).rstrip("/")

    if directory and is_absolute(directory):
        prefix = f"{directory.lower()}/"
        if normalized.lower().startswith(prefix):
            remainder = [s for s in normalized[len(prefix) :].split("/") if s]
            return "/".join(remainder) or None

    segments = normalized.split("/")
    root_lower = root.folder.lower()
    candidates = []
    for index, segment in enumerate(segments):
        if segment.lower() == root_lower:
            remainder = [s for s in segments[index + 1 :] if s]
            if remainder:
                candidates.append(remainder)

    if not candidates:
        return None

    for remainder in reversed(candidates):
        if any(s.lower() in RESERVED_FOLDERS for s in remainder[:-1]):
            return "/".join(remainder)
    return "/".join(candidates[0])


def relative_path(path: str, root: RootContext) -> str:
    """Return the part of a path after the project root folder.

    The file extension is kept since the result is a loadable resource
    reference.

    Args:
        path: Asset path with either separator style
        root: Resolved project root

    Returns:
        Path relative to the root folder, using forward slashes

    Raises:
        RootSegmentNotFoundError: If the root is unknown or not part of path
    """
    rel_path = find_relative_path(path, root)
    if rel_path is None:
        raise RootSegmentNotFoundError(normalize_path(path), root.folder)
    return rel_path


def _identifier_chars(word: str) -> str:
    return "".join(c for c in word if f"_{c}".isidentifier())


def snake_to_pascal(name: str) -> str:
    """Convert a snake_case or kebab-case name to PascalCase.

    Words are split on underscores, hyphens and whitespace. Only the
    first character of each word is changed, so existing capitals
    survive ("UI_main_menu" -> "UIMainMenu"). Characters that cannot
    appear in an identifier are dropped; letters of any script are kept.
    A result that cannot start an identifier (a leading digit) gets a
    leading underscore.

    Returns:
        The identifier, or an empty string if nothing usable remains
    """
    # Python compares identifiers in NFKC form
    name = unicodedata.normalize("NFKC", name)

    words = []
    for word in WORD_BOUNDARY.split(name):
        word = _identifier_chars(word)
        if word:
            words.append(word[0].upper() + word[1:])

    identifier = "".join(words)
    if identifier and not identifier.isidentifier():
        identifier = f"_{identifier}"
    return identifier


def derive_identifier(rel_path: str, category: Category) -> str:
    """Derive the enumerant name for a project-relative path.

    Uses the portion after the category folder, so
    "Prefabs/Enemies/goblin_warrior.tscn" becomes "EnemiesGoblinWarrior".

    Raises:
        AssetPathError: If the category folder is missing from the path,
            or the asset name holds no identifier characters
    """
    segments = [s for s in path_segments(rel_path) if s]
    folder_lower = category.folder.lower()

    for index, segment in enumerate(segments):
        if segment.lower() == folder_lower:
            suffix = segments[index + 1 :]
            break
    else:
        raise AssetPathError(rel_path, f"'{category.folder}' folder not found in relative path")

    if not suffix:
        raise AssetPathError(rel_path, f"No asset below '{category.folder}' folder")

    suffix[-1] = strip_extension(suffix[-1])
    identifier = snake_to_pascal("_".join(suffix))
    if not identifier:
        raise AssetPathError(rel_path, "Asset name contains no identifier characters")
    return identifier


def derive_entry(asset: ClassifiedAsset, root: RootContext) -> AssetEntry:
    """Build the AssetEntry for a classified asset."""
    rel_path = relative_path(asset.path, root)
    return AssetEntry(
        identifier=derive_identifier(rel_path, asset.category),
        relative_path=rel_path,
        source_path=asset.path,
    )
