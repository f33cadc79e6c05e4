"""Python renderer for generated lookup modules.

Each category becomes a module holding an Enum with one member per
asset and a read-only table used by get_path().

Example output (prefabs.py):

    @unique
    class Prefab(Enum):
        EnemiesGoblinWarrior = 0

    _PATHS = MappingProxyType({
        Prefab.EnemiesGoblinWarrior: "res://Prefabs/Enemies/goblin_warrior.tscn",
    })

    def get_path(prefab: Prefab) -> str:
        return _PATHS[prefab]
"""

import keyword
from collections.abc import Sequence

from ...core.types import AssetEntry, Category
from ..base import Renderer, string_literal

HEADER = "# Generated by godot-asset-codegen. Do not edit."


class PythonRenderer(Renderer):
    """Render lookup modules as importable Python source."""

    name = "python"

    def legalize_identifier(self, identifier: str) -> str:
        # Only the capitalized keywords (None, True, False) can show up here
        if keyword.iskeyword(identifier):
            return f"{identifier}_"
        return identifier

    def module_filename(self, category: Category) -> str:
        return f"{category.module_name.lower()}.py"

    def render(
        self,
        category: Category,
        entries: Sequence[AssetEntry],
        namespace: str,
    ) -> str:
        type_name = category.type_name
        param = type_name.lower()

        lines = [
            HEADER,
            string_literal(f"{type_name} resource paths for {namespace}."),
            "",
            "from enum import Enum, unique",
            "from types import MappingProxyType",
            "",
            "",
            "@unique",
            f"class {type_name}(Enum):",
        ]
        if entries:
            lines.extend(f"    {entry.identifier} = {index}" for index, entry in enumerate(entries))
        else:
            lines.append("    pass")

        lines.extend(["", "", "_PATHS = MappingProxyType({"])
        lines.extend(
            f"    {type_name}.{entry.identifier}: {string_literal(entry.resource_path)},"
            for entry in entries
        )
        lines.extend(
            [
                "})",
                "",
                f"assert set(_PATHS) == set({type_name})",
                "",
                "",
                f"def get_path({param}: {type_name}) -> str:",
                f'    """Return the res:// path of a {param}."""',
                f"    return _PATHS[{param}]",
            ]
        )
        return "\n".join(lines) + "\n"
