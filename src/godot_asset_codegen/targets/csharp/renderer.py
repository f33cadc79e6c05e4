"""C# renderer for generated lookup modules.

Produces the same shape Godot C# projects use for hand-written asset
tables: an enum per category and a static Map<Category>ToPaths class.
GetPath is an exhaustive switch expression, so it never returns null.
"""

import re
from collections.abc import Sequence

from ...core.types import AssetEntry, Category
from ..base import Renderer, string_literal

HEADER = "// <auto-generated>Generated by godot-asset-codegen. Do not edit.</auto-generated>"

INVALID_NAMESPACE_CHARS = re.compile(r"[^0-9A-Za-z_]")


def namespace_name(namespace: str) -> str:
    """Make a dotted namespace legal, the way MSBuild derives RootNamespace."""
    parts = []
    for part in namespace.split("."):
        part = INVALID_NAMESPACE_CHARS.sub("_", part)
        if not part or part[0].isdigit():
            part = f"_{part}"
        parts.append(part)
    return ".".join(parts)


class CSharpRenderer(Renderer):
    """Render lookup modules as C# source files."""

    name = "csharp"

    def module_filename(self, category: Category) -> str:
        return f"{category.module_name}.g.cs"

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
            f"namespace {namespace_name(namespace)};",
            "",
            f"public enum {type_name}",
            "{",
        ]
        lines.extend(f"    {entry.identifier}," for entry in entries)
        lines.extend(
            [
                "}",
                "",
                f"public static class Map{category.module_name}ToPaths",
                "{",
                f"    public static string GetPath({type_name} {param}) => {param} switch",
                "    {",
            ]
        )
        lines.extend(
            f"        {type_name}.{entry.identifier} => {string_literal(entry.resource_path)},"
            for entry in entries
        )
        lines.extend(
            [
                f"        _ => throw new System.ArgumentOutOfRangeException(nameof({param}), {param}, null),",
                "    };",
                "}",
            ]
        )
        return "\n".join(lines) + "\n"
