"""Tests for the Python and C# render targets."""

import ast

import pytest

from godot_asset_codegen.core.types import AssetEntry, Category
from godot_asset_codegen.targets.csharp import CSharpRenderer, namespace_name
from godot_asset_codegen.targets.python import PythonRenderer


ENTRIES = [
    AssetEntry(
        identifier="EnemiesGoblinWarrior",
        relative_path="Prefabs/Enemies/goblin_warrior.tscn",
        source_path="/g/Prefabs/Enemies/goblin_warrior.tscn",
    ),
    AssetEntry(
        identifier="Door",
        relative_path="Prefabs/door.tscn",
        source_path="/g/Prefabs/door.tscn",
    ),
    AssetEntry(
        identifier="_2dIntro",
        relative_path="Prefabs/2d_intro.tscn",
        source_path="/g/Prefabs/2d_intro.tscn",
    ),
]


class TestPythonRenderer:
    """Test generated Python modules."""

    def test_lookup_is_total(self, load_generated) -> None:
        """Test that every member maps to its res:// path."""
        source = PythonRenderer().render(Category.PREFAB, ENTRIES, "my_game")
        generated = load_generated(source)
        prefab = generated["Prefab"]
        get_path = generated["get_path"]

        assert [member.name for member in prefab] == [e.identifier for e in ENTRIES]
        for entry in ENTRIES:
            assert get_path(prefab[entry.identifier]) == entry.resource_path

    def test_members_keep_discovery_order(self, load_generated) -> None:
        """Test that members are numbered without sorting."""
        generated = load_generated(PythonRenderer().render(Category.PREFAB, ENTRIES, "g"))

        assert [member.value for member in generated["Prefab"]] == [0, 1, 2]

    def test_empty_module_is_valid(self, load_generated) -> None:
        """Test that an empty category still produces working code."""
        source = PythonRenderer().render(Category.SCENE, [], "my_game")
        generated = load_generated(source)

        assert list(generated["Scene"]) == []
        assert dict(generated["_PATHS"]) == {}

    def test_table_is_read_only(self, load_generated) -> None:
        """Test that the path table cannot be modified."""
        generated = load_generated(PythonRenderer().render(Category.PREFAB, ENTRIES, "g"))

        with pytest.raises(TypeError):
            generated["_PATHS"][generated["Prefab"].Door] = "res://elsewhere.tscn"

    def test_escapes_paths(self, load_generated) -> None:
        """Test that quotes in paths cannot break the literal."""
        entry = AssetEntry(
            identifier="Odd",
            relative_path='Scenes/o"dd.tscn',
            source_path='/g/Scenes/o"dd.tscn',
        )
        generated = load_generated(PythonRenderer().render(Category.SCENE, [entry], "g"))

        assert generated["get_path"](generated["Scene"].Odd) == 'res://Scenes/o"dd.tscn'

    def test_module_docstring_names_namespace(self) -> None:
        """Test that the namespace appears in the module docstring."""
        source = PythonRenderer().render(Category.SCENE, [], "my_game")

        assert ast.get_docstring(ast.parse(source)) == "Scene resource paths for my_game."

    def test_keywords_are_legalized(self) -> None:
        """Test that capitalized keywords get a trailing underscore."""
        renderer = PythonRenderer()

        assert renderer.legalize_identifier("None") == "None_"
        assert renderer.legalize_identifier("True") == "True_"
        assert renderer.legalize_identifier("Door") == "Door"

    def test_filenames(self) -> None:
        """Test module file names."""
        renderer = PythonRenderer()

        assert renderer.module_filename(Category.PREFAB) == "prefabs.py"
        assert renderer.module_filename(Category.SCENE) == "scenes.py"


class TestCSharpRenderer:
    """Test generated C# sources."""

    def test_enum_and_switch(self) -> None:
        """Test the enum members and switch arms."""
        source = CSharpRenderer().render(Category.PREFAB, ENTRIES, "MyGame")

        assert "namespace MyGame;" in source
        assert "public enum Prefab\n{\n    EnemiesGoblinWarrior,\n    Door,\n    _2dIntro,\n}" in source
        assert "public static class MapPrefabsToPaths" in source
        assert "public static string GetPath(Prefab prefab) => prefab switch" in source
        assert 'Prefab.Door => "res://Prefabs/door.tscn",' in source

    def test_never_returns_null(self) -> None:
        """Test that unknown values throw instead of returning null."""
        source = CSharpRenderer().render(Category.SCENE, ENTRIES, "MyGame")

        assert "null;" not in source
        assert "ArgumentOutOfRangeException(nameof(scene), scene, null)" in source

    def test_empty_category(self) -> None:
        """Test that an empty enum still yields a complete class."""
        source = CSharpRenderer().render(Category.SCENE, [], "MyGame")

        assert "public enum Scene\n{\n}" in source
        assert "public static class MapScenesToPaths" in source
        assert source.count("{") == source.count("}")

    def test_filenames(self) -> None:
        """Test .g.cs file names."""
        renderer = CSharpRenderer()

        assert renderer.module_filename(Category.PREFAB) == "Prefabs.g.cs"
        assert renderer.module_filename(Category.SCENE) == "Scenes.g.cs"

    def test_namespace_name(self) -> None:
        """Test that folder-derived namespaces become legal."""
        assert namespace_name("MyGame") == "MyGame"
        assert namespace_name("my-game") == "my_game"
        assert namespace_name("Studio.3d-game") == "Studio._3d_game"
