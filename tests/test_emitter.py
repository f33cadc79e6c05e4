"""Tests for entry building and module emission."""

import pytest

from godot_asset_codegen.collector import collect
from godot_asset_codegen.core.errors import IdentifierCollisionError, RootSegmentNotFoundError
from godot_asset_codegen.core.types import Category, ClassifiedAsset, RootContext
from godot_asset_codegen.emitter import build_entries, emit_module
from godot_asset_codegen.targets.python import PythonRenderer

MY_GAME = RootContext(folder="my_game", directory="/home/dev/my_game")
G = RootContext(folder="g")


def prefabs(*paths: str) -> list[ClassifiedAsset]:
    return [ClassifiedAsset(category=Category.PREFAB, path=p) for p in paths]


class TestBuildEntries:
    """Test entry derivation and collision checks."""

    def test_one_entry_per_asset_in_order(self, sample_paths: list[str]) -> None:
        """Test that every classified asset yields one entry."""
        collected = collect(sample_paths)
        entries = build_entries(collected.prefabs, MY_GAME)

        assert [e.identifier for e in entries] == ["EnemiesGoblinWarrior", "Door", "MarketStall"]
        assert entries[2].resource_path == "res://Scenes/Town/Prefabs/market_stall.tscn"

    def test_collision_names_both_paths(self) -> None:
        """Test that colliding identifiers abort with both paths."""
        first = "/g/Prefabs/a/x.tscn"
        second = "/g/Prefabs/a-x.tscn"

        with pytest.raises(IdentifierCollisionError) as exc:
            build_entries(prefabs(first, second), G)

        assert exc.value.identifier == "AX"
        assert first in str(exc.value)
        assert second in str(exc.value)

    def test_identical_duplicates_collapse(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that the same file listed twice is kept once."""
        entries = build_entries(
            prefabs("/g/Prefabs/door.tscn", "C:\\g\\Prefabs\\door.tscn"),
            G,
        )

        assert [e.identifier for e in entries] == ["Door"]
        assert "Skipping duplicate asset" in capsys.readouterr().err

    def test_legalize_applied_before_collision_check(self) -> None:
        """Test that the target's identifier fix-up is part of uniqueness."""
        entries = build_entries(
            prefabs("/g/Prefabs/none.tscn"),
            G,
            PythonRenderer().legalize_identifier,
        )

        assert entries[0].identifier == "None_"

    def test_outside_root_is_fatal(self) -> None:
        """Test that an asset outside the project root aborts."""
        with pytest.raises(RootSegmentNotFoundError):
            build_entries(prefabs("/other/Prefabs/door.tscn"), G)


class TestEmitModule:
    """Test module emission."""

    def test_empty_category(self) -> None:
        """Test that no entries still produce a module."""
        module = emit_module(Category.SCENE, [], "my_game", PythonRenderer())

        assert module.filename == "scenes.py"
        assert module.entries == ()
        assert "class Scene(Enum):" in module.source

    def test_carries_entries(self) -> None:
        """Test that the emitted module remembers its entries."""
        entries = build_entries(prefabs("/g/Prefabs/door.tscn"), G)
        module = emit_module(Category.PREFAB, entries, "g", PythonRenderer())

        assert module.category is Category.PREFAB
        assert module.entries == tuple(entries)
