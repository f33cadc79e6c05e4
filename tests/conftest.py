"""Shared fixtures for the asset codegen tests."""

from pathlib import Path

import pytest

from godot_asset_codegen.config import PROJECT_DIR_PROPERTY

PROJECT_ROOT = "/home/dev/my_game"


@pytest.fixture
def properties() -> dict[str, str]:
    """Build properties pointing at a fake project."""
    return {PROJECT_DIR_PROPERTY: PROJECT_ROOT}


@pytest.fixture
def sample_paths() -> list[str]:
    """Candidate files as a build would report them."""
    return [
        f"{PROJECT_ROOT}/Prefabs/Enemies/goblin_warrior.tscn",
        f"{PROJECT_ROOT}/Scenes/main_menu.tscn",
        f"{PROJECT_ROOT}/Prefabs/door.tscn",
        f"{PROJECT_ROOT}/Scenes/Town/Prefabs/market_stall.tscn",
        f"{PROJECT_ROOT}/Scenes/Levels/level_1.tscn",
        f"{PROJECT_ROOT}/Scripts/player.gd",
        f"{PROJECT_ROOT}/Textures/goblin.png",
        f"{PROJECT_ROOT}/Other/loose.tscn",
    ]


@pytest.fixture
def godot_project(tmp_path: Path) -> Path:
    """A small Godot project on disk."""
    root = tmp_path / "my_game"
    files = [
        "project.godot",
        "Prefabs/door.tscn",
        "Prefabs/Enemies/goblin_warrior.tscn",
        "Scenes/main_menu.tscn",
        "Scenes/Levels/level_1.tscn",
        "Scenes/player.gd",
        ".godot/imported/cache.tscn",
    ]
    for relative in files:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("[gd_scene format=3]\n", encoding="utf-8")
    return root


def _exec_source(source: str) -> dict:
    namespace: dict = {"__name__": "generated"}
    exec(compile(source, "<generated>", "exec"), namespace)
    return namespace


@pytest.fixture
def load_generated():
    """Execute generated Python source and return its globals."""
    return _exec_source
