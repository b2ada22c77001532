"""Tests for playstate.ui.models – level selection view model."""

from __future__ import annotations

from pathlib import Path

import pytest

from playstate.core.levels import Level, LevelCatalogue
from playstate.core.progression import ProgressionModel
from playstate.ui.models import LevelState, build_level_states


@pytest.fixture()
def catalogue(tmp_path: Path) -> LevelCatalogue:
    f = tmp_path / "levels.yaml"
    f.write_text(
        "levels:\n  - title: One\n  - title: Two\n  - title: Three\n", encoding="utf-8"
    )
    return LevelCatalogue(f)


class TestLevelState:
    def test_is_current_default(self):
        ls = LevelState(level=Level(1, "One", "level1"), unlocked=True)
        assert ls.is_current is False


class TestBuildLevelStates:
    def test_fresh_progress(self, catalogue: LevelCatalogue):
        states = build_level_states(catalogue, ProgressionModel(3))
        assert [s.unlocked for s in states] == [True, False, False]
        assert [s.is_current for s in states] == [True, False, False]

    def test_marks_current_level(self, catalogue: LevelCatalogue):
        p = ProgressionModel(3, unlocked_levels=[2], current_level=2)
        states = build_level_states(catalogue, p)
        assert [s.unlocked for s in states] == [True, True, False]
        assert [s.is_current for s in states] == [False, True, False]

    def test_follows_catalogue_order(self, catalogue: LevelCatalogue):
        states = build_level_states(catalogue, ProgressionModel(3))
        assert [s.level.title for s in states] == ["One", "Two", "Three"]
