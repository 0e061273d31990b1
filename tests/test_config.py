"""Tests for EngineSettings."""

import pytest

from knightly.config import EngineSettings
from knightly.game.controller import GameController


class TestEngineSettings:
    def test_defaults(self) -> None:
        s = EngineSettings()
        assert s.glyphs == "unicode"
        assert s.log_level == "WARNING"
        assert s.enforce_turn

    def test_log_level_normalised(self) -> None:
        assert EngineSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_glyphs(self) -> None:
        with pytest.raises(ValueError, match="Unknown glyph style"):
            EngineSettings(glyphs="emoji")

    def test_controller_uses_glyphs(self) -> None:
        ctrl = GameController(EngineSettings(glyphs="unicode"))
        ctrl.new_game()
        assert ctrl.dump().splitlines()[0] == "8 ♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜"

    def test_free_turns(self) -> None:
        ctrl = GameController(EngineSettings(enforce_turn=False))
        ctrl.new_game()
        assert ctrl.move_piece("E7", "E5")
        ctrl.reset_game()
        assert ctrl.state.enforce_turn is False
