"""Engine-wide settings."""

from __future__ import annotations

from dataclasses import dataclass

GLYPH_STYLES = ("unicode", "letters")


@dataclass
class EngineSettings:
    """All user-configurable settings."""

    # Board dump
    glyphs: str = "unicode"

    # Logging
    log_level: str = "WARNING"

    # Rules
    enforce_turn: bool = True  # reject moves by the side not on turn

    def __post_init__(self) -> None:
        if self.glyphs not in GLYPH_STYLES:
            raise ValueError(f"Unknown glyph style: {self.glyphs!r}")
        self.log_level = self.log_level.upper()
