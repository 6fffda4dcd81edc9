"""Font and spacing configuration shared by the encoder and the digit chart."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GlyphConfig:
    """Typography knobs for rendering year digits.

    ``offset_increment`` is the extra horizontal gap inserted after every
    emphasized glyph; ``position_spacing`` is the base advance per digit.
    """

    base_font: str = "JetBrains Mono"
    emphasis_weight: str = "bold"
    emphasis_size_multiplier: float = 4.5 / 3.5
    offset_increment: float = 0.04
    base_size: float = 10.0
    position_spacing: float = 0.1

    def validate(self) -> None:
        if self.base_size <= 0 or self.emphasis_size_multiplier <= 0 or self.position_spacing <= 0:
            raise ValueError("Glyph sizes and spacing must be strictly positive.")
        if self.offset_increment < 0:
            raise ValueError("offset_increment must be non-negative.")

    @property
    def emphasis_size(self) -> float:
        return self.base_size * self.emphasis_size_multiplier


__all__ = ["GlyphConfig"]
