"""Digit-position encoding of yearly Bechdel summaries."""

from .config import GlyphConfig
from .digits import BECHDEL_POSITIONS, InvalidRange, encode_year, encode_years, glyphs_to_frame
from .records import GlyphStyle, YearSummary

__all__ = [
    "BECHDEL_POSITIONS",
    "GlyphConfig",
    "GlyphStyle",
    "InvalidRange",
    "YearSummary",
    "encode_year",
    "encode_years",
    "glyphs_to_frame",
]
