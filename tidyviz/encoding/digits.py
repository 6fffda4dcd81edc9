"""Encode a year's median Bechdel score as bold digit positions in the year label."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

import pandas as pd

from .config import GlyphConfig
from .records import GlyphStyle, YearSummary

BECHDEL_POSITIONS = 4


class InvalidRange(ValueError):
    """Raised when a YearSummary falls outside the encodable domain."""


def _check_range(summary: YearSummary, digits: str, position_count: int) -> None:
    if not digits.isdigit():
        raise InvalidRange(f"Year {summary.year} is not a non-negative whole number.")
    if len(digits) != position_count:
        raise InvalidRange(
            f"Year {summary.year} has {len(digits)} digits but the score axis has {position_count} positions."
        )
    median = summary.median_score
    if not math.isfinite(median) or not 0 <= median <= position_count - 1:
        raise InvalidRange(
            f"Median score {median!r} for {summary.year} is outside [0, {position_count - 1}]."
        )
    fraction = summary.pass_fraction
    if not math.isfinite(fraction) or not 0 <= fraction <= 1:
        raise InvalidRange(f"Pass fraction {fraction!r} for {summary.year} is outside [0, 1].")


def encode_year(
    summary: YearSummary,
    config: GlyphConfig = GlyphConfig(),
    position_count: int = BECHDEL_POSITIONS,
) -> Tuple[GlyphStyle, ...]:
    """
    Split ``summary.year`` into digits and mark the ones matching the median score.

    The floor and ceiling of the median select the emphasized positions, so a
    whole-number median bolds one digit and a half-step median bolds two
    adjacent digits. Every glyph following an emphasized one is pushed right
    by ``config.offset_increment``; the push accumulates within the year.
    """
    config.validate()
    digits = str(summary.year)
    _check_range(summary, digits, position_count)

    lower = math.floor(summary.median_score)
    upper = math.ceil(summary.median_score)

    glyphs: List[GlyphStyle] = []
    margin = 0.0
    previous_emphasized = False
    for position, character in enumerate(digits):
        if previous_emphasized:
            margin += config.offset_increment
        emphasized = position in (lower, upper)
        glyphs.append(
            GlyphStyle(
                year=summary.year,
                position=position,
                character=character,
                is_emphasized=emphasized,
                emphasis_color_value=summary.pass_fraction if emphasized else None,
                horizontal_offset=position * config.position_spacing + margin,
            )
        )
        previous_emphasized = emphasized
    return tuple(glyphs)


def encode_years(
    summaries: Iterable[YearSummary],
    config: GlyphConfig = GlyphConfig(),
    position_count: int = BECHDEL_POSITIONS,
    skip_invalid: bool = False,
) -> List[GlyphStyle]:
    """Encode each year independently, optionally dropping years that fail validation."""
    glyphs: List[GlyphStyle] = []
    for summary in summaries:
        try:
            glyphs.extend(encode_year(summary, config, position_count))
        except InvalidRange as exc:
            if not skip_invalid:
                raise
            print(f"[encoding] Skipping year {summary.year}: {exc}")
    return glyphs


def glyphs_to_frame(glyphs: Sequence[GlyphStyle]) -> pd.DataFrame:
    """Tabulate glyphs, one row per digit."""
    columns = [
        "year",
        "position",
        "character",
        "is_emphasized",
        "emphasis_color_value",
        "horizontal_offset",
    ]
    return pd.DataFrame(
        [
            {
                "year": glyph.year,
                "position": glyph.position,
                "character": glyph.character,
                "is_emphasized": glyph.is_emphasized,
                "emphasis_color_value": glyph.emphasis_color_value,
                "horizontal_offset": glyph.horizontal_offset,
            }
            for glyph in glyphs
        ],
        columns=columns,
    )


__all__ = [
    "BECHDEL_POSITIONS",
    "InvalidRange",
    "encode_year",
    "encode_years",
    "glyphs_to_frame",
]
