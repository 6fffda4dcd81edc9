"""Tests for the year-digit encoding of Bechdel summaries."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tidyviz.encoding import (
    GlyphConfig,
    GlyphStyle,
    InvalidRange,
    YearSummary,
    encode_year,
    encode_years,
    glyphs_to_frame,
)


def _emphasized(glyphs: tuple[GlyphStyle, ...]) -> list[int]:
    return [glyph.position for glyph in glyphs if glyph.is_emphasized]


# ---------------------------------------------------------------------------
# Worked examples


def test_whole_median_emphasizes_single_digit() -> None:
    glyphs = encode_year(YearSummary(year=1997, median_score=3, pass_fraction=0.42))

    assert [glyph.character for glyph in glyphs] == ["1", "9", "9", "7"]
    assert [glyph.position for glyph in glyphs] == [0, 1, 2, 3]
    assert _emphasized(glyphs) == [3]
    assert glyphs[3].emphasis_color_value == pytest.approx(0.42)
    assert all(glyph.emphasis_color_value is None for glyph in glyphs[:3])


def test_half_median_emphasizes_adjacent_pair() -> None:
    glyphs = encode_year(YearSummary(year=1920, median_score=1.5, pass_fraction=0.10))

    assert _emphasized(glyphs) == [1, 2]
    assert [glyphs[1].character, glyphs[2].character] == ["9", "2"]
    assert glyphs[1].emphasis_color_value == pytest.approx(0.10)
    assert glyphs[2].emphasis_color_value == pytest.approx(0.10)
    assert glyphs[0].emphasis_color_value is None
    assert glyphs[3].emphasis_color_value is None


@pytest.mark.parametrize("fraction", [0.0, 0.5, 1.0])
def test_zero_median_marks_first_digit_for_any_fraction(fraction: float) -> None:
    glyphs = encode_year(YearSummary(year=1888, median_score=0, pass_fraction=fraction))

    assert _emphasized(glyphs) == [0]
    assert glyphs[0].emphasis_color_value == fraction


# ---------------------------------------------------------------------------
# Offsets


def test_offsets_add_increment_after_each_emphasized_glyph() -> None:
    config = GlyphConfig(offset_increment=0.04)
    glyphs = encode_year(YearSummary(year=1920, median_score=1.5, pass_fraction=0.1), config)

    offsets = [glyph.horizontal_offset for glyph in glyphs]
    assert offsets == pytest.approx([0.0, 0.1, 0.24, 0.38])


def test_offsets_reset_between_years() -> None:
    glyphs = encode_years(
        [
            YearSummary(year=2001, median_score=3, pass_fraction=0.6),
            YearSummary(year=2002, median_score=0, pass_fraction=0.6),
        ]
    )
    second_year = [glyph for glyph in glyphs if glyph.year == 2002]

    # The bold last digit of 2001 must not push the first digit of 2002.
    assert second_year[0].horizontal_offset == 0.0
    assert second_year[1].horizontal_offset == pytest.approx(0.14)


@pytest.mark.parametrize("median", [0, 0.5, 1, 1.5, 2, 2.5, 3])
def test_offsets_strictly_increase(median: float) -> None:
    glyphs = encode_year(YearSummary(year=1965, median_score=median, pass_fraction=0.3))

    offsets = [glyph.horizontal_offset for glyph in glyphs]
    assert len(glyphs) == 4
    assert all(left < right for left, right in zip(offsets, offsets[1:]))
    expected = {int(median), int(median + 0.5)} if median % 1 else {int(median)}
    assert set(_emphasized(glyphs)) == expected


# ---------------------------------------------------------------------------
# Validation


@pytest.mark.parametrize(
    "summary",
    [
        YearSummary(year=1997, median_score=4, pass_fraction=0.5),
        YearSummary(year=1997, median_score=-0.5, pass_fraction=0.5),
        YearSummary(year=1997, median_score=float("nan"), pass_fraction=0.5),
        YearSummary(year=1997, median_score=2, pass_fraction=1.2),
        YearSummary(year=1997, median_score=2, pass_fraction=-0.1),
        YearSummary(year=997, median_score=1, pass_fraction=0.5),
        YearSummary(year=-123, median_score=0, pass_fraction=0.5),
    ],
)
def test_out_of_range_inputs_raise(summary: YearSummary) -> None:
    with pytest.raises(InvalidRange):
        encode_year(summary)


def test_invalid_range_is_value_error() -> None:
    assert issubclass(InvalidRange, ValueError)


def test_position_count_is_explicit() -> None:
    glyphs = encode_year(YearSummary(year=123, median_score=2, pass_fraction=0.5), position_count=3)
    assert _emphasized(glyphs) == [2]

    with pytest.raises(InvalidRange):
        encode_year(YearSummary(year=1997, median_score=2, pass_fraction=0.5), position_count=3)


def test_encode_years_propagates_by_default() -> None:
    summaries = [
        YearSummary(year=1990, median_score=2, pass_fraction=0.5),
        YearSummary(year=1991, median_score=7, pass_fraction=0.5),
    ]
    with pytest.raises(InvalidRange):
        encode_years(summaries)


def test_encode_years_can_skip_bad_years(capsys: pytest.CaptureFixture[str]) -> None:
    summaries = [
        YearSummary(year=1990, median_score=2, pass_fraction=0.5),
        YearSummary(year=1991, median_score=7, pass_fraction=0.5),
        YearSummary(year=1992, median_score=1, pass_fraction=0.25),
    ]
    glyphs = encode_years(summaries, skip_invalid=True)

    assert sorted({glyph.year for glyph in glyphs}) == [1990, 1992]
    assert len(glyphs) == 8
    assert "Skipping year 1991" in capsys.readouterr().out


def test_glyph_config_validate() -> None:
    GlyphConfig().validate()
    with pytest.raises(ValueError):
        GlyphConfig(offset_increment=-0.1).validate()
    with pytest.raises(ValueError):
        GlyphConfig(base_size=0).validate()
    assert GlyphConfig(base_size=7).emphasis_size == pytest.approx(9.0)


@pytest.mark.parametrize("spacing", [0.0, -0.1])
def test_encode_year_rejects_non_positive_spacing(spacing: float) -> None:
    summary = YearSummary(year=1965, median_score=3, pass_fraction=0.3)
    with pytest.raises(ValueError):
        encode_year(summary, GlyphConfig(position_spacing=spacing))


def test_encode_years_rejects_bad_config_even_when_skipping() -> None:
    summaries = [YearSummary(year=1990, median_score=2, pass_fraction=0.5)]
    with pytest.raises(ValueError):
        encode_years(summaries, GlyphConfig(offset_increment=-1.0), skip_invalid=True)


def test_glyphs_to_frame_has_one_row_per_digit() -> None:
    glyphs = encode_year(YearSummary(year=1997, median_score=3, pass_fraction=0.42))
    frame = glyphs_to_frame(glyphs)

    assert len(frame) == 4
    assert frame["is_emphasized"].tolist() == [False, False, False, True]
    assert frame["character"].tolist() == ["1", "9", "9", "7"]
    assert glyphs_to_frame([]).empty
