"""Year-digit chart: the bold digit position of each year encodes its median Bechdel score."""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np
import pandas as pd
import plotly.graph_objects as go
from plotly.colors import get_colorscale, sample_colorscale

from tidyviz.aggregation.bechdel import decade_layout
from tidyviz.encoding import GlyphConfig, GlyphStyle, YearSummary, encode_year, glyphs_to_frame
from .save_config import PlotSaveDestinations, write_figure

NEUTRAL_COLOR = "#4d4d4d"
BACKGROUND_COLOR = "#f0f2f4"
SCALE_NAME = "Inferno"
SCALE_BEGIN = 0.2
SCALE_END = 0.9

LEGEND_YEAR = YearSummary(year=1997, median_score=3, pass_fraction=0.5)
LEGEND_X = 1.0
LEGEND_SPREAD = 2.0
LEGEND_EXPLANATION = (
    "Bold digits show the median Bechdel test score (0-3)<br>"
    "When a score falls between values, both digits are bold<br>"
    "Placement of the bold digit = median Bechdel rating for that year<br>"
    "Thus, for 1997, the median bechdel rating is 3"
)
CAPTION = "Source: Bechdeltest.com · Inspired by Georgios Karamanis"


def emphasis_colors(values: Sequence[float]) -> List[str]:
    """Map pass fractions onto the trimmed Inferno ramp."""
    if not len(values):
        return []
    points = [SCALE_BEGIN + (SCALE_END - SCALE_BEGIN) * float(value) for value in values]
    return sample_colorscale(get_colorscale(SCALE_NAME), points)


def trimmed_colorscale(steps: int = 10) -> List[List[object]]:
    """Colorscale covering only the [begin, end] slice of Inferno, for the colourbar."""
    stops = np.linspace(0.0, 1.0, steps)
    colors = emphasis_colors(list(stops))
    return [[float(stop), color] for stop, color in zip(stops, colors)]


def layout_glyphs(glyphs: Sequence[GlyphStyle]) -> pd.DataFrame:
    """Attach decade-grid coordinates and resolved colours to every glyph."""
    df = glyphs_to_frame(glyphs)
    if df.empty:
        return df.assign(decade=[], column=[], x=[], color=[])

    grid = df["year"].map(decade_layout)
    df["decade"] = [decade for decade, _ in grid]
    df["column"] = [column for _, column in grid]
    df["x"] = df["column"] + df["horizontal_offset"]
    df["color"] = NEUTRAL_COLOR
    emphasized = df["is_emphasized"]
    if emphasized.any():
        df.loc[emphasized, "color"] = emphasis_colors(df.loc[emphasized, "emphasis_color_value"].tolist())
    return df


def _glyph_trace(df: pd.DataFrame, config: GlyphConfig, emphasized: bool, name: str) -> go.Scatter:
    return go.Scatter(
        x=df["x"],
        y=df["decade"],
        text=df["character"],
        mode="text",
        textposition="middle right",
        textfont=dict(
            family=config.base_font,
            size=config.emphasis_size if emphasized else config.base_size,
            color=df["color"].tolist(),
            weight=config.emphasis_weight if emphasized else "normal",
        ),
        hovertext=[f"{year}" for year in df["year"]],
        hoverinfo="text",
        showlegend=False,
        name=name,
    )


def _add_legend_example(fig: go.Figure, config: GlyphConfig) -> None:
    example = layout_glyphs(encode_year(LEGEND_YEAR, config))
    example["x"] = LEGEND_X + LEGEND_SPREAD * example["horizontal_offset"]
    example["decade"] = 1850
    for emphasized, subset in example.groupby("is_emphasized"):
        trace = _glyph_trace(subset, config, bool(emphasized), "legend")
        trace.textfont.size = (config.emphasis_size if emphasized else config.base_size) * 1.6
        fig.add_trace(trace)

    positions = LEGEND_X + LEGEND_SPREAD * example["position"] * config.position_spacing
    fig.add_trace(
        go.Scatter(
            x=positions,
            y=[1862] * len(positions),
            text=[str(position) for position in example["position"]],
            mode="text",
            textposition="middle right",
            textfont=dict(family=config.base_font, size=config.base_size * 0.85, color="#333333"),
            hoverinfo="skip",
            showlegend=False,
        )
    )
    for digit_x, position_x in zip(example["x"], positions):
        fig.add_annotation(
            x=digit_x,
            y=1855,
            ax=position_x,
            ay=1859,
            xref="x",
            yref="y",
            axref="x",
            ayref="y",
            text="",
            showarrow=True,
            arrowhead=2,
            arrowsize=0.8,
            arrowwidth=1,
            arrowcolor="#3a86ff",
        )
    fig.add_annotation(
        x=0,
        y=1866,
        xref="x",
        yref="y",
        text=LEGEND_EXPLANATION,
        showarrow=False,
        align="left",
        xanchor="left",
        yanchor="top",
        font=dict(size=config.base_size * 0.85, color="#262626"),
    )
    fig.add_shape(
        type="rect",
        x0=-0.25,
        x1=3.5,
        y0=1845,
        y1=1885,
        xref="x",
        yref="y",
        line=dict(color="black", width=0.5),
        fillcolor="rgba(0,0,0,0)",
    )


def _add_titles(fig: go.Figure, years: pd.Series, n_films: Optional[int]) -> None:
    fig.add_annotation(
        x=10,
        y=1850,
        xref="x",
        yref="y",
        text="<b>Are movies passing the Bechdel Test?</b>",
        showarrow=False,
        xanchor="right",
        font=dict(size=30, color="#1a1a1a"),
    )
    films = f"{n_films:,} films" if n_films is not None else "films"
    fig.add_annotation(
        x=10,
        y=1859,
        xref="x",
        yref="y",
        text=f"Analyzing {films} ({years.min()}-{years.max()}): median Bechdel test ratings by year",
        showarrow=False,
        xanchor="right",
        font=dict(size=14, color="#3a3a3a"),
    )
    fig.add_annotation(
        x=0.98,
        y=0.0,
        xref="paper",
        yref="paper",
        text=CAPTION,
        showarrow=False,
        xanchor="right",
        yanchor="top",
        font=dict(size=10, color="#6c757d"),
    )


def build_bechdel_digits_figure(
    glyphs: Sequence[GlyphStyle],
    config: GlyphConfig = GlyphConfig(),
    n_films: Optional[int] = None,
) -> go.Figure:
    """Assemble the decade grid of year labels plus legend, colourbar and titles."""
    config.validate()
    df = layout_glyphs(glyphs)
    fig = go.Figure()
    if df.empty:
        return fig

    for emphasized, subset in df.groupby("is_emphasized"):
        fig.add_trace(_glyph_trace(subset, config, bool(emphasized), "emphasized" if emphasized else "regular"))

    # Invisible marker trace carrying the colourbar for the emphasis scale.
    fig.add_trace(
        go.Scatter(
            x=[None, None],
            y=[None, None],
            mode="markers",
            marker=dict(
                color=[0.0, 1.0],
                cmin=0.0,
                cmax=1.0,
                colorscale=trimmed_colorscale(),
                showscale=True,
                colorbar=dict(
                    title=dict(text="Share of movies made that pass the test", side="right"),
                    x=0.03,
                    y=0.4,
                    len=0.35,
                    thickness=8,
                    tickformat=".0%",
                ),
            ),
            hoverinfo="skip",
            showlegend=False,
        )
    )

    _add_legend_example(fig, config)
    _add_titles(fig, df["year"], n_films)

    fig.update_xaxes(visible=False, range=[-0.5, 11.0])
    fig.update_yaxes(visible=False, autorange="reversed")
    fig.update_layout(
        plot_bgcolor=BACKGROUND_COLOR,
        paper_bgcolor=BACKGROUND_COLOR,
        font=dict(family=config.base_font),
        margin=dict(l=20, r=20, t=20, b=40),
    )
    return fig


def plot_bechdel_digits(
    glyphs: Sequence[GlyphStyle],
    config: GlyphConfig = GlyphConfig(),
    n_films: Optional[int] = None,
    save_to: Optional[PlotSaveDestinations] = None,
) -> None:
    """Render the digit chart for every encoded year."""
    if not glyphs:
        return
    fig = build_bechdel_digits_figure(glyphs, config, n_films)
    write_figure(fig, save_to)


__all__ = [
    "build_bechdel_digits_figure",
    "emphasis_colors",
    "layout_glyphs",
    "plot_bechdel_digits",
    "trimmed_colorscale",
]
