"""Area charts and US maps of post office counts and density."""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .save_config import PlotSaveDestinations, write_figure

DIVERGING_SCALE = ["blue", "white", "red"]


def plot_annual_post_offices(
    annual: pd.DataFrame,
    save_to: Optional[PlotSaveDestinations] = None,
) -> None:
    """Area chart of offices open per year."""
    if annual.empty:
        return

    fig = px.area(
        annual,
        x="year",
        y="n_offices",
        labels={"year": "Year", "n_offices": "# of PO in US over years"},
        template="plotly_white",
    )
    write_figure(fig, save_to)


def plot_state_post_offices(
    state_counts: pd.DataFrame,
    save_to: Optional[PlotSaveDestinations] = None,
) -> None:
    """One small-multiple area chart per state, ordered by total office-years."""
    if state_counts.empty:
        return

    states = state_counts["state"]
    if isinstance(states.dtype, pd.CategoricalDtype):
        order = [str(state) for state in states.cat.categories]
    else:
        order = sorted(states.astype(str).unique())
    fig = px.area(
        state_counts.astype({"state": str}),
        x="year",
        y="n_offices",
        color="state",
        facet_col="state",
        facet_col_wrap=4,
        category_orders={"state": order},
        labels={"year": "Year", "n_offices": "# of PO"},
        template="plotly_white",
    )
    fig.update_layout(showlegend=False)
    fig.for_each_annotation(lambda annotation: annotation.update(text=annotation.text.split("=")[-1]))
    write_figure(fig, save_to)


def build_state_choropleth(
    frame: pd.DataFrame,
    value_column: str,
    midpoint: float,
    title: str,
    colorbar_title: str,
    facet_column: Optional[str] = None,
) -> go.Figure:
    """Diverging blue-white-red state choropleth centred on ``midpoint``."""
    fig = px.choropleth(
        frame,
        locations="state",
        locationmode="USA-states",
        color=value_column,
        scope="usa",
        facet_col=facet_column,
        facet_col_wrap=2 if facet_column else 0,
        color_continuous_scale=DIVERGING_SCALE,
        color_continuous_midpoint=midpoint,
        title=title,
        labels={value_column: colorbar_title},
    )
    fig.update_layout(margin=dict(l=10, r=10, t=60, b=10))
    return fig


def plot_state_choropleth(
    frame: pd.DataFrame,
    value_column: str,
    midpoint: float,
    title: str,
    colorbar_title: str,
    save_to: Optional[PlotSaveDestinations] = None,
) -> None:
    """Single-year state map of counts or density."""
    if frame.empty:
        return
    fig = build_state_choropleth(frame, value_column, midpoint, title, colorbar_title)
    write_figure(fig, save_to)


def plot_historical_density(
    density: pd.DataFrame,
    midpoint: float = 3000,
    save_to: Optional[PlotSaveDestinations] = None,
) -> None:
    """Density maps faceted by the comparison years."""
    if density.empty:
        return
    fig = build_state_choropleth(
        density,
        "po_density",
        midpoint,
        "Post offices per million people",
        "PO per million people",
        facet_column="year",
    )
    write_figure(fig, save_to)


def build_office_density_figure(points: pd.DataFrame, year: int) -> go.Figure:
    """Filled 2-D density contours of office locations with the offices on top."""
    fig = go.Figure()
    fig.add_trace(
        go.Histogram2dContour(
            x=points["longitude"],
            y=points["latitude"],
            colorscale="Viridis",
            contours=dict(coloring="fill", showlines=False),
            opacity=0.4,
            showscale=False,
            hoverinfo="skip",
        )
    )
    fig.add_trace(
        go.Scattergl(
            x=points["longitude"],
            y=points["latitude"],
            mode="markers",
            marker=dict(size=2, color="white", opacity=0.3),
            hoverinfo="skip",
            showlegend=False,
        )
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False, scaleanchor="x", scaleratio=1.3)
    fig.update_layout(
        title=dict(
            text=(
                f"<b>Density of US Post Offices in {year}</b><br>"
                "<sup>Highlighting areas of concentrated postal service coverage</sup>"
            ),
            x=0.5,
            font=dict(size=16, color="white"),
        ),
        plot_bgcolor="black",
        paper_bgcolor="black",
        showlegend=False,
    )
    return fig


def plot_office_density(
    points: pd.DataFrame,
    year: int,
    save_to: Optional[PlotSaveDestinations] = None,
) -> None:
    """Contiguous-US density map of offices open in ``year``."""
    points = points.dropna(subset=["longitude", "latitude"])
    if points.empty:
        return
    fig = build_office_density_figure(points, year)
    write_figure(fig, save_to)


__all__ = [
    "build_office_density_figure",
    "build_state_choropleth",
    "plot_annual_post_offices",
    "plot_historical_density",
    "plot_office_density",
    "plot_state_choropleth",
    "plot_state_post_offices",
]
