"""Exploratory Bechdel charts: yearly outcome counts and decade pass rates."""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px

from .save_config import PlotSaveDestinations, write_figure


def plot_yearly_outcomes(
    yearly_counts: pd.DataFrame,
    save_to: Optional[PlotSaveDestinations] = None,
) -> None:
    """Stacked bars of films per year split by PASS/FAIL."""
    if yearly_counts.empty:
        return

    fig = px.bar(
        yearly_counts,
        x="year",
        y="n",
        color="binary",
        title="Number of Movies by Year and Bechdel Test Outcome",
        labels={"year": "Year", "n": "Number of Movies", "binary": "Bechdel Test"},
        template="simple_white",
    )
    fig.update_layout(barmode="stack")
    write_figure(fig, save_to)


def plot_decade_pass_rates(
    decade_rates: pd.DataFrame,
    save_to: Optional[PlotSaveDestinations] = None,
) -> None:
    """Pass-rate line per decade with points sized by the number of films."""
    if decade_rates.empty:
        return

    fig = px.scatter(
        decade_rates,
        x="decade",
        y="pct_pass",
        size="n_movies",
        title="Percentage of Movies Passing Bechdel Test by Decade<br><sup>Point size indicates number of movies</sup>",
        labels={"decade": "Decade", "pct_pass": "Percentage Passing", "n_movies": "Number of Movies"},
        template="simple_white",
    )
    fig.add_scatter(
        x=decade_rates["decade"],
        y=decade_rates["pct_pass"],
        mode="lines",
        line=dict(color="#333333"),
        showlegend=False,
        hoverinfo="skip",
    )
    fig.update_yaxes(rangemode="tozero", tickformat=".0%")
    write_figure(fig, save_to)


__all__ = ["plot_decade_pass_rates", "plot_yearly_outcomes"]
