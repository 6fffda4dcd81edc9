"""Plotting utilities for the TidyTuesday charts."""

from .bechdel_digits import build_bechdel_digits_figure, plot_bechdel_digits
from .bechdel_exploratory import plot_decade_pass_rates, plot_yearly_outcomes
from .post_office_animation import render_office_animation
from .post_office_maps import (
    plot_annual_post_offices,
    plot_historical_density,
    plot_office_density,
    plot_state_choropleth,
    plot_state_post_offices,
)
from .save_config import PlotSaveConfig, PlotSaveDestinations, write_figure

__all__ = [
    "build_bechdel_digits_figure",
    "plot_annual_post_offices",
    "plot_bechdel_digits",
    "plot_decade_pass_rates",
    "plot_historical_density",
    "plot_office_density",
    "plot_state_choropleth",
    "plot_state_post_offices",
    "plot_yearly_outcomes",
    "render_office_animation",
    "PlotSaveConfig",
    "PlotSaveDestinations",
    "write_figure",
]
