"""Aggregation helpers turning raw TidyTuesday tables into chart-ready summaries."""

from .bechdel import (
    decade_layout,
    decade_pass_rates,
    outcome_counts,
    rating_summary_stats,
    year_summaries,
    yearly_outcome_counts,
)
from .post_offices import (
    annual_counts,
    clean_post_offices,
    density_per_million,
    exclude_states,
    expand_active_years,
    historical_density,
    state_annual_counts,
    state_counts_for_year,
)

__all__ = [
    "annual_counts",
    "clean_post_offices",
    "decade_layout",
    "decade_pass_rates",
    "density_per_million",
    "exclude_states",
    "expand_active_years",
    "historical_density",
    "outcome_counts",
    "rating_summary_stats",
    "state_annual_counts",
    "state_counts_for_year",
    "year_summaries",
    "yearly_outcome_counts",
]
