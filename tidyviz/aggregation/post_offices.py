"""Cleaning and per-year/per-state counts for historical US post offices."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from tidyviz.datahub.helpers import require_columns

OTHER_STATES = "Other"
OFFICE_COLUMNS = ["name", "state", "established", "discontinued", "latitude", "longitude"]


def clean_post_offices(offices: pd.DataFrame, earliest: int = 1639) -> pd.DataFrame:
    """Drop offices established before ``earliest`` or closed before they opened."""
    require_columns(offices, ("established", "discontinued"), "post offices")
    established = offices["established"]
    discontinued = offices["discontinued"]
    keep = (established >= earliest) & (discontinued.isna() | (discontinued >= established))
    return offices.loc[keep.fillna(False).astype(bool)].reset_index(drop=True)


def expand_active_years(
    offices: pd.DataFrame,
    open_until: int = 2003,
    min_established: int = 1750,
    max_discontinued: int = 2021,
) -> pd.DataFrame:
    """
    Emit one row per office per year it was open, bounds inclusive.

    Offices still open (no ``discontinued``) are treated as closing in
    ``open_until``.
    """
    require_columns(offices, OFFICE_COLUMNS, "post offices")
    frame = offices[OFFICE_COLUMNS].copy()
    frame["discontinued"] = frame["discontinued"].fillna(open_until)
    frame = frame.dropna(subset=["established"])
    frame = frame[(frame["established"] >= min_established) & (frame["discontinued"] <= max_discontinued)]
    if frame.empty:
        return frame.assign(year=pd.Series(dtype=int)).reset_index(drop=True)

    frame = frame.astype({"established": int, "discontinued": int}).reset_index(drop=True)
    span = (frame["discontinued"] - frame["established"] + 1).clip(lower=0).to_numpy()
    expanded = frame.loc[frame.index.repeat(span)]
    expanded = expanded.assign(year=expanded["established"] + expanded.groupby(level=0).cumcount())
    return expanded.reset_index(drop=True)


def annual_counts(office_years: pd.DataFrame) -> pd.DataFrame:
    """Number of offices open in each year."""
    require_columns(office_years, ("year",), "office years")
    return office_years.groupby("year").size().rename("n_offices").reset_index()


def lump_states(states: pd.Series, top_n: int) -> pd.Series:
    """Keep the ``top_n`` most frequent states and relabel the rest as ``Other``."""
    top = states.value_counts().head(top_n).index
    return states.where(states.isin(top), OTHER_STATES)


def state_annual_counts(office_years: pd.DataFrame, top_n: int = 16) -> pd.DataFrame:
    """Per-year counts for the ``top_n`` busiest states, largest totals first."""
    require_columns(office_years, ("year", "state"), "office years")
    lumped = office_years.assign(state=lump_states(office_years["state"], top_n))
    counts = lumped.groupby(["year", "state"]).size().rename("n_offices").reset_index()
    counts = counts[counts["state"] != OTHER_STATES].copy()

    order = counts.groupby("state")["n_offices"].sum().sort_values(ascending=False).index
    counts["state"] = pd.Categorical(counts["state"], categories=list(order), ordered=True)
    return counts.sort_values(["state", "year"]).reset_index(drop=True)


def state_counts_for_year(office_years: pd.DataFrame, year: int) -> pd.DataFrame:
    """Offices open per state in a single year, busiest first."""
    require_columns(office_years, ("year", "state"), "office years")
    subset = office_years[office_years["year"] == year]
    return (
        subset.groupby("state").size().rename("n").reset_index().sort_values("n", ascending=False)
    ).reset_index(drop=True)


def _with_density(counts: pd.DataFrame, count_column: str) -> pd.DataFrame:
    out = counts.copy()
    out["po_density"] = out[count_column] / (out["population"] / 1e6)
    out["po_density"] = out["po_density"].replace([np.inf, -np.inf], np.nan)
    return out


def density_per_million(office_years: pd.DataFrame, populations: pd.DataFrame, year: int) -> pd.DataFrame:
    """Offices per million residents for every state with a population figure in ``year``."""
    require_columns(populations, ("year", "state", "population"), "populations")
    counts = state_counts_for_year(office_years, year)
    same_year = populations.loc[populations["year"] == year, ["state", "population"]]
    joined = counts.merge(same_year, on="state", how="inner")
    return _with_density(joined, "n")


def historical_density(
    office_years: pd.DataFrame,
    populations: pd.DataFrame,
    years_of_interest: Sequence[int] = (1800, 1850, 1900, 1950),
) -> pd.DataFrame:
    """Offices per million residents by state for each year in ``years_of_interest``."""
    require_columns(office_years, ("year", "state"), "office years")
    require_columns(populations, ("year", "state", "population"), "populations")
    counts = office_years.groupby(["year", "state"]).size().rename("n_offices").reset_index()
    joined = counts.merge(populations, on=["year", "state"], how="inner")
    joined = joined[joined["year"].isin(list(years_of_interest))]
    return _with_density(joined, "n_offices").sort_values(["year", "state"]).reset_index(drop=True)


def exclude_states(frame: pd.DataFrame, states: Iterable[str] = ("HI", "AK")) -> pd.DataFrame:
    """Drop rows for the given postal codes (non-contiguous states by default)."""
    require_columns(frame, ("state",), "frame")
    return frame[~frame["state"].isin(list(states))].reset_index(drop=True)


__all__ = [
    "OTHER_STATES",
    "annual_counts",
    "clean_post_offices",
    "density_per_million",
    "exclude_states",
    "expand_active_years",
    "historical_density",
    "lump_states",
    "state_annual_counts",
    "state_counts_for_year",
]
