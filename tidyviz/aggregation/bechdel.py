"""Yearly and decade-level summaries of Bechdel ratings and outcomes."""

from __future__ import annotations

from typing import List, Tuple

import pandas as pd

from tidyviz.datahub.helpers import require_columns
from tidyviz.encoding import YearSummary

MAX_SCORE = 3


def outcome_counts(movies: pd.DataFrame) -> pd.DataFrame:
    """Count films by cleaned test outcome and PASS/FAIL flag."""
    require_columns(movies, ("clean_test", "binary"), "movies")
    return movies.groupby(["clean_test", "binary"]).size().rename("n").reset_index()


def yearly_outcome_counts(movies: pd.DataFrame) -> pd.DataFrame:
    """Count films by release year and PASS/FAIL flag."""
    require_columns(movies, ("year", "binary"), "movies")
    return movies.groupby(["year", "binary"]).size().rename("n").reset_index()


def decade_pass_rates(movies: pd.DataFrame) -> pd.DataFrame:
    """Share of films passing per decade, with the film count for point sizing."""
    require_columns(movies, ("year", "binary"), "movies")
    frame = movies.assign(
        decade=(movies["year"] // 10) * 10,
        passed=movies["binary"] == "PASS",
    )
    return (
        frame.groupby("decade")
        .agg(n_movies=("passed", "size"), pct_pass=("passed", "mean"))
        .reset_index()
    )


def rating_summary_stats(ratings: pd.DataFrame) -> pd.DataFrame:
    """Per-year count, mean, median, min and max rating."""
    require_columns(ratings, ("year", "rating"), "ratings")
    return (
        ratings.groupby("year")["rating"]
        .agg(n="size", mean_rating="mean", median_rating="median", min_rating="min", max_rating="max")
        .reset_index()
    )


def year_summaries(ratings: pd.DataFrame, max_score: int = MAX_SCORE) -> List[YearSummary]:
    """Collapse film ratings into one YearSummary per release year, oldest first."""
    require_columns(ratings, ("year", "rating"), "ratings")
    if ratings.empty:
        return []

    grouped = ratings.assign(passed=ratings["rating"] == max_score).groupby("year")
    table = pd.DataFrame(
        {
            "median_score": grouped["rating"].median(),
            "pass_fraction": grouped["passed"].mean(),
        }
    ).sort_index()

    return [
        YearSummary(
            year=int(year),
            median_score=float(row.median_score),
            pass_fraction=float(row.pass_fraction),
        )
        for year, row in table.iterrows()
    ]


def decade_layout(year: int) -> Tuple[int, int]:
    """
    Place a year on the decade grid used by the digit chart.

    Rows are decades starting at year 1 (1991-2000 share a row); the column
    runs from 1 to 10.
    """
    decade = (year - 1) // 10 * 10
    return decade, year - decade


__all__ = [
    "MAX_SCORE",
    "decade_layout",
    "decade_pass_rates",
    "rating_summary_stats",
    "outcome_counts",
    "year_summaries",
    "yearly_outcome_counts",
]
