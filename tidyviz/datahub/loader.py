from __future__ import annotations

from pathlib import Path

import pandas as pd

from .config import BECHDEL, DEFAULT_RAW_ROOT, POST_OFFICES, STATE_ABBREVIATIONS
from .helpers import require_columns, require_file, to_float, to_nullable_int

POST_OFFICE_COLUMNS = (
    "name",
    "state",
    "county1",
    "established",
    "discontinued",
    "continuous",
    "stamp_index",
    "id",
    "coordinates",
    "latitude",
    "longitude",
    "gnis_dist",
    "gnis_county",
    "gnis_state",
)
POST_OFFICE_REQUIRED = ("name", "state", "established", "discontinued", "latitude", "longitude")


def load_bechdel_ratings(raw_root: Path = DEFAULT_RAW_ROOT) -> pd.DataFrame:
    """Load per-film Bechdel ratings (0-3), dropping rows without a year or rating."""
    path = require_file(raw_root / BECHDEL["folder_name"] / "raw_bechdel.csv", "bechdel")
    df = pd.read_csv(path)
    require_columns(df, ("year", "rating"), path.name)

    df = to_nullable_int(df, ("year", "rating"))
    df = df.dropna(subset=["year", "rating"])
    df["year"] = df["year"].astype(int)
    df["rating"] = df["rating"].astype(int)
    return df.reset_index(drop=True)


def load_bechdel_movies(raw_root: Path = DEFAULT_RAW_ROOT) -> pd.DataFrame:
    """Load the film metadata table carrying PASS/FAIL outcomes."""
    path = require_file(raw_root / BECHDEL["folder_name"] / "movies.csv", "bechdel")
    df = pd.read_csv(path)
    require_columns(df, ("year", "binary", "clean_test"), path.name)

    df = to_nullable_int(df, ("year",))
    df = df.dropna(subset=["year"])
    df["year"] = df["year"].astype(int)
    return df.reset_index(drop=True)


def load_post_offices(raw_root: Path = DEFAULT_RAW_ROOT) -> pd.DataFrame:
    """Load post office records with nullable year columns and float coordinates."""
    path = require_file(raw_root / POST_OFFICES["folder_name"] / "post_offices.csv", "post-offices")
    df = pd.read_csv(path, low_memory=False)
    require_columns(df, POST_OFFICE_REQUIRED, path.name)

    keep = [column for column in POST_OFFICE_COLUMNS if column in df.columns]
    df = df[keep]
    df = to_nullable_int(df, ("established", "discontinued", "stamp_index"))
    df = to_float(df, ("latitude", "longitude", "gnis_dist"))
    return df.reset_index(drop=True)


def load_state_populations(path: Path) -> pd.DataFrame:
    """
    Load a historical state population table (``year, state, population``).

    Full state names are mapped to postal codes; names outside the table
    (District of Columbia) become ``DC``.
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing population table {path}.")
    df = pd.read_csv(path)
    require_columns(df, ("year", "state", "population"), path.name)

    df = to_nullable_int(df, ("year",))
    df = to_float(df, ("population",))
    df = df.dropna(subset=["year", "population"])
    df["year"] = df["year"].astype(int)
    df["state"] = df["state"].map(STATE_ABBREVIATIONS).fillna("DC")
    return df[["year", "state", "population"]].reset_index(drop=True)


__all__ = [
    "load_bechdel_movies",
    "load_bechdel_ratings",
    "load_post_offices",
    "load_state_populations",
]
