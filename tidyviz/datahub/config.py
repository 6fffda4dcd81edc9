"""Static configuration for dataset download and output paths."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple, TypedDict


class TidyTuesdayConfig(TypedDict):
    base_url: str
    date: str
    files: Tuple[str, ...]
    folder_name: str


# Default directories used by the Typer CLI; callers may override these.
DEFAULT_RAW_ROOT = Path("data/raw")
DEFAULT_OUTPUT_ROOT = Path("data/plots")

TIDYTUESDAY_BASE_URL = "https://raw.githubusercontent.com/rfordatascience/tidytuesday/master/data"

# ---------------------------------------------------------------------------
# Dataset-specific configuration payloads.

BECHDEL: TidyTuesdayConfig = {
    "base_url": TIDYTUESDAY_BASE_URL,
    "date": "2021-03-09",
    "files": ("raw_bechdel.csv", "movies.csv"),
    "folder_name": "bechdel",
}

POST_OFFICES: TidyTuesdayConfig = {
    "base_url": TIDYTUESDAY_BASE_URL,
    "date": "2021-04-13",
    "files": ("post_offices.csv",),
    "folder_name": "post-offices",
}

DATASETS: Dict[str, TidyTuesdayConfig] = {
    "bechdel": BECHDEL,
    "post_offices": POST_OFFICES,
}

# Population tables list full state names; District of Columbia falls through to "DC".
STATE_ABBREVIATIONS: Dict[str, str] = {
    "Alabama": "AL",
    "Alaska": "AK",
    "Arizona": "AZ",
    "Arkansas": "AR",
    "California": "CA",
    "Colorado": "CO",
    "Connecticut": "CT",
    "Delaware": "DE",
    "Florida": "FL",
    "Georgia": "GA",
    "Hawaii": "HI",
    "Idaho": "ID",
    "Illinois": "IL",
    "Indiana": "IN",
    "Iowa": "IA",
    "Kansas": "KS",
    "Kentucky": "KY",
    "Louisiana": "LA",
    "Maine": "ME",
    "Maryland": "MD",
    "Massachusetts": "MA",
    "Michigan": "MI",
    "Minnesota": "MN",
    "Mississippi": "MS",
    "Missouri": "MO",
    "Montana": "MT",
    "Nebraska": "NE",
    "Nevada": "NV",
    "New Hampshire": "NH",
    "New Jersey": "NJ",
    "New Mexico": "NM",
    "New York": "NY",
    "North Carolina": "NC",
    "North Dakota": "ND",
    "Ohio": "OH",
    "Oklahoma": "OK",
    "Oregon": "OR",
    "Pennsylvania": "PA",
    "Rhode Island": "RI",
    "South Carolina": "SC",
    "South Dakota": "SD",
    "Tennessee": "TN",
    "Texas": "TX",
    "Utah": "UT",
    "Vermont": "VT",
    "Virginia": "VA",
    "Washington": "WA",
    "West Virginia": "WV",
    "Wisconsin": "WI",
    "Wyoming": "WY",
}


def dataset_url(config: TidyTuesdayConfig, file_name: str) -> str:
    """Build the raw GitHub URL for one file of a TidyTuesday release."""
    year = config["date"][:4]
    return f"{config['base_url']}/{year}/{config['date']}/{file_name}"


__all__ = [
    "BECHDEL",
    "DATASETS",
    "DEFAULT_OUTPUT_ROOT",
    "DEFAULT_RAW_ROOT",
    "POST_OFFICES",
    "STATE_ABBREVIATIONS",
    "TIDYTUESDAY_BASE_URL",
    "TidyTuesdayConfig",
    "dataset_url",
]
