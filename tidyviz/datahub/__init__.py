from .pipeline import ALL_DATASETS, DataRequest, prepare_datasets
from .loader import (
    load_bechdel_movies,
    load_bechdel_ratings,
    load_post_offices,
    load_state_populations,
)

__all__ = [
    "ALL_DATASETS",
    "DataRequest",
    "prepare_datasets",
    "load_bechdel_movies",
    "load_bechdel_ratings",
    "load_post_offices",
    "load_state_populations",
]
