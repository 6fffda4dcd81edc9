"""High-level orchestration for downloading datasets."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Literal, Tuple, cast

from .download import download_tidytuesday

DatasetId = Literal["bechdel", "post_offices"]
ALL_DATASETS: Tuple[DatasetId, ...] = ("bechdel", "post_offices")


@dataclass(frozen=True)
class DataRequest:
    """Describe which datasets to materialize."""

    datasets: Tuple[DatasetId, ...]

    @classmethod
    def from_flags(cls, all: bool, bechdel: bool, post_offices: bool) -> "DataRequest":
        """Translate CLI flags into a normalized request."""
        if all:
            selected = list(ALL_DATASETS)
        else:
            selected = [dataset for dataset, flag in zip(ALL_DATASETS, (bechdel, post_offices)) if flag]

        if not selected:
            raise ValueError("Select at least one dataset via --all or dataset flags.")

        return cls(cast(Tuple[DatasetId, ...], tuple(selected)))


def prepare_datasets(request: DataRequest, raw_root: Path, force: bool = False) -> Dict[str, Path]:
    """Download every requested dataset and return where each one landed."""
    raw_root.mkdir(parents=True, exist_ok=True)

    locations: Dict[str, Path] = {}
    for dataset in request.datasets:
        if dataset not in ALL_DATASETS:
            raise ValueError(f"Unknown dataset key '{dataset}'")
        locations[dataset] = download_tidytuesday(dataset, raw_root, force=force)
    return locations


__all__ = ["ALL_DATASETS", "DataRequest", "prepare_datasets"]
