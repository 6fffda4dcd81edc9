"""Download helper for TidyTuesday CSV releases."""

from __future__ import annotations

from pathlib import Path

from .config import DATASETS, dataset_url
from .io import (
    download_stream,
    metadata_path,
    needs_download,
    read_metadata,
    sha256sum,
    write_metadata,
)


def download_tidytuesday(dataset_id: str, raw_root: Path, force: bool = False) -> Path:
    """
    Download every CSV of a TidyTuesday dataset into ``raw_root``.

    Parameters
    ----------
    dataset_id:
        Key of ``config.DATASETS`` (``bechdel`` or ``post_offices``).
    raw_root:
        Directory used to store raw files (default: ``data/raw``).
    force:
        If True, redownload files even when the recorded checksum matches.

    Returns
    -------
    Path
        Directory holding the dataset's CSV files.
    """
    if dataset_id not in DATASETS:
        raise ValueError(f"Unknown dataset '{dataset_id}'. Options: {tuple(DATASETS)}")

    config = DATASETS[dataset_id]
    target_root = raw_root / config["folder_name"]
    target_root.mkdir(parents=True, exist_ok=True)

    for file_name in config["files"]:
        target = target_root / file_name
        meta_path = metadata_path(target)
        meta = read_metadata(meta_path)
        expected_sha = meta.get("sha256")

        if force or needs_download(target, expected_sha):
            url = dataset_url(config, file_name)
            print(f"[datahub] Downloading {file_name} from {url}")
            download_stream(url, target)
            updated = dict(meta)
            updated["sha256"] = sha256sum(target)
            updated["url"] = url
            write_metadata(meta_path, updated)
        else:
            print(f"[datahub] {file_name} present; skipping download.")

    return target_root


__all__ = ["download_tidytuesday"]
