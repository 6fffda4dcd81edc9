"""Tests for the datahub download helpers, loaders, and pipeline."""

from __future__ import annotations

import json
from pathlib import Path

import sys

import pandas as pd
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tidyviz.datahub.config import BECHDEL, POST_OFFICES, dataset_url
from tidyviz.datahub.download import download_tidytuesday
from tidyviz.datahub.helpers import require_columns, to_nullable_int
from tidyviz.datahub.io import metadata_path, needs_download, read_metadata, sha256sum, write_metadata
from tidyviz.datahub.loader import (
    load_bechdel_movies,
    load_bechdel_ratings,
    load_post_offices,
    load_state_populations,
)
from tidyviz.datahub.pipeline import DataRequest, prepare_datasets


# ---------------------------------------------------------------------------
# Helper fixtures and utilities


def _write_bechdel_fixture(tmp_path: Path) -> Path:
    raw_root = tmp_path / "raw"
    folder = raw_root / BECHDEL["folder_name"]
    folder.mkdir(parents=True, exist_ok=True)
    (folder / "raw_bechdel.csv").write_text(
        "movie_id,imdb_id,title,year,id,rating\n"
        "1,0000001,Carmencita,1888,9602,0\n"
        "2,0000002,Le clown,1892,9804,1\n"
        "3,0000003,Pauvre Pierrot,,9603,2\n"
        "4,0000004,Un bon bock,1892,,\n",
        encoding="utf-8",
    )
    (folder / "movies.csv").write_text(
        "year,imdb,title,test,clean_test,binary\n"
        "2013,tt1711425,21 & Over,notalk,notalk,FAIL\n"
        "2012,tt1343727,Dredd 3D,ok-disagree,ok,PASS\n",
        encoding="utf-8",
    )
    return raw_root


def _write_post_office_fixture(tmp_path: Path) -> Path:
    raw_root = tmp_path / "raw"
    folder = raw_root / POST_OFFICES["folder_name"]
    folder.mkdir(parents=True, exist_ok=True)
    (folder / "post_offices.csv").write_text(
        "name,orig_name,state,county1,established,discontinued,continuous,stamp_index,id,"
        "coordinates,latitude,longitude,gnis_dist,gnis_county,gnis_state\n"
        "ABBEVILLE,ABBEVILLE,AL,HENRY,1833,,FALSE,4,1,TRUE,31.57,-85.25,0,Henry,AL\n"
        "ADAMS,ADAMS,AL,LAUDERDALE,1861,1869,FALSE,,2,FALSE,,,,,\n"
        "BROKEN,BROKEN,AL,X,unknown,1900,FALSE,,3,FALSE,,,,,\n",
        encoding="utf-8",
    )
    return raw_root


# ---------------------------------------------------------------------------
# Helper utility tests


def test_dataset_url() -> None:
    assert dataset_url(BECHDEL, "movies.csv") == (
        "https://raw.githubusercontent.com/rfordatascience/tidytuesday/master/data/2021/2021-03-09/movies.csv"
    )


def test_require_columns_reports_missing() -> None:
    require_columns(pd.DataFrame({"a": [1]}), ("a",), "frame")
    with pytest.raises(ValueError, match="missing required columns"):
        require_columns(pd.DataFrame({"a": [1]}), ("a", "b"), "frame")


def test_to_nullable_int_blanks_garbage() -> None:
    frame = to_nullable_int(pd.DataFrame({"year": ["1900", "n/a", None]}), ("year",))
    assert frame["year"].tolist()[0] == 1900
    assert frame["year"].isna().tolist() == [False, True, True]


def test_metadata_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "movies.csv"
    target.write_text("a,b\n1,2\n")
    meta = metadata_path(target)
    assert meta.name == "movies.csv.meta.json"

    write_metadata(meta, {"sha256": sha256sum(target)})
    assert read_metadata(meta)["sha256"] == sha256sum(target)
    assert not needs_download(target, sha256sum(target))
    assert needs_download(target, "deadbeef")
    assert needs_download(tmp_path / "absent.csv", None)


def test_read_metadata_tolerates_corruption(tmp_path: Path) -> None:
    meta = tmp_path / "x.meta.json"
    meta.write_text("{not json")
    assert read_metadata(meta) == {}


# ---------------------------------------------------------------------------
# Download tests


def test_download_tidytuesday_fetches_every_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    fetched = []

    def fake_download(url: str, dest: Path) -> None:
        fetched.append(url)
        dest.write_text("year,rating\n2000,3\n")

    monkeypatch.setattr("tidyviz.datahub.download.download_stream", fake_download)

    target = download_tidytuesday("bechdel", tmp_path)

    assert target == tmp_path / "bechdel"
    assert [url.rsplit("/", 1)[-1] for url in fetched] == ["raw_bechdel.csv", "movies.csv"]
    meta = json.loads((target / "movies.csv.meta.json").read_text())
    assert meta["url"].endswith("2021-03-09/movies.csv")
    assert meta["sha256"] == sha256sum(target / "movies.csv")


def test_download_tidytuesday_skips_cached(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    calls = []

    def fake_download(url: str, dest: Path) -> None:
        calls.append(url)
        dest.write_text("name\nX\n")

    monkeypatch.setattr("tidyviz.datahub.download.download_stream", fake_download)

    download_tidytuesday("post_offices", tmp_path)
    download_tidytuesday("post_offices", tmp_path)
    assert len(calls) == 1

    download_tidytuesday("post_offices", tmp_path, force=True)
    assert len(calls) == 2


def test_download_tidytuesday_unknown(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        download_tidytuesday("imdb", tmp_path)


# ---------------------------------------------------------------------------
# Loader tests


def test_load_bechdel_ratings_drops_incomplete_rows(tmp_path: Path) -> None:
    raw_root = _write_bechdel_fixture(tmp_path)
    ratings = load_bechdel_ratings(raw_root)

    assert ratings["year"].tolist() == [1888, 1892]
    assert ratings["rating"].tolist() == [0, 1]
    assert ratings["rating"].dtype.kind == "i"


def test_load_bechdel_movies(tmp_path: Path) -> None:
    raw_root = _write_bechdel_fixture(tmp_path)
    movies = load_bechdel_movies(raw_root)

    assert movies["binary"].tolist() == ["FAIL", "PASS"]
    assert movies["year"].tolist() == [2013, 2012]


def test_loader_hints_at_download(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="datahub --bechdel"):
        load_bechdel_ratings(tmp_path)


def test_load_post_offices_coerces_types(tmp_path: Path) -> None:
    raw_root = _write_post_office_fixture(tmp_path)
    offices = load_post_offices(raw_root)

    assert "orig_name" not in offices.columns
    assert offices["established"].tolist()[:2] == [1833, 1861]
    assert pd.isna(offices.loc[2, "established"])
    assert pd.isna(offices.loc[0, "discontinued"])
    assert offices.loc[0, "latitude"] == pytest.approx(31.57)
    assert pd.isna(offices.loc[1, "longitude"])


def test_load_state_populations_maps_names(tmp_path: Path) -> None:
    path = tmp_path / "populations.csv"
    path.write_text(
        "year,state,population\n"
        "1900,New York,7268894\n"
        "1900,District of Columbia,278718\n"
        "1900,Texas,\n",
        encoding="utf-8",
    )
    populations = load_state_populations(path)

    assert populations["state"].tolist() == ["NY", "DC"]
    assert populations["population"].tolist() == [7268894.0, 278718.0]


# ---------------------------------------------------------------------------
# Pipeline tests


def test_data_request_from_flags_all() -> None:
    request = DataRequest.from_flags(all=True, bechdel=False, post_offices=False)
    assert request.datasets == ("bechdel", "post_offices")


def test_data_request_subset() -> None:
    request = DataRequest.from_flags(all=False, bechdel=False, post_offices=True)
    assert request.datasets == ("post_offices",)


def test_data_request_requires_selection() -> None:
    with pytest.raises(ValueError):
        DataRequest.from_flags(all=False, bechdel=False, post_offices=False)


def test_prepare_datasets_invokes_selected(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    downloads = []

    def fake_download(dataset_id: str, raw_root: Path, force: bool = False) -> Path:
        downloads.append((dataset_id, raw_root, force))
        return raw_root / dataset_id

    monkeypatch.setattr("tidyviz.datahub.pipeline.download_tidytuesday", fake_download)

    raw_root = tmp_path / "raw"
    locations = prepare_datasets(DataRequest(datasets=("bechdel", "post_offices")), raw_root, force=True)

    assert downloads == [("bechdel", raw_root, True), ("post_offices", raw_root, True)]
    assert locations == {"bechdel": raw_root / "bechdel", "post_offices": raw_root / "post_offices"}
    assert raw_root.exists()
