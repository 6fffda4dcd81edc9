"""Helpers for downloading files and tracking cache metadata."""

from __future__ import annotations

import hashlib
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Mapping, Optional

import requests

METADATA_SUFFIX = ".meta.json"


def sha256sum(path: Path) -> str:
    """Compute the SHA256 checksum for a file."""
    digest = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1024 * 1024), b""):
            digest.update(chunk)
    return digest.hexdigest()


def metadata_path(path: Path) -> Path:
    """Sidecar location for a cached file (``movies.csv`` -> ``movies.csv.meta.json``)."""
    return path.with_name(path.name + METADATA_SUFFIX)


def read_metadata(path: Path) -> Mapping[str, Any]:
    """Load metadata JSON attached to a cached file, returning an empty mapping on failure."""
    if not path.exists():
        return {}
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError:
        return {}


def write_metadata(path: Path, payload: Mapping[str, Any]) -> None:
    """Persist metadata next to the cached file to skip redundant downloads."""
    path.write_text(json.dumps(payload, indent=2, sort_keys=True))


def needs_download(target: Path, expected_sha: Optional[str]) -> bool:
    """Determine whether the file must be re-downloaded."""
    if not target.exists():
        return True
    if not expected_sha:
        return False
    return sha256sum(target) != expected_sha


def download_stream(url: str, dest: Path) -> None:
    """Stream a remote file to disk atomically."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    with requests.get(url, stream=True, timeout=60) as response:
        response.raise_for_status()
        with tempfile.NamedTemporaryFile(delete=False, dir=dest.parent) as tmp:
            for chunk in response.iter_content(chunk_size=8192):
                if chunk:
                    tmp.write(chunk)
    os.replace(tmp.name, dest)


__all__ = [
    "METADATA_SUFFIX",
    "download_stream",
    "metadata_path",
    "needs_download",
    "read_metadata",
    "sha256sum",
    "write_metadata",
]
