from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd

MISSING_FILE_HINT = "Run `python main.py datahub --{flag}` to download it first."


def require_file(path: Path, flag: str) -> Path:
    """Fail with a download hint when a cached CSV is absent."""
    if not path.exists():
        raise FileNotFoundError(f"Missing {path}. {MISSING_FILE_HINT.format(flag=flag)}")
    return path


def require_columns(df: pd.DataFrame, columns: Iterable[str], source: str) -> None:
    """Raise ValueError naming any required column absent from ``df``."""
    missing = [column for column in columns if column not in df.columns]
    if missing:
        raise ValueError(f"{source} is missing required columns: {missing}. Found: {list(df.columns)}")


def to_nullable_int(df: pd.DataFrame, columns: Sequence[str]) -> pd.DataFrame:
    """Coerce year-like columns to pandas nullable integers, blanking unparsable values."""
    out = df.copy()
    for column in columns:
        if column in out.columns:
            out[column] = pd.to_numeric(out[column], errors="coerce").round().astype("Int64")
    return out


def to_float(df: pd.DataFrame, columns: Sequence[str]) -> pd.DataFrame:
    out = df.copy()
    for column in columns:
        if column in out.columns:
            out[column] = pd.to_numeric(out[column], errors="coerce").astype(float)
    return out
