"""Animated GIF of post office locations over time."""

from __future__ import annotations

import io
from pathlib import Path
from typing import List, Sequence

import numpy as np
import pandas as pd
import plotly.graph_objects as go
from PIL import Image

POINT_COLOR = "#2171b5"


def frame_years(years: pd.Series, frames: int) -> List[int]:
    """Evenly spaced frame years spanning the data, rounded to whole years."""
    if frames < 1:
        raise ValueError("frames must be at least 1.")
    if years.empty:
        return []
    spaced = np.linspace(int(years.min()), int(years.max()), frames)
    return [int(round(value)) for value in spaced]


def build_office_frame(points: pd.DataFrame, year: int) -> go.Figure:
    """Single animation frame: offices open in ``year`` on an Albers USA map."""
    fig = go.Figure(
        go.Scattergeo(
            lon=points["longitude"],
            lat=points["latitude"],
            mode="markers",
            marker=dict(size=2, color=POINT_COLOR, opacity=0.4),
            hoverinfo="skip",
        )
    )
    fig.update_geos(
        scope="usa",
        projection_type="albers usa",
        showland=True,
        landcolor="white",
        showsubunits=True,
        subunitcolor="#cccccc",
        subunitwidth=0.5,
    )
    fig.update_layout(
        title=dict(
            text=f"<b>US Post Offices Distribution</b><br><sup>Year: {year}</sup>",
            x=0.5,
            font=dict(size=16),
        ),
        paper_bgcolor="white",
        margin=dict(l=10, r=10, t=60, b=10),
        showlegend=False,
    )
    return fig


def render_png(fig: go.Figure, width: int, height: int) -> bytes:
    return fig.to_image(format="png", width=width, height=height, engine="kaleido")


def save_gif(images: Sequence[Image.Image], dest: Path, fps: int) -> Path:
    """Write frames as a looping GIF."""
    if not images:
        raise ValueError("No frames to write.")
    dest.parent.mkdir(parents=True, exist_ok=True)
    first, *rest = images
    first.save(
        dest,
        format="GIF",
        save_all=True,
        append_images=list(rest),
        duration=int(1000 / fps),
        loop=0,
    )
    return dest


def render_office_animation(
    office_years: pd.DataFrame,
    dest: Path,
    frames: int = 100,
    fps: int = 5,
    width: int = 800,
    height: int = 500,
) -> Path:
    """
    Render one map per frame year through Kaleido and stitch them into ``dest``.

    Frame years are spread evenly over the data range, so with more frames
    than years some years repeat, and with fewer some are skipped.
    """
    if fps < 1:
        raise ValueError("fps must be at least 1.")
    located = office_years.dropna(subset=["longitude", "latitude"])
    years = frame_years(located["year"], frames)
    if not years:
        raise ValueError("No office locations to animate.")

    images: List[Image.Image] = []
    for idx, year in enumerate(years, start=1):
        points = located[located["year"] == year]
        png = render_png(build_office_frame(points, year), width, height)
        images.append(Image.open(io.BytesIO(png)).convert("RGB"))
        if idx % 25 == 0 or idx == len(years):
            print(f"[plots] Rendered frame {idx}/{len(years)}")

    return save_gif(images, dest, fps)


__all__ = [
    "build_office_frame",
    "frame_years",
    "render_office_animation",
    "render_png",
    "save_gif",
]
